import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from promo_quoter.core.application.exceptions import IdempotencyKeyConflictError
from promo_quoter.core.application.ports import IdempotencyPort
from promo_quoter.core.domain.order import IdempotencyRecord
from promo_quoter.infrastructure.repositories.json_file_store import JsonFileStore

STORE_FILE_NAME = "idempotency_store.json"


class IdempotencyStoreFileAdapter(IdempotencyPort):
    """JSON-file key store. Keys are unique; a second insert of the same key is rejected."""

    def __init__(self, store_dir: Path):
        self.store_dir = store_dir
        self.file_path = self.store_dir / STORE_FILE_NAME
        self._file = JsonFileStore(self.file_path)
        self._lock = threading.Lock()

    def save(self, record: IdempotencyRecord) -> None:
        with self._lock:
            data = self._file.read()
            if record.key in data:
                raise IdempotencyKeyConflictError(
                    f"Idempotency key '{record.key}' already recorded",
                    context={"idempotency_key": record.key},
                )
            data[record.key] = {
                "order_id": record.order_id,
                "created_at": record.created_at.isoformat(),
                "request_hash": record.request_hash,
            }
            self._file.write(data)

    def find_by_key(self, key: str) -> IdempotencyRecord | None:
        with self._lock:
            entry = self._file.read().get(key)
        if entry is None:
            return None
        return IdempotencyRecord(
            key=key,
            order_id=entry["order_id"],
            created_at=datetime.fromisoformat(entry["created_at"]),
            request_hash=entry.get("request_hash", "NA"),
        )

    def count(self) -> int:
        with self._lock:
            return len(self._file.read())

    def snapshot(self) -> dict[str, dict[str, Any]]:
        with self._lock:
            return self._file.read()

    def restore(self, state: dict[str, dict[str, Any]]) -> None:
        with self._lock:
            self._file.write(state)
