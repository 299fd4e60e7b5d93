import threading

from promo_quoter.core.application.exceptions import IdempotencyKeyConflictError
from promo_quoter.core.application.ports import IdempotencyPort
from promo_quoter.core.domain.order import IdempotencyRecord


class InMemoryIdempotencyRepository(IdempotencyPort):
    """Insert-only key store. A second insert of the same key is rejected."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, IdempotencyRecord] = {}

    def find_by_key(self, key: str) -> IdempotencyRecord | None:
        with self._lock:
            return self._records.get(key)

    def save(self, record: IdempotencyRecord) -> None:
        with self._lock:
            if record.key in self._records:
                raise IdempotencyKeyConflictError(
                    f"Idempotency key '{record.key}' already recorded",
                    context={"idempotency_key": record.key},
                )
            self._records[record.key] = record

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def snapshot(self) -> dict[str, IdempotencyRecord]:
        with self._lock:
            return dict(self._records)

    def restore(self, state: dict[str, IdempotencyRecord]) -> None:
        with self._lock:
            self._records = dict(state)
