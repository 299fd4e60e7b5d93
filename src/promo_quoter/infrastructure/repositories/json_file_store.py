import json
import os
import tempfile
from pathlib import Path
from typing import Any

from promo_quoter.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("json_file_store")


class JsonFileStore:
    """A single JSON object kept in one file. Writes replace the file atomically."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        if not self.file_path.exists():
            self.write({})

    def read(self) -> dict[str, Any]:
        if not self.file_path.exists():
            return {}
        content = self.file_path.read_text(encoding="utf-8").strip()
        if not content:
            return {}
        return json.loads(content)

    def write(self, data: dict[str, Any]) -> None:
        # Temp file in the same directory so the rename stays on one filesystem
        tmp = tempfile.NamedTemporaryFile(
            "w", dir=self.file_path.parent, prefix=".", suffix=".tmp", delete=False, encoding="utf-8"
        )
        try:
            with tmp:
                json.dump(data, tmp, indent=2)
            os.replace(tmp.name, self.file_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(
                "Failed to write store file",
                path=str(self.file_path),
                error_type=type(e).__name__,
                error_details=str(e),
            )
            if os.path.exists(tmp.name):
                os.remove(tmp.name)
            raise
