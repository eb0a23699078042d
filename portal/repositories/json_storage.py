"""
JSON file persistence adapter.

The whole collection lives in a single file holding a JSON array of
user-record objects. Every read loads the full file and every write replaces it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence
import json
import os

from portal.core.logging import get_logger
from portal.repositories.base import StorageReadError

logger = get_logger(__name__)


class JsonUserRepository:
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def initialize(self) -> None:
        """Create the file with an empty array when it does not exist yet."""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("[]", encoding="utf-8")
        logger.info("Initialized empty user store at %s", self.path)

    def load_all(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageReadError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise StorageReadError(f"{self.path} does not hold a JSON array")
        # a rewrite would drop entries we cannot model, so refuse to load them
        if not all(isinstance(item, dict) for item in data):
            raise StorageReadError(f"{self.path} holds entries that are not user objects")
        return data

    def save_all(self, records: Sequence[dict]) -> bool:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(list(records), ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError):
            logger.error("Error writing users to %s", self.path, exc_info=True)
            try:
                tmp.unlink()
            except OSError:
                pass
            return False
        return True
