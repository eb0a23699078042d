"""Storage contract shared by every user-record backend."""
from __future__ import annotations

from typing import Protocol, Sequence


class StorageError(Exception):
    """Base exception for persistence failures."""


class StorageReadError(StorageError):
    """Raised when the persisted collection exists but cannot be read or parsed."""


class UserRepository(Protocol):
    """Whole-collection load/save over an ordered list of user-record dicts."""

    def initialize(self) -> None:
        ...

    def load_all(self) -> list[dict]:
        ...

    def save_all(self, records: Sequence[dict]) -> bool:
        ...
