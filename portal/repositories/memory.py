"""In-memory backend used by tests and the STORAGE_BACKEND=memory mode."""
from __future__ import annotations

import copy
from typing import Iterable, Sequence

from portal.repositories.base import StorageReadError


class InMemoryUserRepository:
    """Keeps deep copies so callers cannot mutate stored records in place."""

    def __init__(self, records: Iterable[dict] | None = None) -> None:
        self._records: list[dict] = copy.deepcopy(list(records or []))
        self.fail_reads = False
        self.fail_writes = False
        self.save_calls = 0

    def initialize(self) -> None:
        return None

    def load_all(self) -> list[dict]:
        if self.fail_reads:
            raise StorageReadError("simulated read failure")
        return copy.deepcopy(self._records)

    def save_all(self, records: Sequence[dict]) -> bool:
        self.save_calls += 1
        if self.fail_writes:
            return False
        self._records = copy.deepcopy(list(records))
        return True
