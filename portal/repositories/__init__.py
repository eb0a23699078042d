"""
Persistence adapters.

These modules encapsulate how user records are stored/retrieved (JSON file,
SQL database or memory). Services depend on the UserRepository interface
rather than touching the storage directly.
"""

from __future__ import annotations

from portal.core.config import Settings
from portal.repositories.base import StorageError, StorageReadError, UserRepository
from portal.repositories.json_storage import JsonUserRepository
from portal.repositories.memory import InMemoryUserRepository


def build_repository(settings: Settings) -> UserRepository:
    """Pick the storage backend named by STORAGE_BACKEND."""
    backend = settings.storage_backend
    if backend == "json":
        return JsonUserRepository(settings.data_file)
    if backend == "memory":
        return InMemoryUserRepository()
    if backend == "sql":
        # imported lazily so the JSON backend never needs a database driver
        from portal.repositories.sql_repository import SQLUserRepository

        return SQLUserRepository(settings.database_url)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


__all__ = [
    "InMemoryUserRepository",
    "JsonUserRepository",
    "StorageError",
    "StorageReadError",
    "UserRepository",
    "build_repository",
]
