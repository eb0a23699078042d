"""
Registration and lookup use cases.

Every operation loads the full collection from the repository and, for
mutations, writes the full collection back.
"""

from __future__ import annotations

import contextlib
import threading
from datetime import datetime, timezone
from typing import Any, Callable, ContextManager, Mapping

from portal.core.logging import get_logger
from portal.domain.users import (
    REQUIRED_FIELDS,
    field_value,
    is_valid_email,
    is_valid_mobile,
    iso_timestamp,
    next_identifier,
)
from portal.repositories.base import StorageError, StorageReadError, UserRepository
from portal.services.stats_service import build_stats

logger = get_logger(__name__)


class UserServiceError(Exception):
    """Base exception for the user workflow."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(UserServiceError):
    """Client supplied data that cannot be accepted."""


class MissingFieldsError(ValidationError):
    pass


class InvalidEmailError(ValidationError):
    pass


class InvalidMobileError(ValidationError):
    pass


class DuplicateEmailError(ValidationError):
    pass


class UserNotFoundError(UserServiceError):
    pass


class StorageWriteError(StorageError):
    """Raised when the updated collection could not be persisted."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserService:
    """Validates input, enforces e-mail uniqueness and applies CRUD/stats operations."""

    def __init__(
        self,
        repository: UserRepository,
        *,
        clock: Callable[[], datetime] = _utcnow,
        strict_reads: bool = False,
        serialize_writes: bool = True,
    ) -> None:
        self.repository = repository
        self.clock = clock
        self.strict_reads = strict_reads
        self._lock = threading.Lock() if serialize_writes else None

    # -------------------------------------- helpers --------------------------------------
    def _write_guard(self) -> ContextManager:
        return self._lock if self._lock is not None else contextlib.nullcontext()

    def _load(self, *, for_write: bool = False) -> list[dict]:
        try:
            return list(self.repository.load_all())
        except StorageReadError:
            # rewriting an unreadable store would destroy whatever it still holds
            if self.strict_reads or for_write:
                raise
            # fail open: an unreadable store behaves like an empty one
            logger.error("Error reading users; treating store as empty", exc_info=True)
            return []

    # -------------------------------------- use cases --------------------------------------
    def register(self, payload: Mapping[str, Any]) -> dict:
        fields = {key: field_value(payload, key) for key in REQUIRED_FIELDS}
        if not all(fields.values()):
            raise MissingFieldsError("All fields are required")
        if not is_valid_email(fields["email"]):
            raise InvalidEmailError("Invalid email format")
        if not is_valid_mobile(fields["mobile"]):
            raise InvalidMobileError("Mobile number must be 10 digits")

        with self._write_guard():
            users = self._load(for_write=True)
            if any(user.get("email") == fields["email"] for user in users):
                raise DuplicateEmailError("Email already registered")

            now = self.clock()
            new_user = {
                "id": next_identifier(now, users),
                "name": fields["name"],
                "email": fields["email"],
                "mobile": fields["mobile"],
                "location": fields["location"],
                "registeredAt": iso_timestamp(now),
            }
            users.append(new_user)
            if not self.repository.save_all(users):
                raise StorageWriteError("Error saving user data")

        logger.info("Registered user %s", new_user["id"])
        logger.debug("Registered user %s", new_user["id"], extra={"email": new_user["email"]})
        return new_user

    def list_users(self) -> list[dict]:
        return self._load()

    def get_user(self, email: str) -> dict:
        for user in self._load():
            if user.get("email") == email:
                return user
        raise UserNotFoundError("User not found")

    def delete_user(self, email: str) -> None:
        with self._write_guard():
            users = self._load(for_write=True)
            remaining = [user for user in users if user.get("email") != email]
            if len(remaining) == len(users):
                raise UserNotFoundError("User not found")
            if not self.repository.save_all(remaining):
                raise StorageWriteError("Error saving user data")
        logger.info("Deleted %d user record(s)", len(users) - len(remaining))
        logger.debug("Deleted user", extra={"email": email})

    def stats(self) -> dict:
        return build_stats(self._load())
