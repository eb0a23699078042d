"""Builders shared by the test modules."""
from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta

from portal.core.config import Settings


def make_settings(**overrides) -> Settings:
    base = Settings(
        app_env="test",
        data_file="users.json",
        storage_backend="json",
        database_url="",
        cors_origins=("*",),
        static_dir="",
        log_level="WARNING",
        host="127.0.0.1",
        port=3000,
        strict_reads=False,
        serialize_writes=True,
    )
    return dataclasses.replace(base, **overrides)


class StepClock:
    """Deterministic clock advancing by `step` on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(0)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


def citizen(email: str = "asha@example.com", location: str = "Jaipur", **overrides) -> dict:
    payload = {"name": "Asha Verma", "email": email, "mobile": "9876543210", "location": location}
    payload.update(overrides)
    return payload
