"""Domain helpers for user-record validation and field assignment."""
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Mapping

REQUIRED_FIELDS = ("name", "email", "mobile", "location")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MOBILE_PATTERN = re.compile(r"[0-9]{10}")
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def field_value(payload: Mapping[str, Any], key: str) -> str:
    """Return the submitted value as text, or "" when it counts as missing."""
    value = payload.get(key)
    if isinstance(value, str):
        return value
    # JSON clients sometimes send the mobile number as a bare integer
    if isinstance(value, int) and not isinstance(value, bool) and value:
        return str(value)
    return ""


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_mobile(value: str | None) -> bool:
    if not value:
        return False
    return bool(MOBILE_PATTERN.fullmatch(value))


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z (2024-05-01T10:20:30.123Z)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_identifier(moment: datetime, records: Iterable[Mapping[str, Any]]) -> int:
    """Epoch milliseconds, bumped past the highest stored id when the clock has not moved."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    millis = (moment - EPOCH) // timedelta(milliseconds=1)
    highest = 0
    for record in records:
        current = record.get("id")
        if isinstance(current, int) and not isinstance(current, bool) and current > highest:
            highest = current
    return max(millis, highest + 1)
