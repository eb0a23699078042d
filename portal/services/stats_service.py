"""Aggregate statistics over the registered user records."""
from __future__ import annotations

from typing import Sequence

RECENT_LIMIT = 5


def build_stats(records: Sequence[dict], recent_limit: int = RECENT_LIMIT) -> dict:
    """
    Total count, per-location counts (keys in first-seen order) and the most
    recently inserted records, newest first. Recency follows insertion order,
    not the registeredAt timestamp.
    """
    location_counts: dict[str, int] = {}
    for record in records:
        location = str(record.get("location"))
        location_counts[location] = location_counts.get(location, 0) + 1

    recent = list(reversed(records[-recent_limit:])) if recent_limit > 0 else []
    return {
        "totalUsers": len(records),
        "locationWiseUsers": location_counts,
        "recentRegistrations": recent,
    }
