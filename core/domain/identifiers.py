from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_sequential_id(existing_count: int) -> str:
    return str(existing_count + 1)


def next_timestamp_id(now: datetime, existing_ids: Iterable[str] = ()) -> str:
    """Millisecond timestamp id, bumped past any numeric id already taken."""
    candidate = int(now.timestamp() * 1000)
    for value in existing_ids:
        if value.isascii() and value.isdigit() and int(value) >= candidate:
            candidate = int(value) + 1
    return str(candidate)


__all__ = ["utc_now", "next_sequential_id", "next_timestamp_id"]
