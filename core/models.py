from __future__ import annotations

from core.domain import (
    Account,
    Task,
    TaskPriority,
    TaskStatus,
    UserRole,
    next_sequential_id,
    next_timestamp_id,
    utc_now,
)

__all__ = [
    "utc_now",
    "next_sequential_id",
    "next_timestamp_id",
    "UserRole",
    "TaskStatus",
    "TaskPriority",
    "Account",
    "Task",
]
