from core.domain.auth import Account
from core.domain.enums import TaskPriority, TaskStatus, UserRole
from core.domain.identifiers import next_sequential_id, next_timestamp_id, utc_now
from core.domain.task import Task

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
