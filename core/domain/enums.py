from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    WORKER = "worker"
    MANAGEMENT = "management"
    UNAUTHENTICATED = "unauthenticated"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


__all__ = ["UserRole", "TaskStatus", "TaskPriority"]
