from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.domain.enums import TaskPriority, TaskStatus


@dataclass
class Task:
    id: str
    title: str
    description: str
    assigned_to: str
    created_by: str
    created_at: datetime
    updated_at: datetime
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM

    @staticmethod
    def create(
        task_id: str,
        title: str,
        description: str,
        assigned_to: str,
        created_by: str,
        now: datetime,
        status: TaskStatus = TaskStatus.PENDING,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> "Task":
        return Task(
            id=task_id,
            title=title,
            description=description,
            assigned_to=assigned_to,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            status=status,
            priority=priority,
        )


__all__ = ["Task"]
