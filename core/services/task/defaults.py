from __future__ import annotations

from datetime import datetime, timedelta

from core.models import Task, TaskPriority, TaskStatus

_DAY = timedelta(days=1)


def initial_tasks(now: datetime) -> list[Task]:
    """The first-run task set, dated relative to ``now``."""
    return [
        Task(
            id="1",
            title="Inspect Assembly Line A",
            description="Perform routine inspection of Assembly Line A and report any issues.",
            status=TaskStatus.PENDING,
            priority=TaskPriority.HIGH,
            assigned_to="1",
            created_by="3",
            created_at=now - _DAY,
            updated_at=now - _DAY,
        ),
        Task(
            id="2",
            title="Maintenance on Machine B",
            description="Perform scheduled maintenance on Machine B following standard procedure.",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.MEDIUM,
            assigned_to="2",
            created_by="3",
            created_at=now - 2 * _DAY,
            updated_at=now - _DAY,
        ),
        Task(
            id="3",
            title="Update Safety Documentation",
            description="Review and update safety procedures for the new equipment.",
            status=TaskStatus.COMPLETED,
            priority=TaskPriority.MEDIUM,
            assigned_to="1",
            created_by="1",
            created_at=now - 4 * _DAY,
            updated_at=now - 2 * _DAY,
        ),
        Task(
            id="4",
            title="Inventory Check",
            description="Perform monthly inventory check of raw materials.",
            status=TaskStatus.PENDING,
            priority=TaskPriority.LOW,
            assigned_to="2",
            created_by="2",
            created_at=now - _DAY,
            updated_at=now - _DAY,
        ),
    ]


__all__ = ["initial_tasks"]
