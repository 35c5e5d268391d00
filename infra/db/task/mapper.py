from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core.models import Task, TaskPriority, TaskStatus


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _parse_timestamp(value: str) -> datetime:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "priority": task.priority.value,
        "assignedTo": task.assigned_to,
        "createdBy": task.created_by,
        "createdAt": _format_timestamp(task.created_at),
        "updatedAt": _format_timestamp(task.updated_at),
    }


def task_from_record(obj: dict[str, Any]) -> Task:
    return Task(
        id=str(obj["id"]),
        title=obj["title"],
        description=obj.get("description", ""),
        status=TaskStatus(obj.get("status", TaskStatus.PENDING.value)),
        priority=TaskPriority(obj.get("priority", TaskPriority.MEDIUM.value)),
        assigned_to=str(obj["assignedTo"]),
        created_by=str(obj["createdBy"]),
        created_at=_parse_timestamp(obj["createdAt"]),
        updated_at=_parse_timestamp(obj["updatedAt"]),
    )


__all__ = ["task_to_record", "task_from_record"]
