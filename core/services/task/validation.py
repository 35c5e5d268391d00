from __future__ import annotations

from typing import Any, Mapping

from core.exceptions import ValidationError
from core.models import TaskPriority, TaskStatus

MIN_TITLE_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 10

EDITABLE_FIELDS = frozenset({"title", "description", "status", "priority", "assigned_to"})
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "created_by", "updated_at"})

# stored record keys accepted as update field names
FIELD_ALIASES = {
    "assignedTo": "assigned_to",
    "createdAt": "created_at",
    "createdBy": "created_by",
    "updatedAt": "updated_at",
}


class TaskValidationMixin:
    def _validate_task_title(self, title: str) -> str:
        value = (title or "").strip()
        if not value:
            raise ValidationError("Task title cannot be empty.", code="TASK_TITLE_EMPTY")
        if len(value) < MIN_TITLE_LENGTH:
            raise ValidationError(
                f"Title must be at least {MIN_TITLE_LENGTH} characters.",
                code="TASK_TITLE_TOO_SHORT",
            )
        return value

    def _validate_task_description(self, description: str) -> str:
        value = (description or "").strip()
        if len(value) < MIN_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters.",
                code="TASK_DESCRIPTION_TOO_SHORT",
            )
        return value

    def _validate_assignee(self, assigned_to: str) -> str:
        value = (assigned_to or "").strip()
        if not value:
            raise ValidationError("Task must be assigned to someone.", code="TASK_ASSIGNEE_EMPTY")
        return value

    @staticmethod
    def _coerce_status(value: TaskStatus | str) -> TaskStatus:
        try:
            return TaskStatus(value)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown task status: {value!r}.", code="TASK_INVALID_STATUS"
            ) from exc

    @staticmethod
    def _coerce_priority(value: TaskPriority | str) -> TaskPriority:
        try:
            return TaskPriority(value)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown task priority: {value!r}.", code="TASK_INVALID_PRIORITY"
            ) from exc

    def _clean_updates(self, updates: Mapping[str, Any]) -> dict[str, Any]:
        updates = {FIELD_ALIASES.get(key, key): value for key, value in updates.items()}
        unknown = set(updates) - EDITABLE_FIELDS - IMMUTABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown task fields: {', '.join(sorted(unknown))}.",
                code="TASK_UNKNOWN_FIELD",
            )

        cleaned: dict[str, Any] = {}
        for key, value in updates.items():
            if key in IMMUTABLE_FIELDS or value is None:
                continue
            if key == "title":
                cleaned[key] = self._validate_task_title(value)
            elif key == "description":
                cleaned[key] = self._validate_task_description(value)
            elif key == "status":
                cleaned[key] = self._coerce_status(value)
            elif key == "priority":
                cleaned[key] = self._coerce_priority(value)
            elif key == "assigned_to":
                cleaned[key] = self._validate_assignee(value)
        return cleaned


__all__ = [
    "TaskValidationMixin",
    "EDITABLE_FIELDS",
    "IMMUTABLE_FIELDS",
    "FIELD_ALIASES",
    "MIN_TITLE_LENGTH",
    "MIN_DESCRIPTION_LENGTH",
]
