from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional

from core.events.domain_events import DomainEvents
from core.events.notifications import NotificationCenter
from core.exceptions import DomainError, PermissionDeniedError, TaskNotFoundError
from core.interfaces import TaskRepository
from core.models import Task, TaskPriority, TaskStatus, next_timestamp_id
from core.services.auth.authorization import (
    TaskAccessPolicy,
    can_assign_to_others,
    require_permission,
)
from core.services.auth.session import UserSessionContext, UserSessionPrincipal


logger = logging.getLogger(__name__)


class TaskLifecycleMixin:
    _tasks: List[Task]
    _task_repo: TaskRepository
    _user_session: UserSessionContext
    _notifications: NotificationCenter
    _events: DomainEvents | None
    _modify_policy: TaskAccessPolicy
    _delete_policy: TaskAccessPolicy
    _clock: Callable[[], datetime]
    _last_error: DomainError | None

    def create_task(
        self,
        title: str,
        description: str,
        assigned_to: str | None = None,
        status: TaskStatus | str | None = None,
        priority: TaskPriority | str | None = None,
        created_by: str | None = None,
    ) -> Optional[Task]:
        principal = self._user_session.principal
        if principal is None:
            logger.debug("Ignoring create_task: no authenticated user")
            return None

        try:
            require_permission(self._user_session, "add_own_task", operation_label="create task")
            clean_title = self._validate_task_title(title)
            clean_description = self._validate_task_description(description)
            assignee = self._validate_assignee(assigned_to) if assigned_to else principal.user_id
            if assignee != principal.user_id and not can_assign_to_others(principal):
                raise PermissionDeniedError("You do not have permission to assign tasks to other users")
            task_status = self._coerce_status(status) if status is not None else TaskStatus.PENDING
            task_priority = (
                self._coerce_priority(priority) if priority is not None else TaskPriority.MEDIUM
            )
        except DomainError as exc:
            self._report_failure(exc, operation="create task")
            return None

        if created_by is not None and created_by != principal.user_id:
            logger.debug("Ignoring created_by=%s; tasks are created by the caller", created_by)

        now = self._clock()
        task = Task.create(
            task_id=next_timestamp_id(now, (t.id for t in self._tasks)),
            title=clean_title,
            description=clean_description,
            assigned_to=assignee,
            created_by=principal.user_id,
            now=now,
            status=task_status,
            priority=task_priority,
        )
        self._persist([*self._tasks, task])
        logger.info("Created task %s - %s assigned to %s", task.id, task.title, task.assigned_to)
        self._after_change(task.id, "Task created successfully")
        return replace(task)

    def update_task(
        self,
        task_id: str,
        updates: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> Optional[Task]:
        principal = self._user_session.principal
        if principal is None:
            logger.debug("Ignoring update_task(%s): no authenticated user", task_id)
            return None

        changes = {**(updates or {}), **fields}
        try:
            index = self._require_task_index(task_id)
            task = self._tasks[index]
            if not self._modify_policy(principal, task):
                raise PermissionDeniedError("You do not have permission to update this task")
            cleaned = self._clean_updates(changes)
            self._check_reassignment(principal, task, cleaned.get("assigned_to"))
        except DomainError as exc:
            self._report_failure(exc, operation=f"update task {task_id}")
            return None

        updated = replace(task, **cleaned, updated_at=max(self._clock(), task.updated_at))
        tasks = list(self._tasks)
        tasks[index] = updated
        self._persist(tasks)
        logger.info("Updated task %s fields=%s", updated.id, sorted(cleaned))
        self._after_change(updated.id, "Task updated successfully")
        return replace(updated)

    def delete_task(self, task_id: str) -> bool:
        principal = self._user_session.principal
        if principal is None:
            logger.debug("Ignoring delete_task(%s): no authenticated user", task_id)
            return False

        try:
            index = self._require_task_index(task_id)
            if not self._delete_policy(principal, self._tasks[index]):
                raise PermissionDeniedError("You do not have permission to delete this task")
        except DomainError as exc:
            self._report_failure(exc, operation=f"delete task {task_id}")
            return False

        self._persist([t for i, t in enumerate(self._tasks) if i != index])
        logger.info("Deleted task %s", task_id)
        self._after_change(task_id, "Task deleted successfully")
        return True

    def consume_last_error(self) -> DomainError | None:
        error = self._last_error
        self._last_error = None
        return error

    def _require_task_index(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError()

    @staticmethod
    def _check_reassignment(
        principal: UserSessionPrincipal,
        task: Task,
        new_assignee: str | None,
    ) -> None:
        if new_assignee is None or new_assignee == task.assigned_to:
            return
        if not can_assign_to_others(principal):
            raise PermissionDeniedError("You do not have permission to reassign this task")

    def _persist(self, tasks: List[Task]) -> None:
        self._task_repo.save(tasks)
        self._tasks = tasks

    def _after_change(self, task_id: str, message: str) -> None:
        self._last_error = None
        if self._events is not None:
            self._events.tasks_changed.emit(task_id)
        self._notifications.success(message)

    def _report_failure(self, exc: DomainError, *, operation: str) -> None:
        self._last_error = exc
        logger.warning("Refused to %s: [%s] %s", operation, exc.code, exc)
        self._notifications.error(str(exc), code=exc.code)


__all__ = ["TaskLifecycleMixin"]
