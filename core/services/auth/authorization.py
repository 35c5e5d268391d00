from __future__ import annotations

from typing import Callable

from core.exceptions import PermissionDeniedError
from core.models import Task
from core.services.auth.session import UserSessionContext, UserSessionPrincipal

TaskAccessPolicy = Callable[[UserSessionPrincipal, Task], bool]


def require_permission(
    user_session: UserSessionContext | None,
    permission_code: str,
    *,
    operation_label: str,
) -> None:
    if user_session is not None and user_session.has_permission(permission_code):
        return
    raise PermissionDeniedError(
        f"Permission denied for {operation_label}. Missing '{permission_code}'."
    )


def is_management_session(user_session: UserSessionContext | None) -> bool:
    principal = user_session.principal if user_session is not None else None
    if principal is None:
        return False
    return principal.is_management


def is_assignee(principal: UserSessionPrincipal, task: Task) -> bool:
    return task.assigned_to == principal.user_id


def can_modify_task(principal: UserSessionPrincipal, task: Task) -> bool:
    if "modify_any_task" in principal.permissions:
        return True
    return is_assignee(principal, task) and "view_own_tasks" in principal.permissions


def can_delete_task(principal: UserSessionPrincipal, task: Task) -> bool:
    if "delete_any_task" in principal.permissions:
        return True
    return is_assignee(principal, task) and "delete_own_task" in principal.permissions


def can_assign_to_others(principal: UserSessionPrincipal) -> bool:
    return "add_task_to_any" in principal.permissions


__all__ = [
    "TaskAccessPolicy",
    "require_permission",
    "is_management_session",
    "is_assignee",
    "can_modify_task",
    "can_delete_task",
    "can_assign_to_others",
]
