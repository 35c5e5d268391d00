from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from core.models import Account, UserRole

DEFAULT_PERMISSIONS: Mapping[str, str] = MappingProxyType(
    {
        "view_own_tasks": "View tasks assigned to you",
        "add_own_task": "Create tasks for yourself",
        "delete_own_task": "Delete tasks assigned to you",
        "view_all_tasks": "View every task",
        "add_task_to_any": "Create or reassign tasks for anyone",
        "modify_any_task": "Edit any task",
        "delete_any_task": "Delete any task",
    }
)

_WORKER_PERMISSIONS = frozenset({"view_own_tasks", "add_own_task", "delete_own_task"})

ROLE_PERMISSIONS: Mapping[UserRole, frozenset[str]] = MappingProxyType(
    {
        UserRole.WORKER: _WORKER_PERMISSIONS,
        UserRole.MANAGEMENT: _WORKER_PERMISSIONS
        | {
            "view_all_tasks",
            "add_task_to_any",
            "modify_any_task",
            "delete_any_task",
        },
        UserRole.UNAUTHENTICATED: frozenset(),
    }
)


DEFAULT_ACCOUNTS: tuple[Account, ...] = (
    Account(
        id="1",
        name="John Worker",
        email="worker1@factory.com",
        password="password123",
        role=UserRole.WORKER,
    ),
    Account(
        id="2",
        name="Jane Worker",
        email="worker2@factory.com",
        password="password123",
        role=UserRole.WORKER,
    ),
    Account(
        id="3",
        name="Admin Manager",
        email="admin@factory.com",
        password="admin123",
        role=UserRole.MANAGEMENT,
    ),
)


def permissions_for_role(role: UserRole | str | None) -> frozenset[str]:
    if role is None:
        return ROLE_PERMISSIONS[UserRole.UNAUTHENTICATED]
    try:
        return ROLE_PERMISSIONS[UserRole(role)]
    except ValueError:
        return frozenset()


def default_accounts() -> list[Account]:
    return [
        Account(id=a.id, name=a.name, email=a.email, password=a.password, role=a.role)
        for a in DEFAULT_ACCOUNTS
    ]


__all__ = [
    "DEFAULT_PERMISSIONS",
    "ROLE_PERMISSIONS",
    "DEFAULT_ACCOUNTS",
    "permissions_for_role",
    "default_accounts",
]
