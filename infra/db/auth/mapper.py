from __future__ import annotations

from typing import Any

from core.models import Account, UserRole
from core.services.auth.session import UserSessionPrincipal


def account_to_record(account: Account) -> dict[str, Any]:
    return {
        "id": account.id,
        "name": account.name,
        "email": account.email,
        "password": account.password,
        "role": account.role.value,
    }


def account_from_record(obj: dict[str, Any]) -> Account:
    return Account(
        id=str(obj["id"]),
        name=obj["name"],
        email=obj["email"],
        password=obj["password"],
        role=UserRole(obj.get("role", UserRole.WORKER.value)),
    )


def principal_to_record(principal: UserSessionPrincipal) -> dict[str, Any]:
    return {
        "id": principal.user_id,
        "name": principal.name,
        "email": principal.email,
        "role": principal.role.value,
    }


def principal_from_record(obj: dict[str, Any]) -> UserSessionPrincipal:
    return UserSessionPrincipal(
        user_id=str(obj["id"]),
        name=obj["name"],
        email=obj["email"],
        role=UserRole(obj["role"]),
    )


__all__ = [
    "account_to_record",
    "account_from_record",
    "principal_to_record",
    "principal_from_record",
]
