from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from core.models import Account, UserRole
from core.services.auth.policy import permissions_for_role


@dataclass(frozen=True)
class UserSessionPrincipal:
    user_id: str
    name: str
    email: str
    role: UserRole

    @property
    def permissions(self) -> FrozenSet[str]:
        return permissions_for_role(self.role)

    @property
    def is_management(self) -> bool:
        return self.role == UserRole.MANAGEMENT

    @staticmethod
    def from_account(account: Account) -> "UserSessionPrincipal":
        return UserSessionPrincipal(
            user_id=account.id,
            name=account.name,
            email=account.email,
            role=account.role,
        )


class UserSessionContext:
    def __init__(self):
        self._principal: UserSessionPrincipal | None = None

    @property
    def principal(self) -> UserSessionPrincipal | None:
        return self._principal

    def set_principal(self, principal: UserSessionPrincipal) -> None:
        self._principal = principal

    def clear(self) -> None:
        self._principal = None

    def is_authenticated(self) -> bool:
        return self._principal is not None

    def has_permission(self, permission_code: str) -> bool:
        if self._principal is None:
            return False
        return permission_code in self._principal.permissions


__all__ = ["UserSessionPrincipal", "UserSessionContext"]
