from __future__ import annotations

from dataclasses import dataclass

from core.domain.enums import UserRole


@dataclass
class Account:
    id: str
    name: str
    email: str
    password: str
    role: UserRole = UserRole.WORKER

    @staticmethod
    def create(
        account_id: str,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.WORKER,
    ) -> "Account":
        return Account(
            id=account_id,
            name=name,
            email=email,
            password=password,
            role=role,
        )

    def matches(self, email: str, password: str) -> bool:
        return self.email == email and self.password == password


__all__ = ["Account"]
