from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from core.models import Account, Task

if TYPE_CHECKING:
    from core.services.auth.session import UserSessionPrincipal


class AccountRepository(ABC):
    @abstractmethod
    def load(self) -> Optional[List[Account]]:
        """Return the persisted accounts, or None when nothing was stored yet."""

    @abstractmethod
    def save(self, accounts: List[Account]) -> None: ...


class TaskRepository(ABC):
    @abstractmethod
    def load(self) -> Optional[List[Task]]:
        """Return the persisted tasks, or None when nothing was stored yet."""

    @abstractmethod
    def save(self, tasks: List[Task]) -> None: ...


class PrincipalRepository(ABC):
    @abstractmethod
    def load(self) -> Optional["UserSessionPrincipal"]: ...

    @abstractmethod
    def save(self, principal: "UserSessionPrincipal") -> None: ...

    @abstractmethod
    def clear(self) -> None: ...


__all__ = ["AccountRepository", "TaskRepository", "PrincipalRepository"]
