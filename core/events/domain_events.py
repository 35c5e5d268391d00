""" Change notifications for the task store and the login session """
from __future__ import annotations

from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.tasks_changed: Signal[str] = Signal()              # task_id
        self.session_changed: Signal[str | None] = Signal()     # user_id, None on logout
        self.accounts_changed: Signal[str] = Signal()           # account_id


__all__ = ["DomainEvents"]
