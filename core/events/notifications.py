from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from core.domain.identifiers import utc_now
from core.events.signal import Signal

logger = logging.getLogger(__name__)

_DEFAULT_HISTORY = 50


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    code: str | None = None
    created_at: datetime = field(default_factory=utc_now)


class NotificationCenter:
    """User-visible messages about task mutations (toasts in a UI)."""

    def __init__(self, history_size: int = _DEFAULT_HISTORY) -> None:
        self.posted: Signal[Notification] = Signal()
        self._history: deque[Notification] = deque(maxlen=max(1, int(history_size)))

    def success(self, message: str) -> Notification:
        return self._post(Notification(level=NotificationLevel.SUCCESS, message=message))

    def error(self, message: str, *, code: str | None = None) -> Notification:
        return self._post(Notification(level=NotificationLevel.ERROR, message=message, code=code))

    def recent(self) -> list[Notification]:
        return list(self._history)

    def last(self) -> Notification | None:
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        self._history.clear()

    def _post(self, notification: Notification) -> Notification:
        self._history.append(notification)
        logger.debug("Notification [%s] %s", notification.level.value, notification.message)
        self.posted.emit(notification)
        return notification


__all__ = ["NotificationLevel", "Notification", "NotificationCenter"]
