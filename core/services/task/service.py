from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List

from core.events.domain_events import DomainEvents
from core.events.notifications import NotificationCenter
from core.exceptions import DomainError
from core.interfaces import TaskRepository
from core.models import Task, utc_now
from core.services.auth.authorization import TaskAccessPolicy, can_delete_task, can_modify_task
from core.services.auth.session import UserSessionContext
from core.services.task.defaults import initial_tasks
from core.services.task.lifecycle import TaskLifecycleMixin
from core.services.task.query import TaskQueryMixin
from core.services.task.validation import TaskValidationMixin


logger = logging.getLogger(__name__)


class TaskService(
    TaskLifecycleMixin,
    TaskQueryMixin,
    TaskValidationMixin,
):
    def __init__(
        self,
        task_repo: TaskRepository,
        user_session: UserSessionContext,
        notifications: NotificationCenter | None = None,
        events: DomainEvents | None = None,
        *,
        modify_policy: TaskAccessPolicy = can_modify_task,
        delete_policy: TaskAccessPolicy = can_delete_task,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._task_repo: TaskRepository = task_repo
        self._user_session: UserSessionContext = user_session
        self._notifications: NotificationCenter = notifications or NotificationCenter()
        self._events: DomainEvents | None = events
        self._modify_policy: TaskAccessPolicy = modify_policy
        self._delete_policy: TaskAccessPolicy = delete_policy
        self._clock: Callable[[], datetime] = clock
        self._last_error: DomainError | None = None
        self._tasks: List[Task] = self._load_tasks()

    @property
    def notifications(self) -> NotificationCenter:
        return self._notifications

    def _load_tasks(self) -> List[Task]:
        tasks = self._task_repo.load()
        if tasks is None:
            tasks = initial_tasks(self._clock())
            self._task_repo.save(tasks)
            logger.info("Seeded %d initial tasks", len(tasks))
        return list(tasks)


__all__ = ["TaskService"]
