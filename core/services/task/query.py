from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence

from core.models import Account, Task, TaskStatus
from core.services.auth.authorization import TaskAccessPolicy, require_permission
from core.services.auth.session import UserSessionContext, UserSessionPrincipal


@dataclass(frozen=True)
class TaskStatusSummary:
    pending: int = 0
    in_progress: int = 0
    completed: int = 0

    @property
    def total(self) -> int:
        return self.pending + self.in_progress + self.completed


@dataclass(frozen=True)
class WorkerTaskSummary:
    worker_id: str
    worker_name: str
    summary: TaskStatusSummary
    tasks: tuple[Task, ...]


def filter_visible_tasks(
    tasks: Iterable[Task],
    principal: UserSessionPrincipal | None,
) -> List[Task]:
    if principal is None:
        return []
    if principal.is_management:
        return list(tasks)
    return [t for t in tasks if t.assigned_to == principal.user_id]


def summarize_statuses(tasks: Iterable[Task]) -> TaskStatusSummary:
    counts = {status: 0 for status in TaskStatus}
    for task in tasks:
        counts[task.status] += 1
    return TaskStatusSummary(
        pending=counts[TaskStatus.PENDING],
        in_progress=counts[TaskStatus.IN_PROGRESS],
        completed=counts[TaskStatus.COMPLETED],
    )


class TaskQueryMixin:
    _tasks: List[Task]
    _user_session: UserSessionContext
    _modify_policy: TaskAccessPolicy

    def all_tasks(self) -> List[Task]:
        return [replace(t) for t in self._tasks]

    def visible_tasks(self) -> List[Task]:
        return [replace(t) for t in filter_visible_tasks(self._tasks, self._user_session.principal)]

    def get_task(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.visible_tasks() if t.id == task_id), None)

    def can_edit(self, task: Task) -> bool:
        principal = self._user_session.principal
        if principal is None:
            return False
        return self._modify_policy(principal, task)

    def status_summary(self, tasks: Sequence[Task] | None = None) -> TaskStatusSummary:
        return summarize_statuses(self.visible_tasks() if tasks is None else tasks)

    def tasks_for_worker(self, worker_id: str) -> List[Task]:
        require_permission(self._user_session, "view_all_tasks", operation_label="view worker tasks")
        return [replace(t) for t in self._tasks if t.assigned_to == worker_id]

    def worker_summaries(self, workers: Iterable[Account]) -> List[WorkerTaskSummary]:
        require_permission(self._user_session, "view_all_tasks", operation_label="view worker summaries")
        summaries: List[WorkerTaskSummary] = []
        for worker in workers:
            tasks = tuple(replace(t) for t in self._tasks if t.assigned_to == worker.id)
            summaries.append(
                WorkerTaskSummary(
                    worker_id=worker.id,
                    worker_name=worker.name,
                    summary=summarize_statuses(tasks),
                    tasks=tasks,
                )
            )
        return summaries


__all__ = [
    "TaskStatusSummary",
    "WorkerTaskSummary",
    "filter_visible_tasks",
    "summarize_statuses",
    "TaskQueryMixin",
]
