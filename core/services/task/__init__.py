from core.services.task.query import (
    TaskStatusSummary,
    WorkerTaskSummary,
    filter_visible_tasks,
    summarize_statuses,
)
from core.services.task.service import TaskService

__all__ = [
    "TaskService",
    "TaskStatusSummary",
    "WorkerTaskSummary",
    "filter_visible_tasks",
    "summarize_statuses",
]
