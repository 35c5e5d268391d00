from .auth import AuthService, UserSessionContext, UserSessionPrincipal
from .task import TaskService, TaskStatusSummary, WorkerTaskSummary

__all__ = [
    "AuthService",
    "UserSessionContext",
    "UserSessionPrincipal",
    "TaskService",
    "TaskStatusSummary",
    "WorkerTaskSummary",
]
