from __future__ import annotations

from typing import List, Optional

from core.interfaces import TaskRepository
from core.models import Task
from infra.db.storage import TASKS_KEY, SqlAlchemyRecordStore
from infra.db.task.mapper import task_from_record, task_to_record


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, store: SqlAlchemyRecordStore, key: str = TASKS_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[List[Task]]:
        rows = self.store.get(self.key)
        if rows is None:
            return None
        return [task_from_record(row) for row in rows]

    def save(self, tasks: List[Task]) -> None:
        self.store.put(self.key, [task_to_record(t) for t in tasks])


__all__ = ["SqlAlchemyTaskRepository"]
