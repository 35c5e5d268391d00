from infra.db.task.mapper import task_from_record, task_to_record
from infra.db.task.repository import SqlAlchemyTaskRepository

__all__ = [
    "task_to_record",
    "task_from_record",
    "SqlAlchemyTaskRepository",
]
