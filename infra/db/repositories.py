# infra/db/repositories.py
from __future__ import annotations

from infra.db.auth.repository import (
    SqlAlchemyAccountRepository,
    SqlAlchemyPrincipalRepository,
)
from infra.db.storage import SqlAlchemyRecordStore
from infra.db.task.repository import SqlAlchemyTaskRepository

__all__ = [
    "SqlAlchemyRecordStore",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyPrincipalRepository",
    "SqlAlchemyTaskRepository",
]
