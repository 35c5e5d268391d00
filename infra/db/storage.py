from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy.orm import Session

from core.models import utc_now
from infra.db.models import StorageRecordORM

logger = logging.getLogger(__name__)

PRINCIPAL_KEY = "factory_user"
ACCOUNTS_KEY = "factory_accounts"
TASKS_KEY = "factory_tasks"


class SqlAlchemyRecordStore:
    """Synchronous key/value storage; every write commits immediately."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str) -> Any | None:
        obj = self.session.get(StorageRecordORM, key)
        if obj is None:
            return None
        return json.loads(obj.payload)

    def put(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        try:
            obj = self.session.get(StorageRecordORM, key)
            if obj is None:
                self.session.add(StorageRecordORM(key=key, payload=payload, updated_at=utc_now()))
            else:
                obj.payload = payload
                obj.updated_at = utc_now()
            self.session.commit()
        except Exception as exc:
            self.session.rollback()
            logger.error("Failed to write record '%s': %s", key, exc)
            raise

    def delete(self, key: str) -> None:
        try:
            self.session.query(StorageRecordORM).filter_by(key=key).delete()
            self.session.commit()
        except Exception as exc:
            self.session.rollback()
            logger.error("Failed to delete record '%s': %s", key, exc)
            raise


__all__ = ["SqlAlchemyRecordStore", "PRINCIPAL_KEY", "ACCOUNTS_KEY", "TASKS_KEY"]
