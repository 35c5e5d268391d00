from __future__ import annotations

from typing import List, Optional

from core.interfaces import AccountRepository, PrincipalRepository
from core.models import Account
from core.services.auth.session import UserSessionPrincipal
from infra.db.auth.mapper import (
    account_from_record,
    account_to_record,
    principal_from_record,
    principal_to_record,
)
from infra.db.storage import ACCOUNTS_KEY, PRINCIPAL_KEY, SqlAlchemyRecordStore


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, store: SqlAlchemyRecordStore, key: str = ACCOUNTS_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[List[Account]]:
        rows = self.store.get(self.key)
        if rows is None:
            return None
        return [account_from_record(row) for row in rows]

    def save(self, accounts: List[Account]) -> None:
        self.store.put(self.key, [account_to_record(a) for a in accounts])


class SqlAlchemyPrincipalRepository(PrincipalRepository):
    def __init__(self, store: SqlAlchemyRecordStore, key: str = PRINCIPAL_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[UserSessionPrincipal]:
        row = self.store.get(self.key)
        return principal_from_record(row) if row else None

    def save(self, principal: UserSessionPrincipal) -> None:
        self.store.put(self.key, principal_to_record(principal))

    def clear(self) -> None:
        self.store.delete(self.key)


__all__ = ["SqlAlchemyAccountRepository", "SqlAlchemyPrincipalRepository"]
