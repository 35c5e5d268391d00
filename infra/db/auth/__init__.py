from infra.db.auth.mapper import (
    account_from_record,
    account_to_record,
    principal_from_record,
    principal_to_record,
)
from infra.db.auth.repository import (
    SqlAlchemyAccountRepository,
    SqlAlchemyPrincipalRepository,
)

__all__ = [
    "account_to_record",
    "account_from_record",
    "principal_to_record",
    "principal_from_record",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyPrincipalRepository",
]
