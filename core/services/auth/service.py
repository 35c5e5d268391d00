from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from core.events.domain_events import DomainEvents
from core.exceptions import EmailAlreadyInUseError, InvalidCredentialsError
from core.interfaces import AccountRepository, PrincipalRepository
from core.models import Account, UserRole, next_sequential_id
from core.services.auth.authorization import require_permission
from core.services.auth.policy import default_accounts
from core.services.auth.session import UserSessionContext, UserSessionPrincipal
from core.services.auth.validation import AuthValidationMixin


logger = logging.getLogger(__name__)


class AuthService(AuthValidationMixin):
    def __init__(
        self,
        account_repo: AccountRepository,
        principal_repo: PrincipalRepository,
        user_session: UserSessionContext,
        events: DomainEvents | None = None,
    ):
        self._account_repo: AccountRepository = account_repo
        self._principal_repo: PrincipalRepository = principal_repo
        self._user_session: UserSessionContext = user_session
        self._events: DomainEvents | None = events
        self._accounts: List[Account] = self._load_accounts()

    @property
    def current_principal(self) -> UserSessionPrincipal | None:
        return self._user_session.principal

    def is_authenticated(self) -> bool:
        return self._user_session.is_authenticated()

    def restore_session(self) -> UserSessionPrincipal | None:
        principal = self._principal_repo.load()
        if principal is None:
            return None
        self._user_session.set_principal(principal)
        logger.info("Restored session for user %s", principal.user_id)
        self._emit_session_changed(principal.user_id)
        return principal

    def login(self, email: str, password: str) -> UserSessionPrincipal:
        account = next((a for a in self._accounts if a.matches(email, password)), None)
        if account is None:
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentialsError()

        principal = UserSessionPrincipal.from_account(account)
        self._principal_repo.save(principal)
        self._user_session.set_principal(principal)
        logger.info("User %s logged in as %s", account.id, account.role.value)
        self._emit_session_changed(principal.user_id)
        return principal

    def logout(self) -> None:
        was_authenticated = self._user_session.is_authenticated()
        self._principal_repo.clear()
        self._user_session.clear()
        if was_authenticated:
            logger.info("User logged out")
            self._emit_session_changed(None)

    def register(self, name: str, email: str, password: str) -> Account:
        self._validate_registration(name, email, password)
        if any(a.email == email for a in self._accounts):
            raise EmailAlreadyInUseError()

        account = Account.create(
            account_id=next_sequential_id(len(self._accounts)),
            name=name.strip(),
            email=email,
            password=password,
            role=UserRole.WORKER,
        )
        accounts = [*self._accounts, account]
        self._account_repo.save(accounts)
        self._accounts = accounts
        logger.info("Registered account %s", account.id)
        if self._events is not None:
            self._events.accounts_changed.emit(account.id)
        return replace(account)

    def has_permission(self, permission_code: str) -> bool:
        return self._user_session.has_permission(permission_code)

    def list_accounts(self) -> List[Account]:
        return [replace(a) for a in self._accounts]

    def get_account(self, account_id: str) -> Optional[Account]:
        account = next((a for a in self._accounts if a.id == account_id), None)
        return replace(account) if account is not None else None

    def list_workers(self) -> List[Account]:
        require_permission(self._user_session, "view_all_tasks", operation_label="list workers")
        return [replace(a) for a in self._accounts if a.role == UserRole.WORKER]

    def _load_accounts(self) -> List[Account]:
        accounts = self._account_repo.load()
        if accounts is None:
            accounts = default_accounts()
            self._account_repo.save(accounts)
            logger.info("Seeded %d default accounts", len(accounts))
        return list(accounts)

    def _emit_session_changed(self, user_id: str | None) -> None:
        if self._events is not None:
            self._events.session_changed.emit(user_id)


__all__ = ["AuthService"]
