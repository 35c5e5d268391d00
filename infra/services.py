from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from sqlalchemy.orm import Session

from core.events.domain_events import DomainEvents
from core.events.notifications import NotificationCenter
from core.models import utc_now
from core.services.auth import AuthService
from core.services.auth.authorization import TaskAccessPolicy, can_delete_task, can_modify_task
from core.services.auth.session import UserSessionContext
from core.services.task import TaskService
from infra.db.base import build_engine, build_session_factory
from infra.db.repositories import (
    SqlAlchemyAccountRepository,
    SqlAlchemyPrincipalRepository,
    SqlAlchemyRecordStore,
    SqlAlchemyTaskRepository,
)
from infra.operational_support import bind_trace_id
from infra.path import default_db_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    store: SqlAlchemyRecordStore
    user_session: UserSessionContext
    events: DomainEvents
    notifications: NotificationCenter
    auth_service: AuthService
    task_service: TaskService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "store": self.store,
            "user_session": self.user_session,
            "events": self.events,
            "notifications": self.notifications,
            "auth_service": self.auth_service,
            "task_service": self.task_service,
        }


def build_service_graph(
    session: Session,
    *,
    clock: Callable[[], datetime] = utc_now,
    modify_policy: TaskAccessPolicy = can_modify_task,
    delete_policy: TaskAccessPolicy = can_delete_task,
    restore_session: bool = True,
) -> ServiceGraph:
    store = SqlAlchemyRecordStore(session)
    user_session = UserSessionContext()
    events = DomainEvents()
    notifications = NotificationCenter()

    auth_service = AuthService(
        account_repo=SqlAlchemyAccountRepository(store),
        principal_repo=SqlAlchemyPrincipalRepository(store),
        user_session=user_session,
        events=events,
    )
    task_service = TaskService(
        SqlAlchemyTaskRepository(store),
        user_session,
        notifications,
        events,
        modify_policy=modify_policy,
        delete_policy=delete_policy,
        clock=clock,
    )
    if restore_session:
        auth_service.restore_session()

    return ServiceGraph(
        session=session,
        store=store,
        user_session=user_session,
        events=events,
        notifications=notifications,
        auth_service=auth_service,
        task_service=task_service,
    )


def bootstrap_application(db_url: str | None = None, *, configure_logging: bool = True) -> ServiceGraph:
    """Set up logging and schema, open a session and build the services."""
    from infra.logging_config import setup_logging
    from infra.migrate import run_migrations

    if configure_logging:
        setup_logging()

    url = db_url or default_db_url()
    with bind_trace_id() as trace_id:
        logger.info("Starting factory task tracker (trace %s)", trace_id)
        run_migrations(db_url=url)
        session = build_session_factory(build_engine(url))()
        graph = build_service_graph(session)
        principal = graph.user_session.principal
        logger.info(
            "Services ready; %s",
            f"session restored for user {principal.user_id}" if principal else "no active session",
        )
    return graph


__all__ = ["ServiceGraph", "build_service_graph", "bootstrap_application"]
