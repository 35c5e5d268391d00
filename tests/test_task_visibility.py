from __future__ import annotations

import pytest

from core.exceptions import PermissionDeniedError
from core.models import UserRole
from core.services.auth.session import UserSessionPrincipal
from core.services.task import TaskStatusSummary, filter_visible_tasks


def _login_as(services, email: str, password: str):
    return services["auth_service"].login(email, password)


def test_no_principal_sees_nothing(services):
    ts = services["task_service"]

    assert ts.visible_tasks() == []
    assert len(ts.all_tasks()) == 4


def test_worker_sees_only_assigned_tasks(services):
    ts = services["task_service"]

    principal = _login_as(services, "worker1@factory.com", "password123")
    visible = ts.visible_tasks()

    assert [t.id for t in visible] == ["1", "3"]
    assert visible == [t for t in ts.all_tasks() if t.assigned_to == principal.user_id]


def test_management_sees_every_task_in_insertion_order(services):
    ts = services["task_service"]

    _login_as(services, "admin@factory.com", "admin123")

    assert ts.visible_tasks() == ts.all_tasks()
    assert [t.id for t in ts.visible_tasks()] == ["1", "2", "3", "4"]


def test_visibility_is_recomputed_after_session_changes(services):
    ts = services["task_service"]

    _login_as(services, "worker2@factory.com", "password123")
    assert [t.id for t in ts.visible_tasks()] == ["2", "4"]

    services["auth_service"].logout()
    assert ts.visible_tasks() == []

    _login_as(services, "worker1@factory.com", "password123")
    assert [t.id for t in ts.visible_tasks()] == ["1", "3"]


def test_filter_visible_tasks_is_pure(services):
    tasks = services["task_service"].all_tasks()
    worker = UserSessionPrincipal(user_id="2", name="Jane", email="w2@factory.com", role=UserRole.WORKER)
    manager = UserSessionPrincipal(user_id="3", name="Admin", email="a@factory.com", role=UserRole.MANAGEMENT)

    assert filter_visible_tasks(tasks, None) == []
    assert filter_visible_tasks(tasks, manager) == tasks
    assert {t.id for t in filter_visible_tasks(tasks, worker)} == {"2", "4"}


def test_returned_tasks_are_copies(services):
    ts = services["task_service"]
    _login_as(services, "admin@factory.com", "admin123")

    snapshot = ts.visible_tasks()
    snapshot[0].title = "Tampered"

    assert ts.all_tasks()[0].title == "Inspect Assembly Line A"


def test_get_task_respects_visibility(services):
    ts = services["task_service"]
    _login_as(services, "worker1@factory.com", "password123")

    assert ts.get_task("1").title == "Inspect Assembly Line A"
    assert ts.get_task("2") is None
    assert ts.get_task("missing") is None


def test_status_summary_counts_visible_tasks(services):
    ts = services["task_service"]

    _login_as(services, "admin@factory.com", "admin123")
    summary = ts.status_summary()
    assert summary == TaskStatusSummary(pending=2, in_progress=1, completed=1)
    assert summary.total == 4

    _login_as(services, "worker1@factory.com", "password123")
    assert ts.status_summary() == TaskStatusSummary(pending=1, in_progress=0, completed=1)


def test_worker_overview_requires_management(services):
    ts = services["task_service"]
    auth = services["auth_service"]

    _login_as(services, "worker1@factory.com", "password123")
    with pytest.raises(PermissionDeniedError):
        ts.tasks_for_worker("2")

    _login_as(services, "admin@factory.com", "admin123")
    assert [t.id for t in ts.tasks_for_worker("2")] == ["2", "4"]

    summaries = ts.worker_summaries(auth.list_workers())
    assert [(s.worker_id, s.worker_name) for s in summaries] == [("1", "John Worker"), ("2", "Jane Worker")]
    assert summaries[1].summary == TaskStatusSummary(pending=1, in_progress=1, completed=0)


def test_can_edit_follows_assignment(services):
    ts = services["task_service"]
    tasks = {t.id: t for t in ts.all_tasks()}

    assert ts.can_edit(tasks["1"]) is False

    _login_as(services, "worker1@factory.com", "password123")
    assert ts.can_edit(tasks["1"]) is True
    assert ts.can_edit(tasks["2"]) is False

    _login_as(services, "admin@factory.com", "admin123")
    assert all(ts.can_edit(t) for t in tasks.values())
