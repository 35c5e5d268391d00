import weakref

import pytest

from core.events.domain_events import DomainEvents
from core.events.notifications import NotificationCenter, NotificationLevel
from core.events.signal import Signal


def test_domain_event_signal_connect_emit_disconnect():
    events = DomainEvents()
    seen: list[str] = []

    def _handler(task_id: str) -> None:
        seen.append(task_id)

    events.tasks_changed.connect(_handler)
    events.tasks_changed.connect(_handler)
    events.tasks_changed.emit("t-1")
    events.tasks_changed.disconnect(_handler)
    events.tasks_changed.emit("t-2")

    assert seen == ["t-1"]
    assert events.tasks_changed.subscriber_count() == 0


def test_signal_emit_prunes_dead_weak_proxies():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    class _Listener:
        def __call__(self, payload: str) -> None:
            seen.append(f"listener:{payload}")

    listener = _Listener()
    signal.connect(weakref.proxy(listener))
    signal.connect(seen.append)

    signal.emit("a")
    del listener
    signal.emit("b")

    assert seen == ["listener:a", "a", "b"]
    assert signal.subscriber_count() == 1


def test_signal_emit_keeps_other_errors_visible():
    signal: Signal[str] = Signal()

    def _boom(_payload: str) -> None:
        raise RuntimeError("boom")

    signal.connect(_boom)

    with pytest.raises(RuntimeError, match="boom"):
        signal.emit("x")
    assert signal.subscriber_count() == 1


def test_notification_center_keeps_bounded_history():
    center = NotificationCenter(history_size=2)
    posted = []
    center.posted.connect(posted.append)

    center.success("Task created successfully")
    center.error("Task not found", code="TASK_NOT_FOUND")
    center.success("Task deleted successfully")

    assert [n.message for n in center.recent()] == ["Task not found", "Task deleted successfully"]
    assert len(posted) == 3
    assert posted[1].level == NotificationLevel.ERROR
    assert posted[1].code == "TASK_NOT_FOUND"

    center.clear()
    assert center.last() is None


def test_service_graph_wires_events(services):
    seen: dict[str, list] = {"session": [], "accounts": [], "tasks": []}
    events = services["events"]
    events.session_changed.connect(seen["session"].append)
    events.accounts_changed.connect(seen["accounts"].append)
    events.tasks_changed.connect(seen["tasks"].append)

    services["auth_service"].register("Lee Fitter", "lee@factory.com", "fit12345")
    services["auth_service"].login("lee@factory.com", "fit12345")
    task = services["task_service"].create_task("Fit gasket", "Fit a new gasket on pump 3")
    services["auth_service"].logout()

    assert seen == {"session": ["4", None], "accounts": ["4"], "tasks": [task.id]}
