"""
Tests for the scheduler adapters.
"""

from __future__ import annotations

import threading

from app.domain.entities.notification import Notification, Severity
from app.infrastructure.notifications.memory_notifier import InMemoryNotifier
from app.infrastructure.scheduling.manual_scheduler import ManualScheduler
from app.infrastructure.scheduling.threading_scheduler import ThreadingScheduler


def test_manual_scheduler_fires_in_due_order():
    scheduler = ManualScheduler()
    calls: list[str] = []
    scheduler.schedule(300, lambda: calls.append("late"))
    scheduler.schedule(100, lambda: calls.append("early"))
    scheduler.schedule(100, lambda: calls.append("early-2"))

    assert scheduler.advance(99) == 0
    assert scheduler.advance(100) == 2
    assert calls == ["early", "early-2"]
    assert scheduler.advance(101) == 1
    assert calls == ["early", "early-2", "late"]
    assert scheduler.now_ms == 300


def test_manual_task_cancel():
    scheduler = ManualScheduler()
    calls: list[int] = []
    task = scheduler.schedule(10, lambda: calls.append(1))
    assert task.cancel() is True
    assert task.cancel() is False
    scheduler.advance(10)
    assert calls == []
    assert task.cancelled and not task.fired


def test_threading_scheduler_fires_once():
    scheduler = ThreadingScheduler()
    done = threading.Event()
    task = scheduler.schedule(10, done.set)
    assert done.wait(2.0)
    assert task.fired
    assert task.cancel() is False


def test_threading_scheduler_cancel_before_fire():
    scheduler = ThreadingScheduler()
    done = threading.Event()
    task = scheduler.schedule(500, done.set)
    assert task.cancel() is True
    assert not done.wait(0.7)
    assert task.cancelled and not task.fired


def test_notifier_dismisses_after_duration():
    scheduler = ManualScheduler()
    notifier = InMemoryNotifier(scheduler=scheduler)
    note = Notification(title="t", message="m", severity=Severity.SUCCESS, duration_ms=5000)

    notifier.notify(note)
    assert notifier.active == [note]
    scheduler.advance(4999)
    assert notifier.active == [note]
    scheduler.advance(1)
    assert notifier.active == []
    assert notifier.history == [note]
