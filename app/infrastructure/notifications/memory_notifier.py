from __future__ import annotations

import logging

from app.application.ports.notifier import NotifierPort
from app.application.ports.scheduler import ScheduledTask, SchedulerPort
from app.domain.entities.notification import Notification


class InMemoryNotifier(NotifierPort):
    """Keeps every notification sent and the ones still on screen."""

    def __init__(self, scheduler: SchedulerPort | None = None) -> None:
        self._scheduler = scheduler
        self.history: list[Notification] = []
        self._active: list[Notification] = []
        self._dismissals: list[ScheduledTask] = []
        self._logger = logging.getLogger(__name__)

    @property
    def active(self) -> list[Notification]:
        return list(self._active)

    def notify(self, notification: Notification) -> None:
        self.history.append(notification)
        self._active.append(notification)
        self._logger.info(
            "Notification shown",
            extra={"reason": notification.title, "outcome": notification.severity.value},
        )
        if self._scheduler is not None:
            task = self._scheduler.schedule(notification.duration_ms, lambda: self.dismiss(notification))
            self._dismissals = [t for t in self._dismissals if t.pending]
            self._dismissals.append(task)

    @property
    def pending_dismissals(self) -> int:
        return sum(1 for task in self._dismissals if task.pending)

    def dismiss(self, notification: Notification) -> bool:
        for i, shown in enumerate(self._active):
            if shown is notification:
                del self._active[i]
                return True
        return False

    def dispose(self) -> None:
        """Cancel outstanding dismissal timers; the active list is left as it was."""
        for task in self._dismissals:
            task.cancel()
        self._dismissals.clear()
