from __future__ import annotations

import logging
import threading
from typing import Callable

from app.application.ports.scheduler import ScheduledTask, SchedulerPort


class TimerTask(ScheduledTask):
    def __init__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._lock = threading.Lock()
        self._cancelled = False
        self._fired = False
        self._timer = threading.Timer(max(delay_ms, 0) / 1000.0, self._run)
        self._timer.daemon = True
        self._logger = logging.getLogger(__name__)

    def start(self) -> None:
        self._timer.start()

    def _run(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._fired = True
        try:
            self._callback()
        except Exception:
            self._logger.exception("Scheduled callback failed")

    def cancel(self) -> bool:
        with self._lock:
            if self._fired or self._cancelled:
                return False
            self._cancelled = True
        self._timer.cancel()
        return True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired


class ThreadingScheduler(SchedulerPort):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = TimerTask(delay_ms, callback)
        task.start()
        return task
