from __future__ import annotations

import itertools
from typing import Callable

from app.application.ports.scheduler import ScheduledTask, SchedulerPort


class ManualTask(ScheduledTask):
    def __init__(self, due_ms: int, seq: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.seq = seq
        self._callback = callback
        self._cancelled = False
        self._fired = False

    def cancel(self) -> bool:
        if self._fired or self._cancelled:
            return False
        self._cancelled = True
        return True

    def run(self) -> None:
        self._fired = True
        self._callback()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired


class ManualScheduler(SchedulerPort):
    """Virtual clock. Nothing fires until advance() moves time past a task's due time."""

    def __init__(self) -> None:
        self._now_ms = 0
        self._tasks: list[ManualTask] = []
        self._seq = itertools.count()

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending(self) -> list[ManualTask]:
        return sorted((t for t in self._tasks if t.pending), key=lambda t: (t.due_ms, t.seq))

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ManualTask(self._now_ms + max(delay_ms, 0), next(self._seq), callback)
        self._tasks.append(task)
        return task

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward, firing due tasks in order. Returns how many fired."""
        target = self._now_ms + delta_ms
        fired = 0
        while True:
            due = [t for t in self.pending if t.due_ms <= target]
            if not due:
                break
            task = due[0]
            self._now_ms = task.due_ms
            task.run()
            fired += 1
        self._now_ms = target
        self._tasks = [t for t in self._tasks if t.pending]
        return fired
