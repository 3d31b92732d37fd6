from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask(ABC):
    """Handle to a one-shot deferred callback."""

    @abstractmethod
    def cancel(self) -> bool:
        """Cancel the task. Returns True if it had not fired yet."""
        raise NotImplementedError

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def fired(self) -> bool:
        raise NotImplementedError

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class SchedulerPort(ABC):
    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Run callback once, delay_ms from now."""
        raise NotImplementedError
