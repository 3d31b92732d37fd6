from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from app.application.exceptions import WidgetNotFoundError
from app.application.use_cases.doctor_widget import DoctorDetailWidget
from app.infrastructure.navigation.recording_navigator import RecordingNavigator
from app.infrastructure.notifications.memory_notifier import InMemoryNotifier


@dataclass
class WidgetSession:
    widget: DoctorDetailWidget
    notifier: InMemoryNotifier
    navigator: RecordingNavigator

    def close(self) -> None:
        self.widget.teardown()
        self.notifier.dispose()


class MemoryWidgetStore:
    def __init__(self) -> None:
        self._sessions: dict[str, WidgetSession] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def add(self, session: WidgetSession) -> str:
        with self._lock:
            self._sessions[session.widget.widget_id] = session
        return session.widget.widget_id

    def get(self, widget_id: str) -> WidgetSession:
        with self._lock:
            session = self._sessions.get(widget_id)
        if session is None:
            raise WidgetNotFoundError(widget_id)
        return session

    def remove(self, widget_id: str) -> None:
        """Unmount: drop the session and tear its widget down."""
        with self._lock:
            session = self._sessions.pop(widget_id, None)
        if session is None:
            raise WidgetNotFoundError(widget_id)
        session.close()

    def clear(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()
        if sessions:
            self._logger.info("Widget store cleared", extra={"reason": f"{len(sessions)} widgets"})

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
