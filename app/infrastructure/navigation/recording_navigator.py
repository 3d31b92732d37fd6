from __future__ import annotations

import logging

from app.application.ports.navigator import NavigatorPort


class RecordingNavigator(NavigatorPort):
    def __init__(self) -> None:
        self.history: list[str] = []
        self._logger = logging.getLogger(__name__)

    @property
    def current_path(self) -> str | None:
        return self.history[-1] if self.history else None

    def navigate_to(self, path: str) -> None:
        self.history.append(path)
        self._logger.info("Navigate", extra={"path": path})
