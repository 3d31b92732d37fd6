from abc import ABC, abstractmethod

from app.domain.entities.notification import Notification


class NotifierPort(ABC):
    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Render a transient alert for notification.duration_ms."""
        raise NotImplementedError
