from abc import ABC, abstractmethod


class NavigatorPort(ABC):
    @abstractmethod
    def navigate_to(self, path: str) -> None:
        raise NotImplementedError
