"""Desktop-style notifications."""

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Protocol for user notifications."""

    @property
    def is_available(self) -> bool:
        """Whether notifications can be shown."""
        ...

    def notify(self, title: str, body: str) -> None:
        """Show a notification."""
        ...


class ConsoleNotifier:
    """Prints notifications to the terminal."""

    @property
    def is_available(self) -> bool:
        return True

    def notify(self, title: str, body: str) -> None:
        logger.info(f"Notification: {title}: {body}")
        print(f"\n[{title}] {body}")


@dataclass(frozen=True)
class Notification:
    """A recorded notification."""

    title: str
    body: str


class MockNotifier:
    """Records notifications for tests."""

    def __init__(self, available: bool = True) -> None:
        self._available = available
        self._sent: list[Notification] = []
        self._lock = threading.Lock()

    @property
    def is_available(self) -> bool:
        return self._available

    def notify(self, title: str, body: str) -> None:
        with self._lock:
            self._sent.append(Notification(title=title, body=body))

    @property
    def notifications(self) -> list[Notification]:
        """Get recorded notifications."""
        with self._lock:
            return list(self._sent)

    def clear(self) -> None:
        with self._lock:
            self._sent.clear()


__all__ = ["ConsoleNotifier", "MockNotifier", "Notification", "Notifier"]
