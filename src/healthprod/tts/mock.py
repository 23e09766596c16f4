"""Mock speaker for testing.

Provides a controllable mock implementation for unit and integration testing.
"""

import threading


class MockSpeaker:
    """Records spoken texts instead of producing audio."""

    def __init__(self, available: bool = True) -> None:
        self._available = available
        self._spoken: list[str] = []
        self._error_message: str | None = None
        self._lock = threading.Lock()

    @property
    def is_available(self) -> bool:
        return self._available

    def speak(self, text: str) -> None:
        """Record text, or raise if an error was set."""
        if self._error_message:
            raise RuntimeError(self._error_message)
        with self._lock:
            self._spoken.append(text)

    def set_error(self, message: str | None) -> None:
        """Make subsequent speak calls fail (None clears it)."""
        self._error_message = message

    @property
    def spoken_texts(self) -> list[str]:
        """Get list of spoken texts."""
        with self._lock:
            return self._spoken.copy()

    def clear(self) -> None:
        """Reset mock state."""
        with self._lock:
            self._spoken.clear()


__all__ = ["MockSpeaker"]
