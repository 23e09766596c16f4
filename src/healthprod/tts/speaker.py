"""Speaker protocol for text-to-speech output."""

from typing import Protocol


class Speaker(Protocol):
    """Protocol for speech output.

    speak() must return promptly; playback happens in the background.
    """

    @property
    def is_available(self) -> bool:
        """Whether speech output works on this system."""
        ...

    def speak(self, text: str) -> None:
        """Start speaking text.

        Raises:
            RuntimeError: If speech could not be started.
        """
        ...


__all__ = ["Speaker"]
