"""macOS speaker using the native `say` command."""

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)


class MacOSSpeaker:
    """Speech output through macOS `say`.

    Each utterance runs in its own subprocess; a new utterance interrupts
    the previous one.
    """

    def __init__(self, voice: str = "Samantha", speed: float = 1.0) -> None:
        """Initialize macOS speaker.

        Args:
            voice: Voice name (default: "Samantha")
            speed: Speech speed multiplier (default: 1.0)
        """
        self._voice = voice
        self._speed = max(0.5, min(2.0, speed))
        self._say_path = shutil.which("say")
        self._process: subprocess.Popen[bytes] | None = None

    @property
    def is_available(self) -> bool:
        """True if the `say` command is available."""
        return self._say_path is not None

    def speak(self, text: str) -> None:
        """Start speaking without waiting for playback to finish.

        Raises:
            RuntimeError: If `say` is missing or cannot be launched.
        """
        if not self.is_available:
            raise RuntimeError("macOS TTS not available: say command not found")

        self.stop()

        # say measures rate in words per minute, ~175 at normal speed
        rate = int(175 * self._speed)
        cmd = ["say", "-v", self._voice, "-r", str(rate), text or " "]
        try:
            self._process = subprocess.Popen(
                cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            )
        except OSError as e:
            raise RuntimeError(f"macOS TTS failed to start: {e}") from e
        logger.debug(f"Speaking: '{text[:40]}'")

    def stop(self) -> None:
        """Interrupt any utterance in progress."""
        if self._process is not None and self._process.poll() is None:
            self._process.terminate()
        self._process = None



__all__ = ["MacOSSpeaker"]
