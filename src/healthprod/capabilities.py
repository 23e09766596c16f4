"""Capability negotiation.

Checks what this environment supports at startup so features can branch on
a single record instead of checking the system themselves. Connectivity is
the one capability that changes while running; NetworkMonitor re-checks it.
"""

import logging
import socket
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import HealthProdConfig
    from .notify.notifier import Notifier
    from .tts.speaker import Speaker
    from .voice.recognizer import SpeechRecognizer

logger = logging.getLogger(__name__)

CHECK_HOSTS = [
    ("8.8.8.8", 53),  # Google DNS
    ("1.1.1.1", 53),  # Cloudflare DNS
]
TIMEOUT_SECONDS = 3


@dataclass(frozen=True)
class Capabilities:
    """What the current environment supports."""

    speech_recognition: bool
    speech_synthesis: bool
    notifications: bool
    online: bool

    def describe(self) -> str:
        """One-line summary for the startup banner."""
        flags = {
            "voice input": self.speech_recognition,
            "voice output": self.speech_synthesis,
            "notifications": self.notifications,
            "online": self.online,
        }
        return ", ".join(f"{name} {'on' if ok else 'off'}" for name, ok in flags.items())


def check_network() -> bool:
    """Check internet access by connecting to well-known DNS hosts."""
    for host, port in CHECK_HOSTS:
        try:
            with socket.create_connection((host, port), timeout=TIMEOUT_SECONDS):
                return True
        except OSError:
            continue
    return False


class NetworkMonitor:
    """Re-checks connectivity and reports changes.

    check() runs the connectivity check on demand; start() repeats it in the
    background every check_interval seconds.
    """

    def __init__(
        self,
        check: Callable[[], bool] | None = None,
        check_interval: float = 30,
        on_status_change: Callable[[bool], None] | None = None,
        online: bool = False,
    ) -> None:
        """Initialize the network monitor.

        Args:
            check: Connectivity check (defaults to check_network)
            check_interval: Seconds between background checks
            on_status_change: Called with the new status when it changes
            online: Status before the first check
        """
        self._check = check or check_network
        self._check_interval = check_interval
        self._on_status_change = on_status_change
        self._online = online
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def is_online(self) -> bool:
        return self._online

    @property
    def is_running(self) -> bool:
        return self._thread is not None

    def check(self) -> bool:
        """Check connectivity now and report a change. Returns the status."""
        try:
            online = bool(self._check())
        except Exception as e:
            logger.warning(f"Network check failed: {e}")
            online = False

        with self._lock:
            changed = online != self._online
            self._online = online
        if changed:
            logger.info(f"Network status changed: {'online' if online else 'offline'}")
            if self._on_status_change is not None:
                try:
                    self._on_status_change(online)
                except Exception:
                    logger.exception("Network status callback failed")
        return online

    def start(self) -> None:
        """Start background connectivity checks."""
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._monitor_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop background connectivity checks."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=2.0)
            self._thread = None

    def _monitor_loop(self) -> None:
        while not self._stop_event.wait(self._check_interval):
            self.check()


def detect_capabilities(
    config: "HealthProdConfig",
    speaker: "Speaker | None" = None,
    recognizer: "SpeechRecognizer | None" = None,
    notifier: "Notifier | None" = None,
    network_check: Callable[[], bool] | None = None,
) -> Capabilities:
    """Build the capabilities record for this run.

    Args:
        config: Application configuration (voice and reminder switches)
        speaker: Speech output to check, if any
        recognizer: Speech input to check, if any
        notifier: Notification sink to check, if any
        network_check: Connectivity check (defaults to check_network)
    """
    check = network_check or check_network
    try:
        online = check()
    except Exception as e:
        logger.warning(f"Network check failed: {e}")
        online = False

    capabilities = Capabilities(
        speech_recognition=bool(
            config.voice.enabled and recognizer is not None and recognizer.is_available
        ),
        speech_synthesis=bool(speaker is not None and speaker.is_available),
        notifications=bool(
            config.reminders.notifications_enabled
            and notifier is not None
            and notifier.is_available
        ),
        online=online,
    )

    if not capabilities.speech_recognition:
        logger.warning("Speech recognition unavailable; voice commands disabled")
    if not capabilities.speech_synthesis:
        logger.warning("Speech synthesis unavailable; spoken feedback disabled")
    if not capabilities.notifications:
        logger.warning("Notifications unavailable; reminders will not alert")
    if not capabilities.online:
        logger.warning("Offline; AI features will use fallbacks")

    return capabilities


__all__ = ["Capabilities", "NetworkMonitor", "detect_capabilities", "check_network"]
