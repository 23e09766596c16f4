"""Continuous voice listener.

Keeps a recognition session open while listening is on, restarting it
whenever it ends. Final results go to the command dispatcher.
"""

import logging
import threading
from collections.abc import Callable
from enum import Enum

from .dispatcher import VoiceCommandDispatcher
from .recognizer import SpeechRecognizer

logger = logging.getLogger(__name__)


class ListenerState(Enum):
    """Listener state."""

    IDLE = "idle"
    LISTENING = "listening"


class VoiceListener:
    """Self-restarting listening loop.

    Sessions end on silence, end of input or recognizer errors. While the
    listener is on, each ending is followed by a new session after a short
    delay (longer after an error). stop() suppresses further restarts.
    """

    def __init__(
        self,
        recognizer: SpeechRecognizer,
        dispatcher: VoiceCommandDispatcher,
        restart_delay: float = 0.1,
        error_backoff: float = 1.0,
        on_state_change: Callable[[ListenerState], None] | None = None,
    ) -> None:
        """Initialize the listener.

        Args:
            recognizer: Speech source
            dispatcher: Receives final transcripts
            restart_delay: Pause before reopening after a normal session end
            error_backoff: Pause before reopening after a recognizer error
            on_state_change: Called with the new state on every transition
        """
        self._recognizer = recognizer
        self._dispatcher = dispatcher
        self._restart_delay = restart_delay
        self._error_backoff = error_backoff
        self._on_state_change = on_state_change
        self._state = ListenerState.IDLE
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._transcript = ""
        self._restart_count = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> ListenerState:
        return self._state

    @property
    def is_listening(self) -> bool:
        return self._state == ListenerState.LISTENING

    @property
    def transcript(self) -> str:
        """Live transcript, or the last dispatched command."""
        return self._transcript

    @property
    def restart_count(self) -> int:
        """Number of sessions reopened after ending."""
        return self._restart_count

    def start(self) -> bool:
        """Begin listening.

        Returns:
            False if the recognizer is unavailable.
        """
        with self._lock:
            if self._state == ListenerState.LISTENING:
                return True
            if not self._recognizer.is_available:
                logger.warning("Speech recognition unavailable; voice control disabled")
                return False
            self._stop_event.clear()
            self._set_state(ListenerState.LISTENING)
            self._thread = threading.Thread(target=self._run_loop, daemon=True)
            self._thread.start()
        logger.info("Voice listener started")
        return True

    def stop(self) -> None:
        """Stop listening; no session is restarted afterwards."""
        with self._lock:
            if self._state == ListenerState.IDLE:
                return
            self._stop_event.set()
            self._set_state(ListenerState.IDLE)
            thread = self._thread
            self._thread = None
        self._recognizer.stop()
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=2.0)
        self._transcript = ""
        logger.info("Voice listener stopped")

    def toggle(self) -> bool:
        """Flip between listening and idle. Returns True if now listening."""
        if self.is_listening:
            self.stop()
            return False
        return self.start()

    def _set_state(self, state: ListenerState) -> None:
        self._state = state
        if self._on_state_change is not None:
            try:
                self._on_state_change(state)
            except Exception:
                logger.exception("Listener state callback failed")

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            delay = self._restart_delay
            try:
                for result in self._recognizer.listen():
                    if self._stop_event.is_set():
                        break
                    self._transcript = result.text
                    if result.is_final:
                        dispatched = self._dispatcher.handle_transcript(result.text)
                        if dispatched is not None:
                            self._transcript = dispatched.command
            except Exception as e:
                logger.error(f"Speech recognition error: {e}")
                delay = self._error_backoff

            if self._stop_event.is_set():
                break
            self._restart_count += 1
            logger.debug("Recognition session ended; restarting")
            self._stop_event.wait(delay)


__all__ = ["ListenerState", "VoiceListener"]
