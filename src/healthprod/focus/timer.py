"""Pomodoro-style focus timer.

Alternates focus sessions and breaks, notifying when each phase ends.
"""

import logging
import threading
from enum import Enum

from ..notify.notifier import Notifier

logger = logging.getLogger(__name__)

FOCUS_TIMER_TITLE = "HealthProd Focus Timer"


class FocusPhase(Enum):
    """Current phase of the focus cycle."""

    FOCUS = "focus"
    BREAK = "break"


class FocusTimer:
    """Countdown that alternates focus and break phases.

    tick() advances the countdown; with auto_tick the timer ticks once per
    second on a daemon thread while active.
    """

    def __init__(
        self,
        notifier: Notifier | None = None,
        focus_minutes: int = 25,
        break_minutes: int = 5,
        auto_tick: bool = True,
    ) -> None:
        self._notifier = notifier
        self._focus_seconds = focus_minutes * 60
        self._break_seconds = break_minutes * 60
        self._auto_tick = auto_tick
        self._phase = FocusPhase.FOCUS
        self._remaining = self._focus_seconds
        self._active = False
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def phase(self) -> FocusPhase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def is_active(self) -> bool:
        return self._active

    def display(self) -> str:
        """Remaining time as MM:SS."""
        minutes, seconds = divmod(self._remaining, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def start(self) -> None:
        """Start or resume the countdown."""
        with self._lock:
            if self._active:
                return
            self._active = True
        logger.info(f"Focus timer started ({self._phase.value}, {self.display()} left)")
        if self._auto_tick:
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._run_loop, daemon=True)
            self._thread.start()

    def pause(self) -> None:
        """Pause the countdown, keeping the remaining time."""
        with self._lock:
            self._active = False
        self._stop_ticking()

    def reset(self) -> None:
        """Stop and return to the start of a focus session."""
        with self._lock:
            self._active = False
            self._phase = FocusPhase.FOCUS
            self._remaining = self._focus_seconds
        self._stop_ticking()

    def tick(self, seconds: int = 1) -> None:
        """Advance an active countdown.

        When the phase runs out the timer stops, notifies, and switches to
        the other phase with a full countdown.
        """
        with self._lock:
            if not self._active:
                return
            self._remaining = max(0, self._remaining - seconds)
            if self._remaining > 0:
                return
            finished = self._phase
            self._active = False
            self._phase = FocusPhase.BREAK if finished == FocusPhase.FOCUS else FocusPhase.FOCUS
            self._remaining = (
                self._focus_seconds if self._phase == FocusPhase.FOCUS else self._break_seconds
            )

        body = "Time for a break!" if finished == FocusPhase.FOCUS else "Time to get back to focus!"
        logger.info(f"Focus timer: {finished.value} phase complete")
        if self._notifier is not None and self._notifier.is_available:
            self._notifier.notify(FOCUS_TIMER_TITLE, body)

    def _stop_ticking(self) -> None:
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=2.0)
        self._thread = None

    def _run_loop(self) -> None:
        while not self._stop_event.wait(1.0):
            if not self._active:
                break
            self.tick()


__all__ = ["FOCUS_TIMER_TITLE", "FocusPhase", "FocusTimer"]
