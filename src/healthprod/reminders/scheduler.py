"""Background reminder polling.

Checks the reminder book on a fixed interval and notifies for reminders
whose time matches the current wall-clock minute.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from ..notify.notifier import Notifier
from .book import ReminderBook
from .models import Reminder

logger = logging.getLogger(__name__)

REMINDER_TITLE = "HealthProd Reminder"


class ReminderScheduler:
    """Polls reminders and fires notifications.

    Each reminder fires at most once per calendar minute, however many polls
    land inside that minute.
    """

    def __init__(
        self,
        book: ReminderBook,
        notifier: Notifier,
        poll_interval_seconds: float = 30,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the scheduler.

        Args:
            book: Reminders to watch
            notifier: Where notifications go
            poll_interval_seconds: Delay between checks
            clock: Source of the current local time
        """
        self._book = book
        self._notifier = notifier
        self._interval = poll_interval_seconds
        self._clock = clock
        self._fired: set[tuple[str, str]] = set()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Check if the polling thread is running."""
        return self._thread is not None and self._thread.is_alive()

    def check(self, now: datetime | None = None) -> list[Reminder]:
        """Fire notifications for reminders due at now's minute.

        Returns:
            Reminders notified by this call.
        """
        now = now or self._clock()
        if not self._notifier.is_available:
            return []

        minute_key = now.strftime("%Y-%m-%d %H:%M")
        hhmm = now.strftime("%H:%M")
        fired = []
        for reminder in self._book.due_at(hhmm):
            key = (reminder.id, minute_key)
            if key in self._fired:
                continue
            self._fired.add(key)
            self._notifier.notify(REMINDER_TITLE, reminder.title)
            logger.info(f"Reminder fired: {reminder.title} ({hhmm})")
            fired.append(reminder)

        # Only the current minute can still produce duplicates
        self._fired = {k for k in self._fired if k[1] == minute_key}
        return fired

    def start(self) -> None:
        """Start polling in a background thread."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()
        logger.info(f"Reminder scheduler started (every {self._interval}s)")

    def stop(self) -> None:
        """Stop polling."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=2.0)
            self._thread = None
        logger.info("Reminder scheduler stopped")

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.check()
            except Exception as e:
                logger.error(f"Reminder check failed: {e}")
            self._stop_event.wait(self._interval)


__all__ = ["REMINDER_TITLE", "ReminderScheduler"]
