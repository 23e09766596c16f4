"""Reminder collection kept sorted by time of day."""

import logging
import threading
import uuid

from ..activities.models import ActivityType
from .models import Reminder

logger = logging.getLogger(__name__)


class ReminderBook:
    """Holds the user's reminders, ordered by time."""

    def __init__(self) -> None:
        self._reminders: list[Reminder] = []
        self._lock = threading.Lock()

    def add(self, title: str, time: str, activity_type: ActivityType) -> Reminder:
        """Create a reminder.

        Raises:
            ReminderValidationError: If title is blank or time malformed.
        """
        reminder = Reminder(
            id=uuid.uuid4().hex,
            title=title,
            time=time,
            activity_type=activity_type,
        )
        with self._lock:
            self._reminders.append(reminder)
            self._reminders.sort(key=lambda r: r.time)
        logger.info(f"Added reminder '{reminder.title}' at {reminder.time}")
        return reminder

    def delete(self, reminder_id: str) -> bool:
        """Delete a reminder. Returns False if it does not exist."""
        with self._lock:
            before = len(self._reminders)
            self._reminders = [r for r in self._reminders if r.id != reminder_id]
            return len(self._reminders) < before

    def all(self) -> tuple[Reminder, ...]:
        """Snapshot of reminders sorted by time."""
        with self._lock:
            return tuple(self._reminders)

    def due_at(self, hhmm: str) -> list[Reminder]:
        """Reminders scheduled for the given HH:MM."""
        return [r for r in self.all() if r.time == hhmm]

    def __len__(self) -> int:
        return len(self._reminders)


__all__ = ["ReminderBook"]
