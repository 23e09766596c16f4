"""Reminders module for HealthProd.

Provides the reminder model, the time-sorted reminder book and the
background scheduler.
"""

from .book import ReminderBook
from .models import Reminder, ReminderValidationError, normalize_time
from .scheduler import REMINDER_TITLE, ReminderScheduler

__all__ = [
    "REMINDER_TITLE",
    "Reminder",
    "ReminderBook",
    "ReminderScheduler",
    "ReminderValidationError",
    "normalize_time",
]
