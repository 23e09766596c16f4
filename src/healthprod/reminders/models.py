"""Reminder data model."""

import re
from dataclasses import dataclass

from ..activities.models import ActivityType

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class ReminderValidationError(ValueError):
    """Raised when a reminder fails validation."""


def normalize_time(value: str) -> str:
    """Validate a 24-hour time and return it as zero-padded HH:MM.

    Accepts a single-digit hour such as "7:05".

    Raises:
        ReminderValidationError: If value is not a valid time.
    """
    text = value.strip()
    if re.match(r"^\d:\d\d$", text):
        text = "0" + text
    if not _TIME_PATTERN.match(text):
        raise ReminderValidationError(f"Invalid time '{value}': expected HH:MM (24-hour)")
    return text


@dataclass(frozen=True)
class Reminder:
    """A daily reminder at a fixed wall-clock time.

    Attributes:
        id: Unique reminder identifier
        title: What to remind about
        time: Zero-padded 24-hour HH:MM
        activity_type: Related activity type
    """

    id: str
    title: str
    time: str
    activity_type: ActivityType

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ReminderValidationError("Reminder title cannot be empty.")
        object.__setattr__(self, "title", self.title.strip())
        object.__setattr__(self, "time", normalize_time(self.time))


__all__ = ["Reminder", "ReminderValidationError", "normalize_time"]
