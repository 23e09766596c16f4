"""Data models for activity logging.

Defines the Activity entity, its ActivityType and optional Attachment.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class ActivityType(Enum):
    """Category of a logged activity."""

    SLEEP = "Sleep"
    MEAL = "Meal"
    STUDY = "Study"
    WORK = "Work"
    EXERCISE = "Exercise"

    @classmethod
    def parse(cls, value: str) -> "ActivityType":
        """Parse an activity type from its display name (case-insensitive).

        Raises:
            ValueError: If the name matches no activity type.
        """
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Unknown activity type: {value}")


class ActivityValidationError(ValueError):
    """Raised when an activity fails validation at creation."""


@dataclass(frozen=True)
class Attachment:
    """A single file attached to an activity (e.g., a meal photo)."""

    name: str
    media_type: str
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class Activity:
    """A logged activity with a fixed time span.

    Attributes:
        id: Unique identifier assigned by the store
        type: Activity category
        start_time: When the activity started
        end_time: When the activity ended (strictly after start_time)
        notes: Optional free-text notes
        attachment: Optional attached file
    """

    id: str
    type: ActivityType
    start_time: datetime
    end_time: datetime
    notes: str | None = None
    attachment: Attachment | None = None

    def __post_init__(self) -> None:
        if self.end_time <= self.start_time:
            raise ActivityValidationError("End time must be after start time.")

    @property
    def duration_hours(self) -> float:
        """Duration of the activity in hours."""
        return (self.end_time - self.start_time).total_seconds() / 3600

    @property
    def day(self) -> date:
        """Calendar day the activity is attributed to (its start day)."""
        return self.start_time.date()


__all__ = ["Activity", "ActivityType", "ActivityValidationError", "Attachment"]
