"""Append-only activity store.

Holds every logged activity for the session and notifies listeners on add.
"""

import logging
import threading
import uuid
from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta

from .models import Activity, ActivityType, Attachment

logger = logging.getLogger(__name__)

ActivityListener = Callable[[Activity], None]


class ActivityStore:
    """Collection of logged activities.

    Activities are validated on entry and never removed. Reads return
    immutable snapshots ordered newest start first.
    """

    def __init__(self, activities: Iterable[Activity] | None = None) -> None:
        self._activities: list[Activity] = []
        self._listeners: list[ActivityListener] = []
        self._lock = threading.Lock()
        for activity in activities or ():
            self._insert(activity)

    def add(
        self,
        activity_type: ActivityType,
        start_time: datetime,
        end_time: datetime,
        notes: str | None = None,
        attachment: Attachment | None = None,
    ) -> Activity:
        """Validate and append a new activity.

        Returns:
            The stored Activity with its assigned id.

        Raises:
            ActivityValidationError: If end_time is not after start_time.
        """
        activity = Activity(
            id=uuid.uuid4().hex,
            type=activity_type,
            start_time=start_time,
            end_time=end_time,
            notes=notes or None,
            attachment=attachment,
        )
        self._insert(activity)
        logger.info(
            f"Logged {activity.type.value} activity ({activity.duration_hours:.1f}h)"
        )

        for listener in list(self._listeners):
            try:
                listener(activity)
            except Exception:
                logger.exception("Activity listener failed")

        return activity

    def _insert(self, activity: Activity) -> None:
        with self._lock:
            self._activities.append(activity)
            self._activities.sort(key=lambda a: a.start_time, reverse=True)

    def on_added(self, listener: ActivityListener) -> None:
        """Register a callback invoked after each successful add."""
        self._listeners.append(listener)

    def all(self) -> tuple[Activity, ...]:
        """Snapshot of all activities, newest start first."""
        with self._lock:
            return tuple(self._activities)

    def for_day(self, day: date) -> tuple[Activity, ...]:
        """Activities whose start falls on the given calendar day."""
        return tuple(a for a in self.all() if a.day == day)

    def today(self, now: datetime | None = None) -> tuple[Activity, ...]:
        """Activities started today."""
        return self.for_day((now or datetime.now()).date())

    def __len__(self) -> int:
        return len(self._activities)


def demo_activities(now: datetime | None = None) -> list[Activity]:
    """Build the sample activities shown on a fresh demo install."""
    now = now or datetime.now()
    yesterday = now - timedelta(days=1)
    two_days_ago = now - timedelta(days=2)

    def hours(base: datetime, offset: float) -> datetime:
        return base + timedelta(hours=offset)

    spans = [
        (ActivityType.SLEEP, hours(now, -10), hours(now, -2)),
        (ActivityType.MEAL, hours(now, -1.5), hours(now, -1)),
        (ActivityType.WORK, hours(yesterday, -6), hours(yesterday, -2)),
        (ActivityType.EXERCISE, hours(yesterday, -1), yesterday),
        (ActivityType.SLEEP, hours(yesterday, -18), hours(yesterday, -10)),
        (ActivityType.STUDY, hours(two_days_ago, -5), hours(two_days_ago, -2)),
    ]
    return [
        Activity(id=str(index), type=kind, start_time=start, end_time=end)
        for index, (kind, start, end) in enumerate(spans, start=1)
    ]


__all__ = ["ActivityListener", "ActivityStore", "demo_activities"]
