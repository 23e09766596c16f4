"""Weekly activity breakdown and day-detail selection.

Aggregates logged hours per activity type over the trailing seven days and
builds the timeline shown when a single day is selected.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from ..activities.models import Activity, ActivityType

logger = logging.getLogger(__name__)

WEEK_DAYS = 7


def day_label(day: date) -> str:
    """Short label for a calendar day, e.g. "Oct 17"."""
    return f"{day.strftime('%b')} {day.day}"


@dataclass
class DayBucket:
    """Hours per activity type for one calendar day."""

    day: date
    label: str
    totals: dict[ActivityType, float] = field(default_factory=dict)

    @property
    def total_hours(self) -> float:
        """Sum of hours across all activity types."""
        return sum(self.totals.values())


@dataclass
class CategorySummary:
    """Hours logged for one activity type within a day."""

    type: ActivityType
    hours: float


@dataclass
class DayDetail:
    """Timeline of a single day's activities."""

    day: date
    title: str
    activities: list[Activity]
    summary: list[CategorySummary]


def hours_on_day(activities: Iterable[Activity], day: date) -> float:
    """Total hours of activities started on the given day."""
    return sum(a.duration_hours for a in activities if a.start_time.date() == day)


def weekly_breakdown(activities: Iterable[Activity], now: datetime | None = None) -> list[DayBucket]:
    """Build seven daily buckets ending today, oldest first.

    Each activity counts fully toward the day its start falls on.
    """
    today = (now or datetime.now()).date()
    buckets = [
        DayBucket(day=day, label=day_label(day))
        for day in (today - timedelta(days=offset) for offset in range(WEEK_DAYS - 1, -1, -1))
    ]
    by_day = {bucket.day: bucket for bucket in buckets}

    for activity in activities:
        bucket = by_day.get(activity.start_time.date())
        if bucket is None:
            continue
        bucket.totals[activity.type] = bucket.totals.get(activity.type, 0.0) + activity.duration_hours

    return buckets


def day_detail(activities: Iterable[Activity], day: date) -> DayDetail | None:
    """Build the timeline for one day, or None when nothing was logged."""
    day_activities = sorted(
        (a for a in activities if a.start_time.date() == day),
        key=lambda a: a.start_time,
    )
    if not day_activities:
        return None

    hours: dict[ActivityType, float] = {}
    for activity in day_activities:
        hours[activity.type] = hours.get(activity.type, 0.0) + activity.duration_hours

    summary = [
        CategorySummary(type=kind, hours=total)
        for kind, total in sorted(hours.items(), key=lambda item: item[1], reverse=True)
    ]
    return DayDetail(
        day=day,
        title=f"Activity Timeline for {day_label(day)}",
        activities=day_activities,
        summary=summary,
    )


class DaySelection:
    """Tracks which day's detail is open on the dashboard.

    Selecting the open day again closes it; selecting an empty day clears
    the selection.
    """

    def __init__(self) -> None:
        self._detail: DayDetail | None = None

    @property
    def current(self) -> DayDetail | None:
        """The open day detail, if any."""
        return self._detail

    def toggle(
        self,
        activities: Iterable[Activity],
        buckets: Sequence[DayBucket],
        index: int,
    ) -> DayDetail | None:
        """Select the bucket at index and return the resulting open detail.

        Raises:
            IndexError: If index is outside the buckets.
        """
        bucket = buckets[index]
        detail = day_detail(activities, bucket.day)

        if detail is None:
            self._detail = None
        elif self._detail is not None and self._detail.title == detail.title:
            self._detail = None
        else:
            self._detail = detail

        logger.debug(f"Day selection: {self._detail.title if self._detail else 'none'}")
        return self._detail

    def clear(self) -> None:
        """Close any open day detail."""
        self._detail = None


__all__ = [
    "CategorySummary",
    "DayBucket",
    "DayDetail",
    "DaySelection",
    "WEEK_DAYS",
    "day_detail",
    "day_label",
    "hours_on_day",
    "weekly_breakdown",
]
