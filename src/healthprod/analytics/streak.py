"""Consecutive-day activity streak calculation."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from ..activities.models import Activity

MAX_STREAK_DAYS = 365


def calculate_streak(
    activities: Iterable[Activity],
    now: datetime | None = None,
    max_days: int = MAX_STREAK_DAYS,
) -> int:
    """Count consecutive calendar days with at least one activity.

    The walk starts at today, or at yesterday when nothing was logged today,
    and stops at the first day without activity. A single missing day ends
    the streak.

    Args:
        activities: Logged activities in any order
        now: Reference time (defaults to the current local time)
        max_days: Upper bound on the result

    Returns:
        Streak length in days, between 0 and max_days.
    """
    active_days: set[date] = {activity.start_time.date() for activity in activities}
    if not active_days:
        return 0

    day = (now or datetime.now()).date()
    if day not in active_days:
        day -= timedelta(days=1)

    streak = 0
    while streak < max_days and day in active_days:
        streak += 1
        day -= timedelta(days=1)
    return streak


__all__ = ["MAX_STREAK_DAYS", "calculate_streak"]
