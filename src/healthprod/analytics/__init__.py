"""Analytics module for HealthProd.

Provides the streak calculator and weekly aggregation.
"""

from .streak import MAX_STREAK_DAYS, calculate_streak
from .weekly import (
    CategorySummary,
    DayBucket,
    DayDetail,
    DaySelection,
    day_detail,
    day_label,
    hours_on_day,
    weekly_breakdown,
)

__all__ = [
    "CategorySummary",
    "DayBucket",
    "DayDetail",
    "DaySelection",
    "MAX_STREAK_DAYS",
    "calculate_streak",
    "day_detail",
    "day_label",
    "hours_on_day",
    "weekly_breakdown",
]
