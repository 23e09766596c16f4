"""Activities module for HealthProd.

Provides the activity model and the append-only activity store.
"""

from .models import Activity, ActivityType, ActivityValidationError, Attachment
from .store import ActivityStore, demo_activities

__all__ = [
    "Activity",
    "ActivityStore",
    "ActivityType",
    "ActivityValidationError",
    "Attachment",
    "demo_activities",
]
