"""Unit tests for activity models and the activity store."""

from datetime import datetime, timedelta

import pytest

from healthprod.activities.models import (
    Activity,
    ActivityType,
    ActivityValidationError,
    Attachment,
)
from healthprod.activities.store import ActivityStore, demo_activities

NOW = datetime(2025, 10, 17, 20, 0)


class TestActivityType:
    """Tests for ActivityType parsing."""

    def test_parse_case_insensitive(self) -> None:
        assert ActivityType.parse("exercise") == ActivityType.EXERCISE
        assert ActivityType.parse("  SLEEP ") == ActivityType.SLEEP

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            ActivityType.parse("Nap")


class TestActivity:
    """Tests for the Activity entity."""

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ActivityValidationError):
            Activity("1", ActivityType.WORK, NOW, NOW - timedelta(hours=1))

    def test_zero_length_rejected(self) -> None:
        with pytest.raises(ActivityValidationError, match="End time must be after start time"):
            Activity("1", ActivityType.WORK, NOW, NOW)

    def test_duration_and_day(self) -> None:
        activity = Activity(
            "1", ActivityType.SLEEP, datetime(2025, 10, 16, 23, 0), datetime(2025, 10, 17, 7, 30)
        )
        assert activity.duration_hours == 8.5
        assert activity.day == datetime(2025, 10, 16).date()

    def test_attachment_not_in_repr(self) -> None:
        attachment = Attachment("lunch.jpg", "image/jpeg", b"\xff\xd8" * 100)
        assert "xff" not in repr(attachment)


class TestActivityStore:
    """Tests for ActivityStore."""

    def test_add_assigns_id(self) -> None:
        store = ActivityStore()
        activity = store.add(ActivityType.STUDY, NOW - timedelta(hours=2), NOW, "Calculus")
        assert activity.id
        assert activity.notes == "Calculus"
        assert len(store) == 1

    def test_empty_notes_become_none(self) -> None:
        store = ActivityStore()
        activity = store.add(ActivityType.STUDY, NOW - timedelta(hours=1), NOW, "")
        assert activity.notes is None

    def test_invalid_add_leaves_store_unchanged(self) -> None:
        store = ActivityStore()
        with pytest.raises(ActivityValidationError):
            store.add(ActivityType.MEAL, NOW, NOW - timedelta(minutes=5))
        assert len(store) == 0

    def test_all_newest_first(self) -> None:
        store = ActivityStore()
        store.add(ActivityType.SLEEP, NOW - timedelta(hours=10), NOW - timedelta(hours=2))
        store.add(ActivityType.MEAL, NOW - timedelta(hours=1), NOW)
        store.add(ActivityType.WORK, NOW - timedelta(days=1, hours=3), NOW - timedelta(days=1))
        types = [a.type for a in store.all()]
        assert types == [ActivityType.MEAL, ActivityType.SLEEP, ActivityType.WORK]

    def test_today_filters_by_start_day(self) -> None:
        store = ActivityStore()
        store.add(ActivityType.MEAL, NOW - timedelta(hours=1), NOW)
        store.add(ActivityType.WORK, NOW - timedelta(days=1, hours=3), NOW - timedelta(days=1))
        today = store.today(NOW)
        assert [a.type for a in today] == [ActivityType.MEAL]

    def test_listener_called_on_add(self) -> None:
        store = ActivityStore()
        seen: list[Activity] = []
        store.on_added(seen.append)
        activity = store.add(ActivityType.EXERCISE, NOW - timedelta(hours=1), NOW)
        assert seen == [activity]

    def test_listener_failure_does_not_block_add(self) -> None:
        store = ActivityStore()

        def broken(activity: Activity) -> None:
            raise RuntimeError("listener down")

        store.on_added(broken)
        store.add(ActivityType.EXERCISE, NOW - timedelta(hours=1), NOW)
        assert len(store) == 1

    def test_listener_not_called_on_invalid_add(self) -> None:
        store = ActivityStore()
        seen: list[Activity] = []
        store.on_added(seen.append)
        with pytest.raises(ActivityValidationError):
            store.add(ActivityType.EXERCISE, NOW, NOW)
        assert seen == []


class TestDemoActivities:
    """Tests for the demo seed data."""

    def test_six_activities(self) -> None:
        activities = demo_activities(NOW)
        assert [a.id for a in activities] == ["1", "2", "3", "4", "5", "6"]

    def test_seed_loads_into_store(self) -> None:
        store = ActivityStore(demo_activities(NOW))
        assert len(store) == 6
        assert len(store.today(NOW)) == 2
