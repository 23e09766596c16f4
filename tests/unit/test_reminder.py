"""Unit tests for reminders and the reminder scheduler."""

import time
from datetime import datetime

import pytest

from healthprod.activities.models import ActivityType
from healthprod.notify.notifier import MockNotifier
from healthprod.reminders import (
    REMINDER_TITLE,
    Reminder,
    ReminderBook,
    ReminderScheduler,
    ReminderValidationError,
    normalize_time,
)


class TestNormalizeTime:
    """Tests for HH:MM validation."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("07:05", "07:05"), ("7:05", "07:05"), (" 23:59 ", "23:59"), ("00:00", "00:00")],
    )
    def test_valid(self, value: str, expected: str) -> None:
        assert normalize_time(value) == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "1230", "", "7:5"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ReminderValidationError):
            normalize_time(value)


class TestReminder:
    """Tests for the Reminder model."""

    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ReminderValidationError):
            Reminder(id="r1", title="  ", time="08:00", activity_type=ActivityType.MEAL)

    def test_fields_normalized(self) -> None:
        reminder = Reminder(id="r1", title=" Breakfast ", time="8:00", activity_type=ActivityType.MEAL)
        assert reminder.title == "Breakfast"
        assert reminder.time == "08:00"


class TestReminderBook:
    """Tests for ReminderBook."""

    def test_sorted_by_time(self) -> None:
        book = ReminderBook()
        book.add("Lunch", "12:30", ActivityType.MEAL)
        book.add("Run", "06:45", ActivityType.EXERCISE)
        book.add("Bed", "22:00", ActivityType.SLEEP)
        assert [r.time for r in book.all()] == ["06:45", "12:30", "22:00"]

    def test_invalid_add_leaves_book_unchanged(self) -> None:
        book = ReminderBook()
        with pytest.raises(ReminderValidationError):
            book.add("Lunch", "25:00", ActivityType.MEAL)
        assert len(book) == 0

    def test_delete(self) -> None:
        book = ReminderBook()
        reminder = book.add("Lunch", "12:30", ActivityType.MEAL)
        assert book.delete(reminder.id) is True
        assert book.delete(reminder.id) is False
        assert book.all() == ()

    def test_due_at(self) -> None:
        book = ReminderBook()
        lunch = book.add("Lunch", "12:30", ActivityType.MEAL)
        book.add("Bed", "22:00", ActivityType.SLEEP)
        assert book.due_at("12:30") == [lunch]
        assert book.due_at("12:31") == []


class TestReminderScheduler:
    """Tests for ReminderScheduler."""

    @pytest.fixture
    def book(self) -> ReminderBook:
        book = ReminderBook()
        book.add("Drink water", "10:00", ActivityType.MEAL)
        return book

    def test_fires_at_matching_minute(self, book: ReminderBook) -> None:
        notifier = MockNotifier()
        scheduler = ReminderScheduler(book, notifier)
        fired = scheduler.check(datetime(2025, 10, 17, 10, 0, 15))
        assert [r.title for r in fired] == ["Drink water"]
        assert notifier.notifications[0].title == REMINDER_TITLE
        assert notifier.notifications[0].body == "Drink water"

    def test_no_fire_at_other_minute(self, book: ReminderBook) -> None:
        notifier = MockNotifier()
        scheduler = ReminderScheduler(book, notifier)
        assert scheduler.check(datetime(2025, 10, 17, 10, 1)) == []
        assert notifier.notifications == []

    def test_fires_once_per_minute(self, book: ReminderBook) -> None:
        notifier = MockNotifier()
        scheduler = ReminderScheduler(book, notifier)
        scheduler.check(datetime(2025, 10, 17, 10, 0, 5))
        scheduler.check(datetime(2025, 10, 17, 10, 0, 35))
        assert len(notifier.notifications) == 1

    def test_fires_again_next_day(self, book: ReminderBook) -> None:
        notifier = MockNotifier()
        scheduler = ReminderScheduler(book, notifier)
        scheduler.check(datetime(2025, 10, 17, 10, 0))
        scheduler.check(datetime(2025, 10, 18, 10, 0))
        assert len(notifier.notifications) == 2

    def test_unavailable_notifier_skips(self, book: ReminderBook) -> None:
        notifier = MockNotifier(available=False)
        scheduler = ReminderScheduler(book, notifier)
        assert scheduler.check(datetime(2025, 10, 17, 10, 0)) == []
        assert notifier.notifications == []

    def test_background_polling(self, book: ReminderBook) -> None:
        notifier = MockNotifier()
        scheduler = ReminderScheduler(
            book,
            notifier,
            poll_interval_seconds=0.01,
            clock=lambda: datetime(2025, 10, 17, 10, 0),
        )
        scheduler.start()
        assert scheduler.is_running
        deadline = time.time() + 2.0
        while not notifier.notifications and time.time() < deadline:
            time.sleep(0.01)
        scheduler.stop()
        assert not scheduler.is_running
        assert len(notifier.notifications) == 1
