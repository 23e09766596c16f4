"""Notifications module for HealthProd."""

from .notifier import ConsoleNotifier, MockNotifier, Notification, Notifier


def create_notifier(use_mock: bool = False) -> Notifier:
    """Create the notifier for this run."""
    if use_mock:
        return MockNotifier()
    return ConsoleNotifier()


__all__ = ["ConsoleNotifier", "MockNotifier", "Notification", "Notifier", "create_notifier"]
