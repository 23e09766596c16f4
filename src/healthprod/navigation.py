"""Pages of the application shell."""

from enum import Enum


class Page(Enum):
    """Navigable pages."""

    DASHBOARD = "dashboard"
    TASKS = "tasks"
    CHALLENGES = "challenges"
    REWARDS = "rewards"
    FOCUS = "focus"
    SCANNER = "scanner"
    CHAT = "chat"


__all__ = ["Page"]
