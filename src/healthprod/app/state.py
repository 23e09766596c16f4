"""Application state.

AppState is the single owner of everything the user sees. Components that
only read receive an AppStateView.
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from ..activities.models import Activity
from ..activities.store import ActivityStore
from ..gamification.challenges import Challenge, Friend, default_challenges, default_friends
from ..gamification.rewards import Reward, RewardStore
from ..gamification.wallet import CoinWallet
from ..knowledge.models import KnowledgeCard
from ..navigation import Page
from ..reminders.book import ReminderBook
from ..reminders.models import Reminder
from ..tasks.models import Task
from ..tasks.task_list import TaskList

logger = logging.getLogger(__name__)


class AppState:
    """Authoritative application state.

    Collections are exposed through their owning objects; scalar state
    changes only through the methods below.
    """

    def __init__(
        self,
        activities: Iterable[Activity] | None = None,
        starting_coins: int = 150,
        online: bool = True,
    ) -> None:
        self.activities = ActivityStore(activities)
        self.reminders = ReminderBook()
        self.tasks = TaskList()
        self.wallet = CoinWallet(starting_coins)
        self.rewards = RewardStore()
        self.friends: list[Friend] = default_friends()
        self.challenges: list[Challenge] = default_challenges()
        self._page = Page.DASHBOARD
        self._focus_auto_start = False
        self._online = online
        self._knowledge_card: KnowledgeCard | None = None
        self._lock = threading.Lock()

    @property
    def page(self) -> Page:
        return self._page

    @property
    def focus_auto_start(self) -> bool:
        return self._focus_auto_start

    @property
    def online(self) -> bool:
        return self._online

    @property
    def knowledge_card(self) -> KnowledgeCard | None:
        return self._knowledge_card

    def navigate(self, page: Page) -> None:
        with self._lock:
            self._page = page
        logger.debug(f"Navigated to {page.value}")

    def set_focus_auto_start(self, value: bool) -> None:
        with self._lock:
            self._focus_auto_start = value

    def consume_focus_auto_start(self) -> bool:
        """Return the auto-start flag and clear it."""
        with self._lock:
            value = self._focus_auto_start
            self._focus_auto_start = False
            return value

    def set_online(self, value: bool) -> None:
        with self._lock:
            self._online = value

    def set_knowledge_card(self, card: KnowledgeCard | None) -> None:
        with self._lock:
            self._knowledge_card = card

    def view(self) -> "AppStateView":
        """Read-only facade over this state."""
        return AppStateView(self)


class AppStateView:
    """Read-only view of AppState.

    Every collection is returned as an immutable snapshot.
    """

    def __init__(self, state: AppState) -> None:
        self._state = state

    @property
    def activities(self) -> tuple[Activity, ...]:
        return self._state.activities.all()

    @property
    def reminders(self) -> tuple[Reminder, ...]:
        return self._state.reminders.all()

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(replace(t) for t in self._state.tasks.sorted())

    @property
    def coins(self) -> int:
        return self._state.wallet.balance

    @property
    def rewards(self) -> tuple[Reward, ...]:
        return tuple(replace(r) for r in self._state.rewards.all())

    @property
    def challenges(self) -> tuple[Challenge, ...]:
        return tuple(self._state.challenges)

    @property
    def friends(self) -> tuple[Friend, ...]:
        return tuple(self._state.friends)

    @property
    def page(self) -> Page:
        return self._state.page

    @property
    def focus_auto_start(self) -> bool:
        return self._state.focus_auto_start

    @property
    def online(self) -> bool:
        return self._state.online

    @property
    def knowledge_card(self) -> KnowledgeCard | None:
        return self._state.knowledge_card


__all__ = ["AppState", "AppStateView"]
