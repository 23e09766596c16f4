"""HealthProd application.

Wires the state, AI gateway, voice pipeline, reminders and focus timer
together and exposes the user-facing operations.
"""

import logging
import mimetypes
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from ..activities.models import Activity, ActivityType, Attachment
from ..activities.store import demo_activities
from ..ai.gateway import (
    CHAT_FALLBACK,
    INSIGHTS_FALLBACK,
    MEAL_FALLBACK,
    AIGateway,
    DailyReport,
)
from ..ai.session import ChatSession
from ..analytics.streak import calculate_streak
from ..analytics.weekly import DayBucket, DayDetail, DaySelection, hours_on_day, weekly_breakdown
from ..capabilities import Capabilities, NetworkMonitor, detect_capabilities, check_network
from ..config import HealthProdConfig
from ..config.personality import PersonalityConfig, get_personality
from ..focus.timer import FocusTimer
from ..knowledge.cache import DailyCardCache
from ..knowledge.models import KnowledgeCard
from ..navigation import Page
from ..notify.notifier import Notifier
from ..reminders.models import Reminder
from ..reminders.scheduler import ReminderScheduler
from ..tasks.models import Task
from ..tts.speaker import Speaker
from ..voice.dispatcher import DispatchResult, VoiceCommandDispatcher
from ..voice.listener import VoiceListener
from ..voice.recognizer import SpeechRecognizer
from .state import AppState, AppStateView

if TYPE_CHECKING:
    from ..storage.kv import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class Dashboard:
    """Figures shown on the dashboard page."""

    hours_today: float
    streak: int
    coins: int
    week: list[DayBucket]
    selected_day: DayDetail | None


class HealthProdApp:
    """The HealthProd application.

    All mutations go through this object; consumers read via `view`.
    """

    def __init__(
        self,
        config: HealthProdConfig,
        state: AppState,
        gateway: AIGateway,
        speaker: Speaker,
        notifier: Notifier,
        recognizer: SpeechRecognizer,
        capabilities: Capabilities,
        card_cache: DailyCardCache,
        clock: Callable[[], datetime] = datetime.now,
        focus_auto_tick: bool = True,
        network_check: Callable[[], bool] | None = None,
    ) -> None:
        self._config = config
        self._state = state
        self._gateway = gateway
        self._speaker = speaker
        self._notifier = notifier
        self._recognizer = recognizer
        self._capabilities = capabilities
        self._card_cache = card_cache
        self._clock = clock
        self._selection = DaySelection()
        self._chat_session = ChatSession(get_personality(config.ai.personality))

        self._state.activities.on_added(self._award_activity_coins)

        self._dispatcher = VoiceCommandDispatcher(
            target=self,
            speaker=speaker if capabilities.speech_synthesis else None,
            wake_phrase=config.voice.wake_phrase,
        )
        self._listener = VoiceListener(recognizer, self._dispatcher)
        self._scheduler = ReminderScheduler(
            self._state.reminders,
            notifier,
            poll_interval_seconds=config.reminders.poll_interval_seconds,
            clock=clock,
        )
        self._focus_timer = FocusTimer(
            notifier=notifier if capabilities.notifications else None,
            focus_minutes=config.focus.focus_minutes,
            break_minutes=config.focus.break_minutes,
            auto_tick=focus_auto_tick,
        )
        self._network_monitor = (
            NetworkMonitor(
                check=network_check,
                check_interval=config.network.check_interval_seconds,
                on_status_change=self._on_network_change,
                online=state.online,
            )
            if network_check is not None
            else None
        )

    @classmethod
    def from_config(
        cls,
        config: HealthProdConfig,
        use_mocks: bool = False,
        transcript_path: str | None = None,
        storage: "KeyValueStore | None" = None,
        network_check: Callable[[], bool] | None = None,
        seed_demo: bool = False,
    ) -> "HealthProdApp":
        """Create the application from configuration.

        Args:
            config: HealthProd configuration
            use_mocks: Use mock implementations for testing
            transcript_path: Transcript source for voice input ("-" for stdin)
            storage: Key-value store override (defaults by config)
            network_check: Connectivity check override
            seed_demo: Start with the sample activities

        Returns:
            Configured HealthProdApp instance
        """
        from ..ai import AIClient, create_backend
        from ..config.loader import get_storage_path
        from ..notify import create_notifier
        from ..storage.kv import JSONFileStore, MemoryStore
        from ..tts import create_speaker
        from ..voice import create_recognizer

        speaker = create_speaker(config.tts, use_mock=use_mocks)
        notifier = create_notifier(use_mock=use_mocks)
        recognizer = create_recognizer(use_mock=use_mocks, transcript_path=transcript_path)
        backend = create_backend(config.ai, use_mock=use_mocks)

        if storage is None:
            storage = MemoryStore() if use_mocks else JSONFileStore(get_storage_path(config))

        if network_check is None:
            if use_mocks:
                network_check = lambda: True  # noqa: E731
            elif isinstance(backend, AIClient):
                network_check = backend.is_reachable
            else:
                network_check = check_network

        capabilities = detect_capabilities(
            config,
            speaker=speaker,
            recognizer=recognizer,
            notifier=notifier,
            network_check=network_check,
        )

        seed = demo_activities() if (seed_demo or config.testing.seed_demo_data) else None
        state = AppState(
            activities=seed,
            starting_coins=config.rewards.starting_coins,
            online=capabilities.online,
        )

        return cls(
            config=config,
            state=state,
            gateway=AIGateway(backend),
            speaker=speaker,
            notifier=notifier,
            recognizer=recognizer,
            capabilities=capabilities,
            card_cache=DailyCardCache(storage),
            network_check=network_check,
        )

    # -- properties

    @property
    def view(self) -> AppStateView:
        """Read-only view of the application state."""
        return self._state.view()

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    @property
    def listener(self) -> VoiceListener:
        return self._listener

    @property
    def voice_input_available(self) -> bool:
        """Whether the speech source can still deliver transcripts."""
        return self._recognizer.is_available

    @property
    def network_monitor(self) -> NetworkMonitor | None:
        return self._network_monitor

    @property
    def focus_timer(self) -> FocusTimer:
        return self._focus_timer

    @property
    def scheduler(self) -> ReminderScheduler:
        return self._scheduler

    @property
    def personality(self) -> PersonalityConfig:
        return self._chat_session.personality

    @property
    def chat_session(self) -> ChatSession:
        return self._chat_session

    # -- activities and dashboard

    def _award_activity_coins(self, activity: Activity) -> None:
        self._state.wallet.earn(self._config.rewards.coins_per_activity)

    def log_activity(
        self,
        activity_type: ActivityType,
        start_time: datetime,
        end_time: datetime,
        notes: str | None = None,
        attachment_path: str | Path | None = None,
    ) -> Activity:
        """Log a completed activity and earn coins.

        Raises:
            ActivityValidationError: If end_time is not after start_time.
            OSError: If the attachment cannot be read.
        """
        attachment = None
        if attachment_path is not None:
            path = Path(attachment_path)
            media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
            attachment = Attachment(name=path.name, media_type=media_type, data=path.read_bytes())
        return self._state.activities.add(activity_type, start_time, end_time, notes, attachment)

    def dashboard(self) -> Dashboard:
        """Current dashboard figures."""
        now = self._clock()
        activities = self._state.activities.all()
        return Dashboard(
            hours_today=hours_on_day(activities, now.date()),
            streak=calculate_streak(activities, now),
            coins=self._state.wallet.balance,
            week=weekly_breakdown(activities, now),
            selected_day=self._selection.current,
        )

    def select_day(self, index: int) -> DayDetail | None:
        """Toggle the detail view for the week bucket at index.

        Raises:
            IndexError: If index is outside the week.
        """
        activities = self._state.activities.all()
        buckets = weekly_breakdown(activities, self._clock())
        return self._selection.toggle(activities, buckets, index)

    def clear_day_selection(self) -> None:
        self._selection.clear()

    # -- connectivity

    def refresh_online(self) -> bool:
        """Re-check connectivity now. Returns the online status."""
        if self._network_monitor is None:
            return self._state.online
        return self._network_monitor.check()

    def _is_online(self) -> bool:
        return self._state.online or self.refresh_online()

    def _on_network_change(self, online: bool) -> None:
        self._state.set_online(online)
        if not online:
            logger.warning("Went offline; AI features will use fallbacks")
            return
        logger.info("Back online; AI features available again")
        self._state.set_knowledge_card(
            self._card_cache.get_or_fetch(self._gateway.get_daily_knowledge_card, self._clock().date())
        )

    # -- AI features

    def generate_report(self) -> DailyReport | None:
        """Generate today's report, or None when offline."""
        if not self._is_online():
            logger.warning("Offline; daily report unavailable")
            return None
        return self._gateway.generate_daily_report(self._state.activities.today(self._clock()))

    def insights(self) -> str:
        """Habit insights over all logged activities."""
        if not self._is_online():
            return INSIGHTS_FALLBACK
        return self._gateway.generate_insights(self._state.activities.all())

    def knowledge_card(self) -> KnowledgeCard | None:
        """Today's knowledge card, fetched at most once a day.

        Offline, the last cached card is shown if there is one.
        """
        today = self._clock().date()
        if self._is_online():
            card = self._card_cache.get_or_fetch(self._gateway.get_daily_knowledge_card, today)
        else:
            card = self._card_cache.latest()
        self._state.set_knowledge_card(card)
        return card

    def analyze_meal(self, path: str | Path) -> str:
        """Analyze a meal photo.

        Raises:
            OSError: If the file cannot be read.
        """
        image_path = Path(path)
        data = image_path.read_bytes()
        if not self._is_online():
            return MEAL_FALLBACK
        media_type = mimetypes.guess_type(image_path.name)[0] or "image/jpeg"
        return self._gateway.analyze_meal_image(data, media_type)

    def chat(self, message: str) -> str:
        """Send a chat message to the current personality."""
        if not self._is_online():
            self._chat_session.add_user_message(message)
            self._chat_session.add_assistant_message(CHAT_FALLBACK)
            return CHAT_FALLBACK
        return self._gateway.chat(self._chat_session, message)

    def set_personality(self, name: str) -> PersonalityConfig:
        """Switch personality, starting a fresh chat.

        Raises:
            KeyError: If no personality has that name.
        """
        personality = get_personality(name)
        self._chat_session.reset(personality)
        logger.info(f"Chat personality set to {personality.name}")
        return personality

    # -- tasks

    def add_task(self, description: str, deadline: str | None = None) -> Task:
        """Add a task (raises TaskValidationError if blank)."""
        return self._state.tasks.add(description, deadline)

    def toggle_task(self, task_id: str) -> Task | None:
        return self._state.tasks.toggle(task_id)

    def prioritize_tasks(self) -> list[Task]:
        """Let the AI prioritize the incomplete tasks.

        Offline, tasks are left untouched.
        """
        pending = self._state.tasks.incomplete()
        if pending and self._is_online():
            self._state.tasks.replace_incomplete(self._gateway.prioritize_tasks(pending))
        return self._state.tasks.sorted()

    # -- reminders and rewards

    def add_reminder(self, title: str, time: str, activity_type: ActivityType) -> Reminder:
        """Add a daily reminder (raises ReminderValidationError when invalid)."""
        return self._state.reminders.add(title, time, activity_type)

    def delete_reminder(self, reminder_id: str) -> bool:
        return self._state.reminders.delete(reminder_id)

    def redeem_reward(self, reward_id: str) -> bool:
        """Unlock a reward if the balance covers it."""
        return self._state.rewards.redeem(reward_id, self._state.wallet)

    # -- navigation and voice hooks

    def navigate(self, page: Page) -> None:
        """Open a page; opening focus consumes the auto-start flag."""
        self._state.navigate(page)
        if page == Page.FOCUS and self._state.consume_focus_auto_start():
            self._focus_timer.start()

    def set_focus_auto_start(self, value: bool) -> None:
        self._state.set_focus_auto_start(value)

    def consume_focus_auto_start(self) -> bool:
        return self._state.consume_focus_auto_start()

    def hear(self, transcript: str) -> DispatchResult | None:
        """Handle a finalized transcript as if it came from the microphone."""
        return self._dispatcher.handle_transcript(transcript)

    def start_voice(self) -> bool:
        """Start the voice listener. Returns False if voice input is unsupported."""
        if not self._capabilities.speech_recognition:
            logger.warning("Voice input unsupported in this environment")
            return False
        return self._listener.start()

    def stop_voice(self) -> None:
        self._listener.stop()

    # -- lifecycle

    def start(self, listen: bool = False) -> None:
        """Start background services."""
        if self._capabilities.notifications:
            self._scheduler.start()
        if self._network_monitor is not None:
            self._network_monitor.start()
        if listen:
            self.start_voice()

    def stop(self) -> None:
        """Stop background services."""
        self._listener.stop()
        self._recognizer.close()
        self._scheduler.stop()
        if self._network_monitor is not None:
            self._network_monitor.stop()
        self._focus_timer.pause()
        logger.info("HealthProd stopped")


__all__ = ["Dashboard", "HealthProdApp"]
