"""Voice command dispatcher.

Turns finalized transcripts into navigation and report actions. Only
transcripts that begin with the wake phrase are acted on; anything else is
ignored silently.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from ..navigation import Page

if TYPE_CHECKING:
    from ..ai.gateway import DailyReport
    from ..tts.speaker import Speaker

logger = logging.getLogger(__name__)

DEFAULT_WAKE_PHRASE = "hey ai"

NAVIGATING_TO_TASKS = "Navigating to tasks."
STARTING_FOCUS = "Starting your focus session."
GENERATING_REPORT = "Generating your daily report now."
REPORT_FAILED = "Sorry, I couldn't generate the report right now."
REPORT_READY = "Report generated. Your productivity score is {score}. Here is your summary: {summary}"


class VoiceAction(Enum):
    """What a dispatched command did."""

    NAVIGATE_TASKS = "navigate_tasks"
    START_FOCUS = "start_focus"
    GENERATE_REPORT = "generate_report"
    REPORT_BUSY = "report_busy"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a transcript that carried the wake phrase.

    Attributes:
        action: Action taken
        command: Command text after the wake phrase
    """

    action: VoiceAction
    command: str


class CommandTarget(Protocol):
    """Application hooks the dispatcher drives."""

    def navigate(self, page: Page) -> None: ...

    def set_focus_auto_start(self, value: bool) -> None: ...

    def generate_report(self) -> "DailyReport | None": ...


COMMAND_RULES: list[tuple[tuple[str, ...], VoiceAction]] = [
    (("add new task", "add task"), VoiceAction.NAVIGATE_TASKS),
    (("start focus timer", "start my focus timer"), VoiceAction.START_FOCUS),
    (("today's report", "progress report"), VoiceAction.GENERATE_REPORT),
]


def match_command(command: str) -> VoiceAction:
    """Match a command against the rules; the first matching rule wins."""
    for phrases, action in COMMAND_RULES:
        if any(phrase in command for phrase in phrases):
            return action
    return VoiceAction.UNRECOGNIZED


class VoiceCommandDispatcher:
    """Dispatches wake-phrase commands to the application.

    Spoken feedback is fire-and-forget: speaker failures are logged and
    never reach the caller. At most one report request runs at a time;
    overlapping requests are dropped.
    """

    def __init__(
        self,
        target: CommandTarget,
        speaker: "Speaker | None" = None,
        wake_phrase: str = DEFAULT_WAKE_PHRASE,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            target: Application hooks for navigation and reports
            speaker: Speech output, or None to stay silent
            wake_phrase: Phrase every command must start with
        """
        self._target = target
        self._speaker = speaker
        self._wake_phrase = wake_phrase.strip().lower()
        self._report_lock = threading.Lock()

    @property
    def wake_phrase(self) -> str:
        return self._wake_phrase

    def handle_transcript(self, transcript: str) -> DispatchResult | None:
        """Act on a finalized transcript.

        Returns:
            DispatchResult for wake-phrase commands, or None when the
            transcript was discarded.
        """
        text = transcript.strip().lower()
        if not text.startswith(self._wake_phrase):
            logger.debug(f"Ignoring transcript without wake phrase: '{text}'")
            return None

        command = text[len(self._wake_phrase):].strip()
        if not command:
            logger.debug("Wake phrase heard with no command")
            return None

        action = match_command(command)
        logger.info(f"Voice command '{command}' -> {action.value}")

        handlers: dict[VoiceAction, Callable[[], VoiceAction]] = {
            VoiceAction.NAVIGATE_TASKS: self._navigate_tasks,
            VoiceAction.START_FOCUS: self._start_focus,
            VoiceAction.GENERATE_REPORT: self._generate_report,
        }
        handler = handlers.get(action)
        if handler is not None:
            action = handler()
        return DispatchResult(action=action, command=command)

    def _navigate_tasks(self) -> VoiceAction:
        self._say(NAVIGATING_TO_TASKS)
        self._target.navigate(Page.TASKS)
        return VoiceAction.NAVIGATE_TASKS

    def _start_focus(self) -> VoiceAction:
        self._say(STARTING_FOCUS)
        self._target.set_focus_auto_start(True)
        self._target.navigate(Page.FOCUS)
        return VoiceAction.START_FOCUS

    def _generate_report(self) -> VoiceAction:
        if not self._report_lock.acquire(blocking=False):
            logger.info("Report already in progress; dropping request")
            return VoiceAction.REPORT_BUSY

        try:
            self._say(GENERATING_REPORT)
            try:
                report = self._target.generate_report()
            except Exception as e:
                logger.error(f"Voice report generation failed: {e}")
                report = None

            if report is None:
                self._say(REPORT_FAILED)
            else:
                self._say(
                    REPORT_READY.format(
                        score=report.productivity_score, summary=report.summary
                    )
                )
        finally:
            self._report_lock.release()
        return VoiceAction.GENERATE_REPORT

    def _say(self, text: str) -> None:
        if self._speaker is None or not self._speaker.is_available:
            logger.debug(f"Speech unavailable, not saying: '{text}'")
            return
        try:
            self._speaker.speak(text)
        except Exception as e:
            logger.warning(f"Speech output failed: {e}")


__all__ = [
    "COMMAND_RULES",
    "CommandTarget",
    "DEFAULT_WAKE_PHRASE",
    "DispatchResult",
    "VoiceAction",
    "VoiceCommandDispatcher",
    "match_command",
]
