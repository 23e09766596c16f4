"""AI gateway for HealthProd.

Every generative feature goes through this gateway. Each operation returns
a usable value even when the AI call fails: errors are logged and replaced
by the fallback text or placeholder for that feature.
"""

import json
import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..activities.models import Activity
from ..knowledge.models import FALLBACK_CARD, KnowledgeCard
from ..tasks.models import Task, TaskPriority
from .client import AIBackend, image_block, text_block
from .errors import GatewayAuthError, GatewayError, GatewayResponseError
from .prompts import (
    MEAL_ANALYSIS_PROMPT,
    daily_report_prompt,
    insights_prompt,
    knowledge_card_prompt,
    prioritize_prompt,
)
from .session import ChatSession

logger = logging.getLogger(__name__)

NO_ACTIVITY_INSIGHTS = "Log some activities to get your first personalized insights!"
INSIGHTS_FALLBACK = "Sorry, I couldn't analyze your habits right now. Please try again later."
MEAL_FALLBACK = (
    "Sorry, I couldn't analyze your meal image. Please ensure it's a clear photo and try again."
)
CHAT_FALLBACK = "I'm having a little trouble connecting right now. Let's try again in a moment."

_FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END = re.compile(r"\s*```$")


@dataclass
class DailyReport:
    """End-of-day report produced by the AI."""

    productivity_score: int
    summary: str
    recommendations: str
    next_day_todo_list: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.productivity_score = max(0, min(100, int(self.productivity_score)))


def empty_report() -> DailyReport:
    """Placeholder report for a day with no activities."""
    return DailyReport(
        productivity_score=0,
        summary="No activities logged for today.",
        recommendations="Log some activities to get a report.",
        next_day_todo_list=["Log your first activity!"],
    )


def error_report() -> DailyReport:
    """Placeholder report used when the AI call fails."""
    return DailyReport(
        productivity_score=0,
        summary="Could not generate report.",
        recommendations=(
            "There was an error communicating with the AI. "
            "Please check your connection and try again."
        ),
        next_day_todo_list=["Try generating the report again later."],
    )


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if present."""
    cleaned = text.strip()
    cleaned = _FENCE_START.sub("", cleaned)
    return _FENCE_END.sub("", cleaned)


def parse_json_reply(text: str) -> Any:
    """Parse an AI reply as JSON, tolerating code fences.

    Raises:
        GatewayResponseError: If the reply is not valid JSON.
    """
    try:
        return json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        raise GatewayResponseError(f"AI reply is not valid JSON: {e}") from e


def parse_daily_report(text: str) -> DailyReport:
    """Parse a daily report from an AI reply.

    Raises:
        GatewayResponseError: If required fields are missing or malformed.
    """
    data = parse_json_reply(text)
    if not isinstance(data, dict):
        raise GatewayResponseError("Daily report reply is not a JSON object")

    try:
        score = float(data["productivityScore"])
        summary = str(data["summary"])
        recommendations = str(data["recommendations"])
        todo = data["nextDayTodoList"]
    except (KeyError, TypeError, ValueError) as e:
        raise GatewayResponseError(f"Daily report reply is missing fields: {e}") from e

    if not math.isfinite(score):
        raise GatewayResponseError(f"productivityScore is not a finite number: {score}")
    if not isinstance(todo, list):
        raise GatewayResponseError("nextDayTodoList is not a list")

    return DailyReport(
        productivity_score=round(score),
        summary=summary,
        recommendations=recommendations,
        next_day_todo_list=[str(item) for item in todo],
    )


def apply_priorities(tasks: Sequence[Task], reply: Any) -> list[Task]:
    """Pair AI priorities with tasks by position.

    Tasks without a usable priority get Medium. Every task is kept and
    marked not completed.
    """
    entries = reply if isinstance(reply, list) else []
    prioritized = []
    for index, task in enumerate(tasks):
        entry = entries[index] if index < len(entries) else None
        priority = TaskPriority.parse(entry.get("priority") if isinstance(entry, dict) else None)
        prioritized.append(
            Task(
                id=task.id,
                description=task.description,
                deadline=task.deadline,
                priority=priority,
                completed=False,
            )
        )
    return prioritized


class AIGateway:
    """Front door for all generative-AI features.

    Args:
        backend: Completion backend, or None when no API key is available.
                 Without a backend every call returns its fallback.
    """

    def __init__(self, backend: AIBackend | None) -> None:
        self._backend = backend

    @property
    def has_backend(self) -> bool:
        """Whether a completion backend is configured."""
        return self._backend is not None

    def _complete(self, content: str | list[dict[str, Any]], system: str | None = None) -> str:
        if self._backend is None:
            raise GatewayAuthError("No AI backend configured")
        return self._backend.complete([{"role": "user", "content": content}], system=system)

    def generate_insights(self, activities: Sequence[Activity]) -> str:
        """Personalized habit insights as markdown text."""
        if not activities:
            return NO_ACTIVITY_INSIGHTS
        try:
            return self._complete(insights_prompt(activities))
        except GatewayError as e:
            logger.error(f"Error getting lifestyle insights: {e}")
            return INSIGHTS_FALLBACK

    def generate_daily_report(self, activities: Sequence[Activity]) -> DailyReport:
        """Generate the end-of-day report for the given activities.

        An empty list returns a placeholder without calling the AI.
        """
        if not activities:
            return empty_report()
        try:
            return parse_daily_report(self._complete(daily_report_prompt(activities)))
        except GatewayError as e:
            logger.error(f"Error generating daily report: {e}")
            return error_report()

    def prioritize_tasks(self, tasks: Sequence[Task]) -> list[Task]:
        """Assign a priority to every task.

        On failure every task gets Medium priority. No task is dropped.
        """
        if not tasks:
            return []
        try:
            reply = parse_json_reply(self._complete(prioritize_prompt(tasks)))
        except GatewayError as e:
            logger.error(f"Error prioritizing tasks: {e}")
            reply = None
        return apply_priorities(tasks, reply)

    def get_daily_knowledge_card(self) -> KnowledgeCard:
        """Fetch a fresh knowledge card."""
        try:
            data = parse_json_reply(self._complete(knowledge_card_prompt()))
            if not isinstance(data, dict):
                raise GatewayResponseError("Knowledge card reply is not a JSON object")
            return KnowledgeCard.from_dict(data)
        except (KeyError, ValueError) as e:
            logger.error(f"Error parsing daily knowledge card: {e}")
            return FALLBACK_CARD
        except GatewayError as e:
            logger.error(f"Error getting daily knowledge card: {e}")
            return FALLBACK_CARD

    def analyze_meal_image(self, data: bytes, media_type: str) -> str:
        """Estimate calories and macros for a meal photo."""
        content = [image_block(data, media_type), text_block(MEAL_ANALYSIS_PROMPT)]
        try:
            return self._complete(content)
        except GatewayError as e:
            logger.error(f"Error analyzing meal image: {e}")
            return MEAL_FALLBACK

    def chat(self, session: ChatSession, message: str) -> str:
        """Send a chat message within a session and return the reply."""
        session.add_user_message(message)
        try:
            if self._backend is None:
                raise GatewayAuthError("No AI backend configured")
            reply = self._backend.complete(
                session.get_api_messages(),
                system=session.personality.system_prompt,
            )
        except GatewayError as e:
            logger.error(f"Error sending message to chat: {e}")
            reply = CHAT_FALLBACK
        session.add_assistant_message(reply)
        return reply


__all__ = [
    "AIGateway",
    "CHAT_FALLBACK",
    "DailyReport",
    "INSIGHTS_FALLBACK",
    "MEAL_FALLBACK",
    "NO_ACTIVITY_INSIGHTS",
    "apply_priorities",
    "empty_report",
    "error_report",
    "parse_daily_report",
    "parse_json_reply",
    "strip_code_fences",
]
