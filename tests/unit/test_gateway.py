"""Unit tests for the AI gateway."""

import json
from datetime import datetime, timedelta

import pytest

from healthprod.activities.models import Activity, ActivityType
from healthprod.ai.errors import GatewayAPIError, GatewayResponseError, GatewayTimeoutError
from healthprod.ai.gateway import (
    CHAT_FALLBACK,
    INSIGHTS_FALLBACK,
    MEAL_FALLBACK,
    NO_ACTIVITY_INSIGHTS,
    AIGateway,
    DailyReport,
    parse_daily_report,
    strip_code_fences,
)
from healthprod.ai.mock import MockAIClient
from healthprod.ai.session import ChatSession
from healthprod.config.personality import get_personality
from healthprod.knowledge.models import FALLBACK_CARD, KnowledgeCategory
from healthprod.tasks.models import Task, TaskPriority

NOW = datetime(2025, 10, 17, 20, 0)

REPORT_JSON = json.dumps(
    {
        "productivityScore": 85,
        "summary": "Solid day.",
        "recommendations": "Take more breaks.",
        "nextDayTodoList": ["Plan", "Walk", "Read"],
    }
)


@pytest.fixture
def activities() -> list[Activity]:
    return [
        Activity("1", ActivityType.WORK, NOW - timedelta(hours=6), NOW - timedelta(hours=2), "Deep work"),
        Activity("2", ActivityType.MEAL, NOW - timedelta(hours=1), NOW - timedelta(minutes=30)),
    ]


@pytest.fixture
def backend() -> MockAIClient:
    return MockAIClient()


@pytest.fixture
def gateway(backend: MockAIClient) -> AIGateway:
    return AIGateway(backend)


class TestReplyParsing:
    """Tests for reply parsing helpers."""

    def test_strip_code_fences(self) -> None:
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
        assert strip_code_fences("```\n[]\n```") == "[]"
        assert strip_code_fences(' {"a": 1} ') == '{"a": 1}'

    def test_parse_daily_report(self) -> None:
        report = parse_daily_report(REPORT_JSON)
        assert report.productivity_score == 85
        assert report.next_day_todo_list == ["Plan", "Walk", "Read"]

    def test_parse_daily_report_missing_field(self) -> None:
        with pytest.raises(GatewayResponseError):
            parse_daily_report('{"summary": "x"}')

    def test_parse_daily_report_not_json(self) -> None:
        with pytest.raises(GatewayResponseError):
            parse_daily_report("Here is your report!")

    @pytest.mark.parametrize("score", ["NaN", "1e999", "-Infinity"])
    def test_parse_daily_report_non_finite_score(self, score: str) -> None:
        text = REPORT_JSON.replace("85", score)
        with pytest.raises(GatewayResponseError):
            parse_daily_report(text)

    def test_score_clamped(self) -> None:
        assert DailyReport(140, "s", "r").productivity_score == 100
        assert DailyReport(-3, "s", "r").productivity_score == 0


class TestInsights:
    """Tests for generate_insights()."""

    def test_no_activities_skips_backend(self, gateway: AIGateway, backend: MockAIClient) -> None:
        assert gateway.generate_insights([]) == NO_ACTIVITY_INSIGHTS
        assert backend.call_count == 0

    def test_returns_reply(self, gateway: AIGateway, backend: MockAIClient, activities: list[Activity]) -> None:
        backend.set_response("## Sleep more")
        assert gateway.generate_insights(activities) == "## Sleep more"
        prompt = backend.calls[0]["messages"][0]["content"]
        assert "Work" in prompt
        assert "4.0 hours" in prompt

    def test_failure_returns_fallback(
        self, gateway: AIGateway, backend: MockAIClient, activities: list[Activity]
    ) -> None:
        backend.set_error(GatewayTimeoutError("slow"))
        assert gateway.generate_insights(activities) == INSIGHTS_FALLBACK


class TestDailyReport:
    """Tests for generate_daily_report()."""

    def test_empty_day_placeholder(self, gateway: AIGateway, backend: MockAIClient) -> None:
        report = gateway.generate_daily_report([])
        assert report.productivity_score == 0
        assert report.summary == "No activities logged for today."
        assert backend.call_count == 0

    def test_parses_reply(self, gateway: AIGateway, backend: MockAIClient, activities: list[Activity]) -> None:
        backend.set_response(f"```json\n{REPORT_JSON}\n```")
        report = gateway.generate_daily_report(activities)
        assert report.productivity_score == 85
        assert report.summary == "Solid day."
        assert "Deep work" in backend.calls[0]["messages"][0]["content"]

    def test_malformed_reply_gives_error_report(
        self, gateway: AIGateway, backend: MockAIClient, activities: list[Activity]
    ) -> None:
        backend.set_response("not json")
        report = gateway.generate_daily_report(activities)
        assert report.summary == "Could not generate report."
        assert report.productivity_score == 0

    @pytest.mark.parametrize("score", ["NaN", "1e999"])
    def test_non_finite_score_gives_error_report(
        self, gateway: AIGateway, backend: MockAIClient, activities: list[Activity], score: str
    ) -> None:
        backend.set_response(REPORT_JSON.replace("85", score))
        report = gateway.generate_daily_report(activities)
        assert report.summary == "Could not generate report."
        assert report.productivity_score == 0

    def test_api_error_gives_error_report(
        self, gateway: AIGateway, backend: MockAIClient, activities: list[Activity]
    ) -> None:
        backend.set_error(GatewayAPIError("overloaded", status_code=529))
        assert gateway.generate_daily_report(activities).summary == "Could not generate report."

    def test_without_backend(self, activities: list[Activity]) -> None:
        report = AIGateway(None).generate_daily_report(activities)
        assert report.summary == "Could not generate report."


class TestPrioritizeTasks:
    """Tests for prioritize_tasks()."""

    @pytest.fixture
    def tasks(self) -> list[Task]:
        return [
            Task(id="a", description="Pay rent", deadline="tomorrow"),
            Task(id="b", description="Water plants"),
            Task(id="c", description="Book dentist"),
        ]

    def test_empty_list(self, gateway: AIGateway, backend: MockAIClient) -> None:
        assert gateway.prioritize_tasks([]) == []
        assert backend.call_count == 0

    def test_applies_priorities_by_position(
        self, gateway: AIGateway, backend: MockAIClient, tasks: list[Task]
    ) -> None:
        backend.set_response(
            json.dumps(
                [
                    {"description": "Pay rent", "priority": "Urgent"},
                    {"description": "Water plants", "priority": "Low"},
                    {"description": "Book dentist", "priority": "Whenever"},
                ]
            )
        )
        result = gateway.prioritize_tasks(tasks)
        assert [t.id for t in result] == ["a", "b", "c"]
        assert [t.priority for t in result] == [
            TaskPriority.URGENT,
            TaskPriority.LOW,
            TaskPriority.MEDIUM,
        ]
        assert result[0].deadline == "tomorrow"
        assert not any(t.completed for t in result)

    def test_short_reply_keeps_every_task(
        self, gateway: AIGateway, backend: MockAIClient, tasks: list[Task]
    ) -> None:
        backend.set_response('[{"priority": "High"}]')
        result = gateway.prioritize_tasks(tasks)
        assert len(result) == 3
        assert [t.priority for t in result] == [
            TaskPriority.HIGH,
            TaskPriority.MEDIUM,
            TaskPriority.MEDIUM,
        ]

    def test_failure_defaults_to_medium(
        self, gateway: AIGateway, backend: MockAIClient, tasks: list[Task]
    ) -> None:
        backend.set_error(GatewayTimeoutError("slow"))
        result = gateway.prioritize_tasks(tasks)
        assert [t.id for t in result] == ["a", "b", "c"]
        assert all(t.priority == TaskPriority.MEDIUM for t in result)


class TestKnowledgeCard:
    """Tests for get_daily_knowledge_card()."""

    def test_canned_card(self, gateway: AIGateway) -> None:
        card = gateway.get_daily_knowledge_card()
        assert card.title == "Two-Minute Rule"
        assert card.category == KnowledgeCategory.PRODUCTIVITY_HACK

    def test_unknown_category_falls_back(self, gateway: AIGateway, backend: MockAIClient) -> None:
        backend.set_response('{"title": "T", "content": "C", "category": "Gossip"}')
        assert gateway.get_daily_knowledge_card() == FALLBACK_CARD

    def test_missing_field_falls_back(self, gateway: AIGateway, backend: MockAIClient) -> None:
        backend.set_response('{"title": "T"}')
        assert gateway.get_daily_knowledge_card() == FALLBACK_CARD

    def test_error_falls_back(self, gateway: AIGateway, backend: MockAIClient) -> None:
        backend.set_error(GatewayTimeoutError("slow"))
        assert gateway.get_daily_knowledge_card() == FALLBACK_CARD


class TestMealAnalysis:
    """Tests for analyze_meal_image()."""

    def test_sends_image_then_prompt(self, gateway: AIGateway, backend: MockAIClient) -> None:
        backend.set_response("About 600 kcal.")
        assert gateway.analyze_meal_image(b"jpegdata", "image/jpeg") == "About 600 kcal."
        content = backend.calls[0]["messages"][0]["content"]
        assert content[0]["type"] == "image"
        assert content[0]["source"]["media_type"] == "image/jpeg"
        assert content[1]["type"] == "text"

    def test_failure(self, gateway: AIGateway, backend: MockAIClient) -> None:
        backend.set_error(GatewayAPIError("bad image", status_code=400))
        assert gateway.analyze_meal_image(b"x", "image/png") == MEAL_FALLBACK


class TestChat:
    """Tests for chat()."""

    def test_reply_appended(self, gateway: AIGateway, backend: MockAIClient) -> None:
        session = ChatSession(get_personality("Zen Master"))
        backend.set_response("Breathe.")
        assert gateway.chat(session, "I'm stressed") == "Breathe."
        assert [m.role for m in session.messages] == ["assistant", "user", "assistant"]
        call = backend.calls[0]
        assert call["system"] == get_personality("Zen Master").system_prompt
        assert call["messages"] == [{"role": "user", "content": "I'm stressed"}]

    def test_history_sent(self, gateway: AIGateway, backend: MockAIClient) -> None:
        session = ChatSession()
        gateway.chat(session, "first")
        gateway.chat(session, "second")
        assert [m["content"] for m in backend.calls[1]["messages"]] == [
            "first",
            "This is a mock response.",
            "second",
        ]

    def test_failure_keeps_turn(self, gateway: AIGateway, backend: MockAIClient) -> None:
        session = ChatSession()
        backend.set_error(GatewayTimeoutError("slow"))
        assert gateway.chat(session, "hello") == CHAT_FALLBACK
        assert session.messages[-1].text == CHAT_FALLBACK
        assert session.messages[-2].text == "hello"

    def test_without_backend(self) -> None:
        session = ChatSession()
        assert AIGateway(None).chat(session, "hello") == CHAT_FALLBACK
