"""Unit tests for the voice command dispatcher."""

import threading
from unittest.mock import MagicMock

import pytest

from healthprod.ai.gateway import DailyReport
from healthprod.navigation import Page
from healthprod.tts.mock import MockSpeaker
from healthprod.voice.dispatcher import (
    VoiceAction,
    VoiceCommandDispatcher,
    match_command,
)


@pytest.fixture
def target() -> MagicMock:
    target = MagicMock()
    target.generate_report.return_value = DailyReport(
        productivity_score=82,
        summary="Great focus today.",
        recommendations="Sleep earlier.",
        next_day_todo_list=["Plan"],
    )
    return target


@pytest.fixture
def speaker() -> MockSpeaker:
    return MockSpeaker()


@pytest.fixture
def dispatcher(target: MagicMock, speaker: MockSpeaker) -> VoiceCommandDispatcher:
    return VoiceCommandDispatcher(target, speaker)


class TestWakePhrase:
    """Tests for wake phrase gating."""

    def test_without_wake_phrase_is_ignored(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        assert dispatcher.handle_transcript("what's the weather") is None
        assert target.method_calls == []
        assert speaker.spoken_texts == []

    def test_wake_phrase_alone_is_ignored(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        assert dispatcher.handle_transcript("  Hey AI   ") is None
        assert target.method_calls == []
        assert speaker.spoken_texts == []

    def test_case_and_whitespace_normalized(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock
    ) -> None:
        result = dispatcher.handle_transcript("  HEY AI Add New Task ")
        assert result is not None
        assert result.command == "add new task"
        target.navigate.assert_called_once_with(Page.TASKS)

    def test_custom_wake_phrase(self, target: MagicMock, speaker: MockSpeaker) -> None:
        dispatcher = VoiceCommandDispatcher(target, speaker, wake_phrase="Okay Coach")
        assert dispatcher.handle_transcript("hey ai add task") is None
        assert dispatcher.handle_transcript("okay coach add task") is not None


class TestCommands:
    """Tests for command rules."""

    def test_add_task_navigates_without_report(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        result = dispatcher.handle_transcript("hey ai add new task")
        assert result is not None
        assert result.action == VoiceAction.NAVIGATE_TASKS
        target.navigate.assert_called_once_with(Page.TASKS)
        target.generate_report.assert_not_called()
        assert speaker.spoken_texts == ["Navigating to tasks."]

    def test_start_focus_sets_flag_then_navigates(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        result = dispatcher.handle_transcript("hey ai please start my focus timer")
        assert result is not None
        assert result.action == VoiceAction.START_FOCUS
        names = [call[0] for call in target.method_calls]
        assert names == ["set_focus_auto_start", "navigate"]
        target.set_focus_auto_start.assert_called_once_with(True)
        target.navigate.assert_called_once_with(Page.FOCUS)
        assert speaker.spoken_texts == ["Starting your focus session."]

    def test_report_speaks_score_and_summary(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        result = dispatcher.handle_transcript("hey ai give me today's report")
        assert result is not None
        assert result.action == VoiceAction.GENERATE_REPORT
        assert speaker.spoken_texts == [
            "Generating your daily report now.",
            "Report generated. Your productivity score is 82. "
            "Here is your summary: Great focus today.",
        ]

    def test_report_none_speaks_apology(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        target.generate_report.return_value = None
        dispatcher.handle_transcript("hey ai progress report")
        assert speaker.spoken_texts[-1] == "Sorry, I couldn't generate the report right now."

    def test_report_exception_speaks_apology(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        target.generate_report.side_effect = RuntimeError("boom")
        result = dispatcher.handle_transcript("hey ai progress report")
        assert result is not None
        assert speaker.spoken_texts[-1] == "Sorry, I couldn't generate the report right now."

    def test_unrecognized_command(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        result = dispatcher.handle_transcript("hey ai sing a song")
        assert result is not None
        assert result.action == VoiceAction.UNRECOGNIZED
        assert target.method_calls == []
        assert speaker.spoken_texts == []

    def test_first_rule_wins(self) -> None:
        assert match_command("add task and then progress report") == VoiceAction.NAVIGATE_TASKS


class TestSpeechFailures:
    """Tests for fire-and-forget speech."""

    def test_speaker_failure_does_not_propagate(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock, speaker: MockSpeaker
    ) -> None:
        speaker.set_error("audio device busy")
        result = dispatcher.handle_transcript("hey ai add task")
        assert result is not None
        target.navigate.assert_called_once_with(Page.TASKS)

    def test_without_speaker(self, target: MagicMock) -> None:
        dispatcher = VoiceCommandDispatcher(target, speaker=None)
        assert dispatcher.handle_transcript("hey ai today's report") is not None
        target.generate_report.assert_called_once()


class TestOverlappingReports:
    """Tests for report request serialization."""

    def test_overlapping_request_is_dropped(self, target: MagicMock, speaker: MockSpeaker) -> None:
        entered = threading.Event()
        release = threading.Event()

        def slow_report() -> DailyReport:
            entered.set()
            release.wait(2.0)
            return DailyReport(70, "ok", "rest", ["a"])

        target.generate_report.side_effect = slow_report
        dispatcher = VoiceCommandDispatcher(target, speaker)

        worker = threading.Thread(
            target=dispatcher.handle_transcript, args=("hey ai today's report",)
        )
        worker.start()
        assert entered.wait(2.0)

        second = dispatcher.handle_transcript("hey ai progress report")
        release.set()
        worker.join(2.0)

        assert second is not None
        assert second.action == VoiceAction.REPORT_BUSY
        assert target.generate_report.call_count == 1

    def test_lock_released_after_report(
        self, dispatcher: VoiceCommandDispatcher, target: MagicMock
    ) -> None:
        dispatcher.handle_transcript("hey ai today's report")
        dispatcher.handle_transcript("hey ai today's report")
        assert target.generate_report.call_count == 2
