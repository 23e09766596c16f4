"""Mock AI backend for testing.

Provides a controllable mock implementation for unit and integration testing.
"""

import json
from collections import deque
from typing import Any

from .errors import GatewayError

_CANNED_REPORT = {
    "productivityScore": 72,
    "summary": "A balanced day with solid rest and steady progress.",
    "recommendations": "Try adding a short walk between focus blocks.",
    "nextDayTodoList": [
        "Plan your top three priorities",
        "Take a 20-minute walk",
        "Go to bed before 11 PM",
    ],
}

_CANNED_CARD = {
    "title": "Two-Minute Rule",
    "content": "If a task takes less than two minutes, do it right away.",
    "category": "Productivity Hack",
}


def _prompt_text(messages: list[dict[str, Any]]) -> str:
    content = messages[-1]["content"] if messages else ""
    if isinstance(content, list):
        return " ".join(block.get("text", "") for block in content if isinstance(block, dict))
    return str(content)


class MockAIClient:
    """Mock completion backend for testing.

    Returns queued responses first, then the fixed response if one was set,
    and otherwise a canned reply chosen from the prompt.
    """

    def __init__(self) -> None:
        """Initialize mock backend."""
        self._responses: deque[str] = deque()
        self._response_text: str | None = None
        self._error: GatewayError | None = None
        self._calls: list[dict[str, Any]] = []

    def set_response(self, text: str) -> None:
        """Set the response to return on every call.

        Args:
            text: Text to return
        """
        self._response_text = text
        self._error = None

    def queue_response(self, text: str) -> None:
        """Queue a one-shot response returned before any fixed response."""
        self._responses.append(text)

    def set_error(self, error: GatewayError | None) -> None:
        """Set an error to raise on every call (None clears it)."""
        self._error = error

    def complete(
        self,
        messages: list[dict[str, Any]],
        system: str | None = None,
    ) -> str:
        """Return the next preset response."""
        self._calls.append({"messages": messages, "system": system})

        if self._error is not None:
            raise self._error
        if self._responses:
            return self._responses.popleft()
        if self._response_text is not None:
            return self._response_text
        return self._canned(_prompt_text(messages))

    def _canned(self, prompt: str) -> str:
        if "end-of-day report" in prompt:
            return json.dumps(_CANNED_REPORT)
        if "knowledge feed" in prompt:
            return json.dumps(_CANNED_CARD)
        if "Tasks to prioritize" in prompt:
            return "[]"
        return "This is a mock response."

    @property
    def call_count(self) -> int:
        """Get number of complete calls."""
        return len(self._calls)

    @property
    def calls(self) -> list[dict[str, Any]]:
        """Get recorded calls (messages and system prompt)."""
        return list(self._calls)

    def clear(self) -> None:
        """Reset mock state."""
        self._calls.clear()
        self._responses.clear()
        self._response_text = None
        self._error = None


__all__ = ["MockAIClient"]
