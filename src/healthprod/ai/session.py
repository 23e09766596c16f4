"""Chat session management.

Keeps the conversation history for one personality.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from ..config.personality import DEFAULT_PERSONALITY, PersonalityConfig


@dataclass
class ChatMessage:
    """A single message in the conversation."""

    role: Literal["user", "assistant"]
    text: str
    timestamp: datetime = field(default_factory=datetime.now)


class ChatSession:
    """Conversation state for the AI chat.

    The session opens with the personality's greeting. The greeting is
    shown to the user but not sent to the API, since API conversations
    must begin with a user turn.

    Example:
        session = ChatSession(get_personality("Zen Master"))
        session.add_user_message("How do I stay calm?")
        session.add_assistant_message("Breathe...")
    """

    def __init__(
        self,
        personality: PersonalityConfig = DEFAULT_PERSONALITY,
        session_id: str | None = None,
    ) -> None:
        self._session_id = session_id or str(uuid.uuid4())
        self._personality = personality
        self._messages: list[ChatMessage] = []
        self.reset()

    @property
    def session_id(self) -> str:
        """Get the session identifier."""
        return self._session_id

    @property
    def personality(self) -> PersonalityConfig:
        """Personality driving this session."""
        return self._personality

    @property
    def messages(self) -> list[ChatMessage]:
        """Copy of the displayed conversation, greeting included."""
        return list(self._messages)

    def add_user_message(self, text: str) -> None:
        self._messages.append(ChatMessage(role="user", text=text))

    def add_assistant_message(self, text: str) -> None:
        self._messages.append(ChatMessage(role="assistant", text=text))

    def get_api_messages(self) -> list[dict[str, str]]:
        """Get messages in API format, without the leading greeting."""
        history = self._messages[1:]
        return [{"role": msg.role, "content": msg.text} for msg in history]

    def reset(self, personality: PersonalityConfig | None = None) -> None:
        """Start over, optionally with a different personality."""
        if personality is not None:
            self._personality = personality
        self._messages = [ChatMessage(role="assistant", text=self._personality.greeting)]


__all__ = ["ChatMessage", "ChatSession"]
