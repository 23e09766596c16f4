"""Knowledge feed data models."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class KnowledgeCategory(Enum):
    """Kind of content shown on a knowledge card."""

    PRODUCTIVITY_HACK = "Productivity Hack"
    FUN_FACT = "Fun Fact"
    QUOTE = "Quote"
    CHALLENGE = "Challenge"


@dataclass(frozen=True)
class KnowledgeCard:
    """A bite-sized daily tip, fact, quote or challenge."""

    title: str
    content: str
    category: KnowledgeCategory

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = asdict(self)
        data["category"] = self.category.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KnowledgeCard":
        """Create from a dictionary.

        Raises:
            KeyError: If title or content is missing.
            ValueError: If category is not a known value.
        """
        return cls(
            title=str(data["title"]),
            content=str(data["content"]),
            category=KnowledgeCategory(data.get("category", KnowledgeCategory.PRODUCTIVITY_HACK.value)),
        )


FALLBACK_CARD = KnowledgeCard(
    title="Quick Tip",
    content=(
        "Stay hydrated! Drinking enough water can significantly boost your focus "
        "and energy levels throughout the day."
    ),
    category=KnowledgeCategory.PRODUCTIVITY_HACK,
)


__all__ = ["FALLBACK_CARD", "KnowledgeCard", "KnowledgeCategory"]
