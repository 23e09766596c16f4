"""Knowledge feed module for HealthProd."""

from .cache import CARD_DATE_KEY, CARD_KEY, DailyCardCache
from .models import FALLBACK_CARD, KnowledgeCard, KnowledgeCategory

__all__ = [
    "CARD_DATE_KEY",
    "CARD_KEY",
    "DailyCardCache",
    "FALLBACK_CARD",
    "KnowledgeCard",
    "KnowledgeCategory",
]
