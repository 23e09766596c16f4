"""Daily knowledge card cache.

A card is fetched at most once per calendar day and kept in key-value
storage so restarts on the same day show the same card.
"""

import json
import logging
from collections.abc import Callable
from datetime import date

from ..storage.kv import KeyValueStore
from .models import KnowledgeCard

logger = logging.getLogger(__name__)

CARD_KEY = "healthprod-daily-card"
CARD_DATE_KEY = "healthprod-card-date"


class DailyCardCache:
    """Caches the knowledge card for the current day."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def cached(self, today: date | None = None) -> KnowledgeCard | None:
        """Return the stored card only if it was saved today."""
        today = today or date.today()
        if self._store.get(CARD_DATE_KEY) != today.isoformat():
            return None

        raw = self._store.get(CARD_KEY)
        if raw is None:
            return None
        try:
            return KnowledgeCard.from_dict(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable cached knowledge card: {e}")
            return None

    def latest(self) -> KnowledgeCard | None:
        """Return the stored card regardless of its date."""
        raw = self._store.get(CARD_KEY)
        if raw is None:
            return None
        try:
            return KnowledgeCard.from_dict(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            return None

    def save(self, card: KnowledgeCard, today: date | None = None) -> None:
        """Store the card as today's card."""
        today = today or date.today()
        self._store.set(CARD_KEY, json.dumps(card.to_dict()))
        self._store.set(CARD_DATE_KEY, today.isoformat())

    def get_or_fetch(
        self,
        fetch: Callable[[], KnowledgeCard],
        today: date | None = None,
    ) -> KnowledgeCard:
        """Return today's cached card, fetching and storing one if needed."""
        card = self.cached(today)
        if card is not None:
            logger.debug("Using cached knowledge card")
            return card

        card = fetch()
        self.save(card, today)
        return card


__all__ = ["CARD_DATE_KEY", "CARD_KEY", "DailyCardCache"]
