"""Coin balance for the rewards economy."""

import logging
import threading

logger = logging.getLogger(__name__)


class CoinWallet:
    """Non-negative coin balance."""

    def __init__(self, balance: int = 150) -> None:
        if balance < 0:
            raise ValueError("Starting balance cannot be negative")
        self._balance = balance
        self._lock = threading.Lock()

    @property
    def balance(self) -> int:
        """Current coin balance."""
        return self._balance

    def earn(self, amount: int) -> int:
        """Add coins and return the new balance."""
        if amount < 0:
            raise ValueError("Cannot earn a negative amount")
        with self._lock:
            self._balance += amount
            return self._balance

    def spend(self, amount: int) -> bool:
        """Deduct coins if the balance covers amount.

        Returns:
            False, leaving the balance unchanged, when funds are insufficient.
        """
        with self._lock:
            if amount < 0 or amount > self._balance:
                return False
            self._balance -= amount
        logger.debug(f"Spent {amount} coins, balance {self._balance}")
        return True


__all__ = ["CoinWallet"]
