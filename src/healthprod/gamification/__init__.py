"""Gamification module for HealthProd.

Provides the coin wallet, rewards store and group challenges.
"""

from .challenges import Challenge, Friend, LeaderboardEntry, default_challenges, default_friends
from .rewards import Reward, RewardStore, RewardType, default_rewards
from .wallet import CoinWallet

__all__ = [
    "Challenge",
    "CoinWallet",
    "Friend",
    "LeaderboardEntry",
    "Reward",
    "RewardStore",
    "RewardType",
    "default_challenges",
    "default_friends",
    "default_rewards",
]
