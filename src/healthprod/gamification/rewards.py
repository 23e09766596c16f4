"""Rewards store.

Rewards are unlocked by spending coins.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .wallet import CoinWallet

logger = logging.getLogger(__name__)


class RewardType(Enum):
    """Kind of unlockable asset."""

    WALLPAPER = "wallpaper"
    AUDIO = "audio"


@dataclass
class Reward:
    """An unlockable reward.

    Attributes:
        id: Reward identifier
        name: Display name
        description: What the user gets
        cost: Price in coins
        type: Asset kind
        asset_url: Where the unlocked asset lives
        unlocked: Whether it has been redeemed
    """

    id: str
    name: str
    description: str
    cost: int
    type: RewardType
    asset_url: str
    unlocked: bool = False


def default_rewards() -> list[Reward]:
    """The rewards offered on a fresh install."""
    return [
        Reward(
            id="r1",
            name="Zen Wallpaper Pack",
            description="Exclusive set of 3 calming wallpapers for your devices.",
            cost=100,
            type=RewardType.WALLPAPER,
            asset_url="https://source.unsplash.com/random/1920x1080?nature",
        ),
        Reward(
            id="r2",
            name="Focus Meditation Audio",
            description="A 10-minute guided meditation track for deep focus.",
            cost=250,
            type=RewardType.AUDIO,
            asset_url="https://soundhelix.com/examples/mp3/SoundHelix-Song-1.mp3",
        ),
        Reward(
            id="r3",
            name="Productivity Wallpaper",
            description="A motivational wallpaper to keep you on track.",
            cost=100,
            type=RewardType.WALLPAPER,
            asset_url="https://source.unsplash.com/random/1920x1080?work",
        ),
    ]


class RewardStore:
    """Catalog of rewards and their unlock state."""

    def __init__(self, rewards: list[Reward] | None = None) -> None:
        self._rewards = rewards if rewards is not None else default_rewards()

    def all(self) -> list[Reward]:
        return list(self._rewards)

    def get(self, reward_id: str) -> Reward | None:
        return next((r for r in self._rewards if r.id == reward_id), None)

    def redeem(self, reward_id: str, wallet: CoinWallet) -> bool:
        """Unlock a reward by paying its cost.

        Returns:
            False when the reward is unknown, already unlocked, or the wallet
            cannot cover the cost. Nothing changes in that case.
        """
        reward = self.get(reward_id)
        if reward is None or reward.unlocked:
            return False
        if not wallet.spend(reward.cost):
            logger.info(f"Not enough coins for '{reward.name}' ({reward.cost})")
            return False
        reward.unlocked = True
        logger.info(f"Unlocked reward '{reward.name}'")
        return True


__all__ = ["Reward", "RewardStore", "RewardType", "default_rewards"]
