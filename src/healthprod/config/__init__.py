"""Configuration module for HealthProd.

This module provides configuration loading and profile management.
"""

from dataclasses import dataclass, field


@dataclass
class VoiceConfig:
    """Voice command configuration."""

    wake_phrase: str = "hey ai"
    enabled: bool = True


@dataclass
class AIConfig:
    """AI gateway configuration."""

    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 1024
    temperature: float = 0.7
    timeout_seconds: float = 30.0
    personality: str = "Friendly Coach"


@dataclass
class NetworkConfig:
    """Connectivity monitoring configuration."""

    check_interval_seconds: int = 30


@dataclass
class TTSConfig:
    """Text-to-speech configuration."""

    voice: str = "Samantha"
    speed: float = 1.0


@dataclass
class StorageConfig:
    """Key-value storage configuration."""

    path: str = "~/.healthprod/storage.json"


@dataclass
class RemindersConfig:
    """Reminder polling configuration."""

    poll_interval_seconds: int = 30
    notifications_enabled: bool = True


@dataclass
class FocusConfig:
    """Focus timer configuration."""

    focus_minutes: int = 25
    break_minutes: int = 5


@dataclass
class RewardsConfig:
    """Coin economy configuration."""

    starting_coins: int = 150
    coins_per_activity: int = 10


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class TestingConfig:
    """Testing configuration."""

    use_mocks: bool = False
    seed_demo_data: bool = False


@dataclass
class HealthProdConfig:
    """Main HealthProd configuration."""

    voice: VoiceConfig = field(default_factory=VoiceConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    tts: TTSConfig = field(default_factory=TTSConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    reminders: RemindersConfig = field(default_factory=RemindersConfig)
    focus: FocusConfig = field(default_factory=FocusConfig)
    rewards: RewardsConfig = field(default_factory=RewardsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    testing: TestingConfig = field(default_factory=TestingConfig)


__all__ = [
    "AIConfig",
    "FocusConfig",
    "HealthProdConfig",
    "LoggingConfig",
    "NetworkConfig",
    "RemindersConfig",
    "RewardsConfig",
    "StorageConfig",
    "TTSConfig",
    "TestingConfig",
    "VoiceConfig",
]
