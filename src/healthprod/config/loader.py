"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
"""

from pathlib import Path
from typing import Any

import yaml

from . import (
    AIConfig,
    FocusConfig,
    HealthProdConfig,
    LoggingConfig,
    NetworkConfig,
    RemindersConfig,
    RewardsConfig,
    StorageConfig,
    TestingConfig,
    TTSConfig,
    VoiceConfig,
)

DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent.parent / "config"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if "extends" in config:
        base_name = config.pop("extends")
        base_config = load_yaml_with_inheritance(path.parent / base_name)
        config = deep_merge(base_config, config)

    return config


def dict_to_config(data: dict[str, Any]) -> HealthProdConfig:
    """Convert raw dict to typed HealthProdConfig dataclass."""
    root = data.get("healthprod", {}) or {}

    # YAML sections may be present but empty
    def section(key: str) -> dict[str, Any]:
        value = root.get(key, {})
        return value if value is not None else {}

    return HealthProdConfig(
        voice=VoiceConfig(**section("voice")),
        ai=AIConfig(**section("ai")),
        network=NetworkConfig(**section("network")),
        tts=TTSConfig(**section("tts")),
        storage=StorageConfig(**section("storage")),
        reminders=RemindersConfig(**section("reminders")),
        focus=FocusConfig(**section("focus")),
        rewards=RewardsConfig(**section("rewards")),
        logging=LoggingConfig(**section("logging")),
        testing=TestingConfig(**section("testing")),
    )


class YAMLConfigLoader:
    """YAML configuration loader implementation."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader with optional config directory.

        Args:
            config_dir: Directory containing config files.
                        Defaults to 'config' relative to project root.
        """
        self._config_dir = config_dir or DEFAULT_CONFIG_DIR

    def load(self, path: Path) -> HealthProdConfig:
        """Load configuration from file path."""
        return dict_to_config(load_yaml_with_inheritance(path))

    def load_profile(self, profile: str) -> HealthProdConfig:
        """Load configuration by profile name."""
        return self.load(self._config_dir / f"{profile}.yaml")

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir


def load_config(path: str | Path | None = None, profile: str | None = None) -> HealthProdConfig:
    """Load HealthProd configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test') if path not given

    Returns:
        Parsed HealthProdConfig

    Examples:
        >>> config = load_config(profile="dev")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader = YAMLConfigLoader()

    if path is not None:
        return loader.load(Path(path))
    return loader.load_profile(profile or "dev")


def get_storage_path(config: HealthProdConfig) -> Path:
    """Resolve the key-value storage file path from config."""
    return Path(config.storage.path).expanduser()


__all__ = [
    "DEFAULT_CONFIG_DIR",
    "YAMLConfigLoader",
    "deep_merge",
    "dict_to_config",
    "get_storage_path",
    "load_config",
    "load_yaml_with_inheritance",
]
