"""Configuration profile management.

Provides utilities for detecting configuration profiles from the environment
and the host platform.
"""

import os
import platform
from enum import Enum
from pathlib import Path

from .loader import DEFAULT_CONFIG_DIR


class Profile(Enum):
    """Available configuration profiles."""

    DEV = "dev"
    PROD = "prod"
    TEST = "test"


class Platform(Enum):
    """Supported platforms."""

    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


def detect_platform() -> Platform:
    """Detect the current platform."""
    system = platform.system().lower()

    if system == "darwin":
        return Platform.MACOS
    elif system == "linux":
        return Platform.LINUX
    elif system == "windows":
        return Platform.WINDOWS
    return Platform.UNKNOWN


def detect_profile() -> Profile:
    """Detect appropriate configuration profile.

    Uses the HEALTHPROD_PROFILE environment variable when it names a known
    profile, otherwise falls back to the development profile.
    """
    env_profile = os.environ.get("HEALTHPROD_PROFILE", "").lower()
    profile_map = {
        "prod": Profile.PROD,
        "dev": Profile.DEV,
        "test": Profile.TEST,
    }
    return profile_map.get(env_profile, Profile.DEV)


def get_profile_path(profile: Profile | None = None, config_dir: Path | None = None) -> Path:
    """Get path to profile configuration file.

    Args:
        profile: Profile to use, or None to auto-detect
        config_dir: Configuration directory, or None for default

    Returns:
        Path to profile YAML file
    """
    if profile is None:
        profile = detect_profile()
    return (config_dir or DEFAULT_CONFIG_DIR) / f"{profile.value}.yaml"


__all__ = [
    "Platform",
    "Profile",
    "detect_platform",
    "detect_profile",
    "get_profile_path",
]
