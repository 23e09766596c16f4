"""Text-to-speech module for HealthProd.

Provides platform-adaptive speech output:
- macOS: native `say` with the "Samantha" voice
- Other: falls back to the mock speaker
"""

import logging
from typing import TYPE_CHECKING

from ..config.profiles import Platform, detect_platform
from .mock import MockSpeaker
from .speaker import Speaker

if TYPE_CHECKING:
    from ..config import TTSConfig

logger = logging.getLogger(__name__)


def create_speaker(config: "TTSConfig | None" = None, use_mock: bool = False) -> Speaker:
    """Create the appropriate speaker for the current platform.

    Never returns None; falls back to an unavailable MockSpeaker so callers
    can branch on is_available.
    """
    if use_mock:
        logger.info("TTS: Using MockSpeaker (requested)")
        return MockSpeaker()

    if detect_platform() == Platform.MACOS:
        from .macos import MacOSSpeaker

        voice = config.voice if config is not None else "Samantha"
        speed = config.speed if config is not None else 1.0
        speaker = MacOSSpeaker(voice=voice, speed=speed)
        if speaker.is_available:
            logger.info("TTS: Using MacOSSpeaker (native macOS TTS)")
            return speaker
        logger.warning("TTS: macOS say command not available")

    logger.warning("TTS: no speech output available on this platform")
    return MockSpeaker(available=False)


__all__ = ["MockSpeaker", "Speaker", "create_speaker"]
