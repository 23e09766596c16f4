"""Voice control module for HealthProd.

Provides speech recognition sources, the wake-phrase command dispatcher
and the continuous listener.
"""

import logging
import sys

from .dispatcher import (
    DEFAULT_WAKE_PHRASE,
    CommandTarget,
    DispatchResult,
    VoiceAction,
    VoiceCommandDispatcher,
)
from .listener import ListenerState, VoiceListener
from .recognizer import MockRecognizer, RecognitionResult, SpeechRecognizer, StreamRecognizer

logger = logging.getLogger(__name__)


def create_recognizer(use_mock: bool = False, transcript_path: str | None = None) -> SpeechRecognizer:
    """Create the speech recognizer for this run.

    A transcript source takes precedence over the mock recognizer.

    Args:
        use_mock: Use an empty scripted recognizer
        transcript_path: Read transcripts line by line from this file
                         ("-" for standard input)

    Raises:
        OSError: If the transcript file cannot be opened.
    """
    if transcript_path == "-":
        logger.info("Voice: Reading transcripts from stdin")
        return StreamRecognizer(sys.stdin)
    if transcript_path:
        logger.info(f"Voice: Reading transcripts from {transcript_path}")
        return StreamRecognizer(open(transcript_path, encoding="utf-8"), owns_stream=True)
    if use_mock:
        logger.info("Voice: Using MockRecognizer (requested)")
        return MockRecognizer()
    logger.warning("Voice: no speech recognition source configured")
    return MockRecognizer(available=False)


__all__ = [
    "CommandTarget",
    "DEFAULT_WAKE_PHRASE",
    "DispatchResult",
    "ListenerState",
    "MockRecognizer",
    "RecognitionResult",
    "SpeechRecognizer",
    "StreamRecognizer",
    "VoiceAction",
    "VoiceCommandDispatcher",
    "VoiceListener",
    "create_recognizer",
]
