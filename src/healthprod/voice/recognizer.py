"""Speech recognition sources.

A recognizer delivers one listening session per listen() call as a stream
of interim and final results. The session ends on silence, end of input,
or stop().
"""

import logging
import threading
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecognitionResult:
    """A recognized utterance.

    Attributes:
        text: Recognized text
        is_final: False for interim hypotheses that may still change
    """

    text: str
    is_final: bool = True


class SpeechRecognizer(Protocol):
    """Protocol for continuous speech recognition."""

    @property
    def is_available(self) -> bool:
        """Whether recognition works on this system."""
        ...

    def listen(self) -> Iterator[RecognitionResult]:
        """Run one recognition session, yielding results as they arrive.

        Raises:
            RuntimeError: If the recognizer fails mid-session.
        """
        ...

    def stop(self) -> None:
        """End the current session as soon as possible."""
        ...

    def close(self) -> None:
        """Stop and release the input source."""
        ...


class StreamRecognizer:
    """Treats each non-empty line of a text stream as a final result.

    Useful for piping transcripts from an external speech engine. When
    owns_stream is set, close() closes the stream as well.
    """

    def __init__(self, stream: TextIO, owns_stream: bool = False) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._stopped = threading.Event()
        self._exhausted = False

    @property
    def is_available(self) -> bool:
        return not self._exhausted

    def listen(self) -> Iterator[RecognitionResult]:
        self._stopped.clear()
        if self._exhausted:
            # Stand in for a silence timeout so callers do not spin
            self._stopped.wait(1.0)
            return
        for line in self._stream:
            if self._stopped.is_set():
                return
            text = line.strip()
            if text:
                yield RecognitionResult(text=text, is_final=True)
        self._exhausted = True
        logger.info("Transcript stream ended")

    def stop(self) -> None:
        self._stopped.set()

    def close(self) -> None:
        self.stop()
        self._exhausted = True
        if self._owns_stream and not self._stream.closed:
            self._stream.close()


SessionItem = RecognitionResult | str | Exception


class MockRecognizer:
    """Scripted recognizer for testing.

    Each queued session is a list of results; plain strings are final
    results and exceptions are raised in place. When no sessions remain,
    listen() waits briefly and returns an empty session, like a silence
    timeout.
    """

    def __init__(
        self,
        sessions: Iterable[Iterable[SessionItem]] | None = None,
        available: bool = True,
        idle_timeout: float = 0.05,
    ) -> None:
        self._sessions: deque[list[SessionItem]] = deque(list(s) for s in sessions or ())
        self._available = available
        self._idle_timeout = idle_timeout
        self._stopped = threading.Event()
        self._session_count = 0
        self._stop_count = 0
        self._closed = False
        self._lock = threading.Lock()

    @property
    def is_available(self) -> bool:
        return self._available and not self._closed

    @property
    def session_count(self) -> int:
        """Number of listen() sessions opened."""
        return self._session_count

    @property
    def stop_count(self) -> int:
        """Number of stop() calls."""
        return self._stop_count

    @property
    def closed(self) -> bool:
        return self._closed

    def add_session(self, items: Iterable[SessionItem]) -> None:
        """Queue another scripted session."""
        with self._lock:
            self._sessions.append(list(items))

    def listen(self) -> Iterator[RecognitionResult]:
        with self._lock:
            self._session_count += 1
            items = self._sessions.popleft() if self._sessions else None
        self._stopped.clear()

        if items is None:
            self._stopped.wait(self._idle_timeout)
            return

        for item in items:
            if self._stopped.is_set():
                return
            if isinstance(item, Exception):
                raise item
            if isinstance(item, str):
                item = RecognitionResult(text=item, is_final=True)
            yield item

    def stop(self) -> None:
        self._stop_count += 1
        self._stopped.set()

    def close(self) -> None:
        self.stop()
        self._closed = True


__all__ = [
    "MockRecognizer",
    "RecognitionResult",
    "SpeechRecognizer",
    "StreamRecognizer",
]
