"""Durable key-value storage.

Small string store used for caches that should survive restarts.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Protocol for string key-value storage."""

    def get(self, key: str) -> str | None:
        """Return the value for key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...


class MemoryStore:
    """In-memory key-value store for tests and mock runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JSONFileStore:
    """Key-value store persisted as a single JSON object on disk.

    The file is rewritten on every change. A missing or corrupt file is
    treated as empty.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file. Parent directories are created
                  on first write.
        """
        self._path = Path(path).expanduser()
        self._lock = threading.Lock()
        self._data = self._load()

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable storage file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed storage file {self._path}")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w") as f:
            json.dump(self._data, f, indent=2)

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
            self._save()

    def delete(self, key: str) -> None:
        with self._lock:
            if self._data.pop(key, None) is not None:
                self._save()


__all__ = ["JSONFileStore", "KeyValueStore", "MemoryStore"]
