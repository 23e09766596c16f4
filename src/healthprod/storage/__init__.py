"""Storage module for HealthProd.

Provides simple key-value persistence.
"""

from .kv import JSONFileStore, KeyValueStore, MemoryStore

__all__ = ["JSONFileStore", "KeyValueStore", "MemoryStore"]
