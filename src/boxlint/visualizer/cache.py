"""LRU cache for rendered diagram bodies."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, Generic, TypeVar

from boxlint.model.visual import VisualizerIssue

V = TypeVar("V")


def cache_key(issue: VisualizerIssue) -> str:
    """Key a rendering by ``type:severity:value``."""
    return f"{issue.type}:{issue.severity.value}:{issue.value}"


class TemplateCache(Generic[V]):
    """Least-recently-used cache with a fixed capacity.

    Reads refresh recency; inserting into a full cache evicts the entry that
    was accessed longest ago. Safe to share between threads.
    """

    def __init__(self, max_size: int = 100) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: OrderedDict[str, V] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> V | None:
        with self._lock:
            if key not in self._entries:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return self._entries[key]

    def put(self, key: str, value: V) -> None:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def get_or_create(self, key: str, factory: Callable[[], V]) -> V:
        """Return the cached value for *key*, creating and storing it on a miss."""
        cached = self.get(key)
        if cached is not None:
            return cached
        value = factory()
        self.put(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
