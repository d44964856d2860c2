#!/usr/bin/env python3

"""Per-declaring-type cache of decoded function records."""

import threading
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from ....infrastructure.logging import get_logger
from ...models.metadata import ParsedFunction

logger = get_logger(__name__)

FunctionList = tuple[ParsedFunction, ...]


class _KeyLock:
    """Per-key compute lock and the number of callers holding or awaiting it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class MetadataCache:
    """Thread-safe map from declaring type key to its decoded functions.

    Concurrency policy: computations for one key are serialized behind a
    per-key lock, so a type's metadata is decoded by a single thread while
    concurrent callers for the same key block until the value is published.
    Different keys decode in parallel. Entries are immutable tuples and are
    published whole; a computation that raises publishes nothing, so the next
    caller retries it.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, FunctionList] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[Hashable, _KeyLock] = {}
        self.hits = 0
        self.misses = 0
        self.computations = 0

    def get(self, key: Hashable) -> FunctionList | None:
        """Get the cached functions for a key.

        Args:
            key: Declaring type key

        Returns:
            Cached functions or None if the key was never published
        """
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def put(self, key: Hashable, functions: Iterable[ParsedFunction]) -> FunctionList:
        """Publish functions for a key unless a value already exists.

        Args:
            key: Declaring type key
            functions: Decoded functions

        Returns:
            The value stored for the key, which is the earlier one if another
            writer got there first
        """
        value = tuple(functions)
        with self._lock:
            return self._entries.setdefault(key, value)

    def get_or_compute(
        self, key: Hashable, compute: Callable[[], Iterable[ParsedFunction]]
    ) -> FunctionList:
        """Return the cached functions for a key, computing them at most once.

        Args:
            key: Declaring type key
            compute: Decodes the functions; only called on a miss

        Returns:
            The published functions for the key

        Raises:
            Exception: Whatever ``compute`` raises; nothing is cached then
        """
        with self._lock:
            value = self._entries.get(key)
            if value is not None:
                self.hits += 1
                return value
            self.misses += 1
            key_lock = self._key_locks.get(key)
            if key_lock is None:
                key_lock = self._key_locks[key] = _KeyLock()
            key_lock.users += 1

        try:
            with key_lock.lock:
                with self._lock:
                    value = self._entries.get(key)
                if value is not None:
                    return value

                logger.debug(f"Cache miss for {key!r}, decoding metadata")
                functions = tuple(compute())

                with self._lock:
                    self.computations += 1
                    value = self._entries.setdefault(key, functions)
                logger.debug(f"Cached {len(value)} functions for {key!r}")
                return value
        finally:
            with self._lock:
                key_lock.users -= 1
                # The last user drops the lock, whether or not compute succeeded
                if key_lock.users == 0 and self._key_locks.get(key) is key_lock:
                    del self._key_locks[key]

    def clear(self) -> None:
        """Clear all cached entries and statistics.

        Computations already in flight still publish their result.
        """
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
            self.computations = 0

    def stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache performance metrics
        """
        with self._lock:
            total_requests = self.hits + self.misses
            hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0.0
            return {
                "size": len(self._entries),
                "hits": self.hits,
                "misses": self.misses,
                "computations": self.computations,
                "hit_rate": f"{hit_rate:.1f}%",
            }

    def __len__(self) -> int:
        """Return number of cached declaring types."""
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        """Check if key exists in cache without touching statistics."""
        with self._lock:
            return key in self._entries
