"""Per-chunk cache of query results."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Any

from fzfcore.constants import QUERY_CACHE_MAX


class ChunkCache:
    """Associates a chunk and a query string with the list of its results.

    Only full chunks are cached, and only for queries that matched few items.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cache: dict[Any, dict[str, Sequence[Any]]] = {}

    def clear(self) -> None:
        """Drop everything cached."""
        with self._lock:
            self._cache = {}

    def retire(self, *args: Any) -> None:
        """Drop the cached results of the given chunks."""
        with self._lock:
            for chunk in args:
                self._cache.pop(chunk, None)

    def add(self, chunk: Any, key: str, results: Sequence[Any]) -> None:
        """Cache *results* for *key* on *chunk*, if it is worth caching."""
        if not key or not chunk.is_full() or len(results) > QUERY_CACHE_MAX:
            return
        with self._lock:
            self._cache.setdefault(chunk, {})[key] = results

    def lookup(self, chunk: Any, key: str) -> Sequence[Any] | None:
        """Return the results cached for exactly *key* on *chunk*, or None."""
        if not key or not chunk.is_full():
            return None
        with self._lock:
            per_chunk = self._cache.get(chunk)
            if per_chunk is None:
                return None
            return per_chunk.get(key)

    def search(self, chunk: Any, key: str) -> Sequence[Any] | None:
        """Return results cached for the longest prefix or suffix of *key*."""
        if not key or not chunk.is_full():
            return None
        with self._lock:
            per_chunk = self._cache.get(chunk)
            if per_chunk is None:
                return None
            for cut in range(1, len(key)):
                for substr in (key[: len(key) - cut], key[cut:]):
                    cached = per_chunk.get(substr)
                    if cached is not None:
                        return cached
        return None