"""Append-only list of items stored in fixed-size chunks."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Sequence
from typing import Any, NamedTuple

from fzfcore.cache import ChunkCache
from fzfcore.constants import CHUNK_SIZE
from fzfcore.item import Item

ItemBuilder = Callable[[Any], "Item | None"]


class Chunk:
    """A list of at most CHUNK_SIZE items.

    Chunks are hashed by identity so that they can key a cache.
    """

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        self.items: list[Item] = list(items) if items is not None else []
        if len(self.items) > CHUNK_SIZE:
            raise ValueError(f"a chunk holds at most {CHUNK_SIZE} items")

    def __repr__(self) -> str:
        return f"Chunk(count={self.count})"

    @property
    def count(self) -> int:
        """Number of items in the chunk."""
        return len(self.items)

    def is_full(self) -> bool:
        """True if the chunk holds CHUNK_SIZE items."""
        return len(self.items) == CHUNK_SIZE

    def _copy(self) -> Chunk:
        return Chunk(self.items)


def count_items(chunks: Sequence[Chunk]) -> int:
    """Return the total number of items in *chunks*."""
    if not chunks:
        return 0
    if len(chunks) == 1:
        return chunks[0].count
    # The first chunk may not be full after the list was cut to a tail.
    return chunks[0].count + CHUNK_SIZE * (len(chunks) - 2) + chunks[-1].count


class Snapshot(NamedTuple):
    """An immutable view of a chunk list."""

    chunks: list[Chunk]
    count: int
    changed: bool


class ChunkList:
    """A thread-safe list of chunks filled by an item builder.

    The builder turns raw input data into an :class:`Item`, or returns None
    to skip the data.
    """

    def __init__(self, cache: ChunkCache, builder: ItemBuilder) -> None:
        self._chunks: list[Chunk] = []
        self._lock = threading.Lock()
        self._builder = builder
        self._cache = cache

    def push(self, data: Any) -> bool:
        """Build an item from *data* and append it; False if it was skipped."""
        with self._lock:
            if not self._chunks or self._chunks[-1].is_full():
                self._chunks.append(Chunk())
            item = self._builder(data)
            if item is None:
                return False
            self._chunks[-1].items.append(item)
            return True

    def clear(self) -> None:
        """Remove every item."""
        with self._lock:
            self._chunks = []

    def snapshot(self, tail: int) -> Snapshot:
        """Return a snapshot; with *tail* > 0 keep only the last *tail* items.

        ``changed`` is True if items were dropped to honour *tail*.
        """
        with self._lock:
            changed = False
            if tail > 0 and count_items(self._chunks) > tail:
                changed = True
                self._keep_tail(tail)

            chunks = list(self._chunks)
            if chunks:
                if tail > 0 and len(chunks) > 1:
                    chunks[0] = chunks[0]._copy()
                chunks[-1] = chunks[-1]._copy()
            return Snapshot(chunks, count_items(chunks), changed)

    def _keep_tail(self, tail: int) -> None:
        num_chunks = 0
        left = tail
        for chunk in reversed(self._chunks):
            if left <= 0:
                break
            num_chunks += 1
            left -= chunk.count

        min_index = len(self._chunks) - num_chunks
        self._cache.retire(*self._chunks[:min_index])
        kept = self._chunks[min_index:]

        left = tail
        for position in range(len(kept) - 1, -1, -1):
            chunk = kept[position]
            if chunk.count > left:
                kept[position] = Chunk(chunk.items[chunk.count - left:])
                self._cache.retire(chunk)
                break
            left -= chunk.count
        self._chunks = kept