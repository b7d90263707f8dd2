"""Lazily filled caches over bundle iterators and streams."""

from __future__ import annotations

import asyncio
from typing import AsyncIterable, AsyncIterator, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Cache(Generic[T]):
    """Caches items of an iterator so that it can be iterated many times.

    The underlying iterator is advanced only when an iteration runs past
    the items already cached.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source = iterable
        self._iter = iter(iterable)
        self._items: list[T] = []
        self._done = False

    def __len__(self) -> int:
        return len(self._items)

    def get(self, index: int) -> Optional[T]:
        """Return a cached item, or None if it has not been fetched."""
        return self._items[index] if 0 <= index < len(self._items) else None

    def prefetch(self) -> None:
        """Ask the underlying iterator to prefetch, if it supports that."""
        prefetch = getattr(self._source, "prefetch_sync", None)
        if prefetch is not None:
            prefetch()

    def _fetch(self) -> bool:
        if self._done:
            return False
        try:
            item = next(self._iter)
        except StopIteration:
            self._done = True
            return False
        self._items.append(item)
        return True

    def __iter__(self) -> Iterator[T]:
        position = 0
        while position < len(self._items) or self._fetch():
            yield self._items[position]
            position += 1


class AsyncCache(Generic[T]):
    """Caches items of an async iterator so that it can be streamed many times.

    Concurrent consumers share one fetch of each item.
    """

    def __init__(self, stream: AsyncIterable[T]) -> None:
        self._source = stream
        self._stream = stream.__aiter__()
        self._items: list[T] = []
        self._done = False
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, index: int) -> Optional[T]:
        """Return a cached item, or None if it has not been fetched."""
        return self._items[index] if 0 <= index < len(self._items) else None

    async def prefetch(self) -> None:
        """Ask the underlying stream to prefetch, if it supports that."""
        prefetch = getattr(self._source, "prefetch_async", None)
        if prefetch is not None:
            await prefetch()

    async def _fetch(self, position: int) -> bool:
        async with self._lock:
            if position < len(self._items):
                return True
            if self._done:
                return False
            try:
                item = await self._stream.__anext__()
            except StopAsyncIteration:
                self._done = True
                return False
            self._items.append(item)
            return True

    async def _iterate(self) -> AsyncIterator[T]:
        position = 0
        while position < len(self._items) or await self._fetch(position):
            yield self._items[position]
            position += 1

    def stream(self) -> AsyncIterator[T]:
        """Return a new async iterator over the cached stream."""
        return self._iterate()