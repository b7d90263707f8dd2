"""Formatting of messages with fallback through a sequence of locale bundles."""

from __future__ import annotations

from contextlib import aclosing
from typing import Any, Iterable, Mapping, Optional, Set, Union

from .cache import AsyncCache, Cache
from .env import LocalesProvider
from .errors import (
    BundleError,
    LocalizationError,
    MissingMessageError,
    MissingValueError,
    ResolverError,
    SyncRequestInAsyncModeError,
)
from .generator import Bundle, BundleGenerator, BundleResult
from .types import L10nAttribute, L10nKey, L10nMessage, ResourceId

KeyLike = Union[L10nKey, str]


class _Sentinel:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


# A message was found but had no value; no message was found at all.
_MISSING = _Sentinel("MISSING")
_ABSENT = _Sentinel("ABSENT")


def _as_key(key: KeyLike) -> L10nKey:
    return key if isinstance(key, L10nKey) else L10nKey(str(key))


def _format_message(
    bundle: Bundle, key: L10nKey
) -> tuple[Optional[L10nMessage], list[Any]]:
    message = bundle.get_message(key.id)
    if message is None:
        return None, []
    errors: list[Any] = []
    value = None
    if message.value is not None:
        value, value_errors = bundle.format_pattern(message.value, key.args)
        errors.extend(value_errors)
    attributes = []
    for attribute in message.attributes:
        text, attribute_errors = bundle.format_pattern(attribute.value, key.args)
        errors.extend(attribute_errors)
        attributes.append(L10nAttribute(attribute.id, text))
    return L10nMessage(value, attributes), errors


class _Lookup:
    """Consumes bundles one at a time until the request is satisfied."""

    def __init__(self) -> None:
        self.errors: list[LocalizationError] = []

    def _open(self, result: BundleResult) -> tuple[Bundle, str]:
        self.errors.extend(BundleError(error) for error in result.errors)
        return result.bundle, result.bundle.locales[0]

    def feed(self, result: BundleResult) -> bool:
        """Process one bundle; return True when no further bundle is needed."""
        raise NotImplementedError

    def finish(self) -> Any:
        raise NotImplementedError


class _ValueLookup(_Lookup):
    def __init__(self, id: str, args: Optional[Mapping[str, Any]]) -> None:
        super().__init__()
        self.id = id
        self.args = args
        self.found = False
        self.done = False
        self.value: Optional[str] = None

    def feed(self, result: BundleResult) -> bool:
        bundle, locale = self._open(result)
        message = bundle.get_message(self.id)
        if message is None:
            self.errors.append(MissingMessageError(self.id, locale))
            return False
        self.found = True
        if message.value is None:
            self.errors.append(MissingValueError(self.id, locale))
            return False
        text, format_errors = bundle.format_pattern(message.value, self.args)
        if format_errors:
            self.errors.append(ResolverError(self.id, locale, format_errors))
        self.value = text
        self.done = True
        return True

    def finish(self) -> tuple[Optional[str], list[LocalizationError]]:
        if not self.done:
            error_type = MissingValueError if self.found else MissingMessageError
            self.errors.append(error_type(self.id))
        return self.value, self.errors


class _ValuesLookup(_Lookup):
    def __init__(self, keys: list[L10nKey]) -> None:
        super().__init__()
        self.keys = keys
        self.cells: list[Any] = [_ABSENT] * len(keys)

    def feed(self, result: BundleResult) -> bool:
        bundle, locale = self._open(result)
        has_missing = False
        for index, key in enumerate(self.keys):
            if isinstance(self.cells[index], str):
                continue
            message = bundle.get_message(key.id)
            if message is None:
                has_missing = True
                self.errors.append(MissingMessageError(key.id, locale))
            elif message.value is None:
                self.cells[index] = _MISSING
                has_missing = True
                self.errors.append(MissingValueError(key.id, locale))
            else:
                text, format_errors = bundle.format_pattern(message.value, key.args)
                self.cells[index] = text
                if format_errors:
                    self.errors.append(ResolverError(key.id, locale, format_errors))
        return not has_missing

    def finish(self) -> tuple[list[Optional[str]], list[LocalizationError]]:
        values: list[Optional[str]] = []
        for key, cell in zip(self.keys, self.cells):
            if cell is _MISSING:
                self.errors.append(MissingValueError(key.id))
                values.append(None)
            elif cell is _ABSENT:
                self.errors.append(MissingMessageError(key.id))
                values.append(None)
            else:
                values.append(cell)
        return values, self.errors


class _MessagesLookup(_Lookup):
    def __init__(self, keys: list[L10nKey]) -> None:
        super().__init__()
        self.keys = keys
        self.cells: list[Optional[L10nMessage]] = [None] * len(keys)
        self.complete = False

    def feed(self, result: BundleResult) -> bool:
        bundle, locale = self._open(result)
        has_missing = False
        for index, key in enumerate(self.keys):
            if self.cells[index] is not None:
                continue
            message, format_errors = _format_message(bundle, key)
            if message is None:
                has_missing = True
                self.errors.append(MissingMessageError(key.id, locale))
            elif format_errors:
                self.errors.append(ResolverError(key.id, locale, format_errors))
            self.cells[index] = message
        if not has_missing:
            self.complete = True
        return self.complete

    def finish(self) -> tuple[list[Optional[L10nMessage]], list[LocalizationError]]:
        if not self.complete:
            self.errors.extend(
                MissingMessageError(key.id)
                for key, cell in zip(self.keys, self.cells)
                if cell is None
            )
        return self.cells, self.errors


class Bundles:
    """A lazily generated, cached sequence of bundles to format messages from.

    Formatting methods return the result together with the list of errors
    met on the way; missing messages produce None rather than raising.
    """

    def __init__(
        self,
        sync: bool,
        res_ids: Set[ResourceId],
        generator: BundleGenerator,
        provider: LocalesProvider,
    ) -> None:
        self._sync = sync
        self._cache: Union[Cache[BundleResult], AsyncCache[BundleResult]]
        if sync:
            self._cache = Cache(generator.bundles_iter(provider.locales(), set(res_ids)))
        else:
            self._cache = AsyncCache(
                generator.bundles_stream(provider.locales(), set(res_ids))
            )

    @property
    def sync(self) -> bool:
        return self._sync

    def prefetch_sync(self) -> None:
        """Prefetch the bundles of a synchronous bundle set."""
        if not isinstance(self._cache, Cache):
            raise RuntimeError("Can't prefetch a sync bundle set asynchronously")
        self._cache.prefetch()

    async def prefetch_async(self) -> None:
        """Prefetch the bundles of an asynchronous bundle set."""
        if not isinstance(self._cache, AsyncCache):
            raise RuntimeError("Can't prefetch a async bundle set synchronously")
        await self._cache.prefetch()

    def _run_sync(self, lookup: _Lookup) -> Any:
        if not isinstance(self._cache, Cache):
            raise SyncRequestInAsyncModeError()
        for result in self._cache:
            if lookup.feed(result):
                break
        return lookup.finish()

    async def _run(self, lookup: _Lookup) -> Any:
        if isinstance(self._cache, Cache):
            return self._run_sync(lookup)
        async with aclosing(self._cache.stream()) as stream:
            async for result in stream:
                if lookup.feed(result):
                    break
        return lookup.finish()

    async def format_value(
        self, id: str, args: Optional[Mapping[str, Any]] = None
    ) -> tuple[Optional[str], list[LocalizationError]]:
        """Format the value of the first bundle that has one."""
        return await self._run(_ValueLookup(id, args))

    async def format_values(
        self, keys: Iterable[KeyLike]
    ) -> tuple[list[Optional[str]], list[LocalizationError]]:
        """Format the values of several messages, each with its own fallback."""
        return await self._run(_ValuesLookup([_as_key(key) for key in keys]))

    async def format_messages(
        self, keys: Iterable[KeyLike]
    ) -> tuple[list[Optional[L10nMessage]], list[LocalizationError]]:
        """Format several messages with their attributes."""
        return await self._run(_MessagesLookup([_as_key(key) for key in keys]))

    def format_value_sync(
        self, id: str, args: Optional[Mapping[str, Any]] = None
    ) -> tuple[Optional[str], list[LocalizationError]]:
        """Synchronous form of ``format_value``; fails in async mode."""
        return self._run_sync(_ValueLookup(id, args))

    def format_values_sync(
        self, keys: Iterable[KeyLike]
    ) -> tuple[list[Optional[str]], list[LocalizationError]]:
        """Synchronous form of ``format_values``; fails in async mode."""
        return self._run_sync(_ValuesLookup([_as_key(key) for key in keys]))

    def format_messages_sync(
        self, keys: Iterable[KeyLike]
    ) -> tuple[list[Optional[L10nMessage]], list[LocalizationError]]:
        """Synchronous form of ``format_messages``; fails in async mode."""
        return self._run_sync(_MessagesLookup([_as_key(key) for key in keys]))