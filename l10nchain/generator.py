"""Interfaces for producing per-locale bundles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    AsyncIterator,
    Iterator,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Set,
    runtime_checkable,
)

from .types import ResourceId


@runtime_checkable
class Bundle(Protocol):
    """A collection of messages for one locale.

    ``locales[0]`` names the locale the bundle's messages are in.
    """

    locales: Sequence[str]

    def get_message(self, id: str) -> Optional[Any]:
        """Return the message, with ``value`` and ``attributes``, or None.

        Each attribute has an ``id`` and a ``value`` pattern; a message
        ``value`` of None means the message has no value.
        """

    def format_pattern(
        self, pattern: Any, args: Optional[Mapping[str, Any]]
    ) -> tuple[str, list[Any]]:
        """Format a pattern, returning the text and any resolver errors."""


@dataclass
class BundleResult:
    """A generated bundle and the errors met while building it."""

    bundle: Bundle
    errors: list[Any] = field(default_factory=list)

    def is_ok(self) -> bool:
        return not self.errors


class BundleGenerator:
    """Produces bundles for a sequence of locales.

    A subclass either overrides ``_build_bundle`` to build one locale's
    bundle, which both modes then use, or overrides ``bundles_iter`` and
    ``bundles_stream`` directly. By default the asynchronous mode walks the
    synchronous one. An object returned by ``bundles_iter`` may offer a
    ``prefetch_sync()`` method, and one returned by ``bundles_stream`` an
    async ``prefetch_async()`` method.
    """

    def _build_bundle(self, locale: str, res_ids: Set[ResourceId]) -> BundleResult:
        raise NotImplementedError(
            f"{type(self).__name__} does not know how to build a bundle"
        )

    def bundles_iter(
        self, locales: Iterator[str], res_ids: Set[ResourceId]
    ) -> Iterator[BundleResult]:
        """Lazily yield one bundle result per locale, in order."""
        res_ids = set(res_ids)
        return (self._build_bundle(locale, res_ids) for locale in locales)

    def bundles_stream(
        self, locales: Iterator[str], res_ids: Set[ResourceId]
    ) -> AsyncIterator[BundleResult]:
        """Asynchronously yield the bundle results of ``bundles_iter``."""
        results = self.bundles_iter(locales, res_ids)

        async def stream() -> AsyncIterator[BundleResult]:
            for result in results:
                yield result

        return stream()