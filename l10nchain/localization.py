"""A long-lived, reactive, multi-lingual localization context.

A Localization holds a set of resource identifiers, a provider of locales
ordered by preference and a generator of bundles. It lazily builds a
Bundles object that formats messages, falling back from one locale to the
next when a message is missing. Changes to resources, mode or locales
take effect after ``on_change``.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .bundles import Bundles
from .env import LocalesProvider, StaticLocales
from .generator import BundleGenerator
from .types import ResourceId

ResourceIdLike = Union[ResourceId, str]


def _as_resource_id(value: ResourceIdLike) -> ResourceId:
    return value if isinstance(value, ResourceId) else ResourceId(str(value))


class Localization:
    """Formats messages from a chain of locale bundles, rebuilt on change."""

    def __init__(
        self,
        res_ids: Iterable[ResourceIdLike],
        sync: bool,
        provider: Union[LocalesProvider, Iterable[str]],
        generator: BundleGenerator,
    ) -> None:
        self._res_ids = {_as_resource_id(res_id) for res_id in res_ids}
        self._sync = sync
        self._provider = (
            provider if isinstance(provider, LocalesProvider) else StaticLocales(provider)
        )
        self._generator = generator
        self._bundles: Optional[Bundles] = None

    @property
    def res_ids(self) -> frozenset[ResourceId]:
        return frozenset(self._res_ids)

    def is_sync(self) -> bool:
        return self._sync

    def add_resource_id(self, res_id: ResourceIdLike) -> None:
        self._res_ids.add(_as_resource_id(res_id))
        self.on_change()

    def add_resource_ids(self, res_ids: Iterable[ResourceIdLike]) -> None:
        self._res_ids.update(_as_resource_id(res_id) for res_id in res_ids)
        self.on_change()

    def remove_resource_id(self, res_id: ResourceIdLike) -> int:
        """Remove a resource; return how many resources remain."""
        target = _as_resource_id(res_id)
        self._res_ids = {existing for existing in self._res_ids if existing != target}
        self.on_change()
        return len(self._res_ids)

    def remove_resource_ids(self, res_ids: Iterable[ResourceIdLike]) -> int:
        """Remove several resources; return how many resources remain."""
        targets = [_as_resource_id(res_id) for res_id in res_ids]
        self._res_ids = {existing for existing in self._res_ids if existing not in targets}
        self.on_change()
        return len(self._res_ids)

    def set_async(self) -> None:
        """Switch to asynchronous mode."""
        if self._sync:
            self._sync = False
            self.on_change()

    def on_change(self) -> None:
        """Drop the current bundles so the next request rebuilds them."""
        self._bundles = None

    def prefetch_sync(self) -> None:
        self.bundles().prefetch_sync()

    async def prefetch_async(self) -> None:
        await self.bundles().prefetch_async()

    def bundles(self) -> Bundles:
        """Return the current bundle set, building it if needed."""
        if self._bundles is None:
            self._bundles = Bundles(
                self._sync, set(self._res_ids), self._generator, self._provider
            )
        return self._bundles