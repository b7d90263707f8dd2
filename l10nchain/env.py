"""Providers of the locales a localization falls back through."""

from __future__ import annotations

import abc
from typing import Iterable, Iterator


class LocalesProvider(abc.ABC):
    """Supplies locales, already negotiated and ordered by preference."""

    @abc.abstractmethod
    def locales(self) -> Iterator[str]:
        """Return an iterator over the current locales."""


class StaticLocales(LocalesProvider):
    """A provider holding a list of locales that can be replaced."""

    def __init__(self, locales: Iterable[str] = ()) -> None:
        self._locales = list(locales)

    def locales(self) -> Iterator[str]:
        """Return an iterator over a snapshot of the locales."""
        return iter(list(self._locales))

    def set_locales(self, locales: Iterable[str]) -> None:
        """Replace the locales; takes effect on the next ``locales()`` call."""
        self._locales = list(locales)