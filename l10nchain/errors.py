"""Errors reported while localizing messages."""

from __future__ import annotations

from typing import Any, Iterable, Optional


class LocalizationError(Exception):
    """Base class of all localization errors."""

    def _fields(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class BundleError(LocalizationError):
    """An error produced by a bundle, such as a parse error in a resource."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f"[fluent][bundle] error: {error}")

    def _fields(self) -> tuple:
        return (self.error,)


class ResolverError(LocalizationError):
    """Errors raised while resolving a message in a given locale."""

    def __init__(self, id: str, locale: str, errors: Iterable[Any]) -> None:
        self.id = id
        self.locale = locale
        self.errors = list(errors)
        joined = ", ".join(str(err) for err in self.errors)
        super().__init__(f"[fluent][resolver] errors in {locale}/{id}: {joined}")

    def _fields(self) -> tuple:
        return (self.id, self.locale, tuple(self.errors))


class MissingMessageError(LocalizationError):
    """A message is missing in one locale, or in all of them when locale is None."""

    def __init__(self, id: str, locale: Optional[str] = None) -> None:
        self.id = id
        self.locale = locale
        if locale is None:
            message = f"[fluent] Couldn't find a message: {id}"
        else:
            message = f"[fluent] Missing message in locale {locale}: {id}"
        super().__init__(message)

    def _fields(self) -> tuple:
        return (self.id, self.locale)


class MissingValueError(LocalizationError):
    """A message has no value in one locale, or in any when locale is None."""

    def __init__(self, id: str, locale: Optional[str] = None) -> None:
        self.id = id
        self.locale = locale
        if locale is None:
            message = f"[fluent] Couldn't find a message with value: {id}"
        else:
            message = f"[fluent] Message has no value in locale {locale}: {id}"
        super().__init__(message)

    def _fields(self) -> tuple:
        return (self.id, self.locale)


class SyncRequestInAsyncModeError(LocalizationError):
    """A synchronous format call was made on an asynchronous bundle set."""

    def __init__(self) -> None:
        super().__init__("Triggered synchronous format while in async mode")