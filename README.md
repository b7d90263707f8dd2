# l10nchain

`l10nchain` formats localized messages across an ordered list of locales. If a
message is missing from the first locale, or has no value there, the package
looks it up in the next locale, and so on down the list. Each miss and each
formatting problem is recorded as a `LocalizationError`. You get back the best
translation available together with the list of those errors.

The package also contains a small pseudolocalization helper. Use it to test how
a user interface copes with accented, longer or flipped text.

## Installation

```
pip install l10nchain
```

## What the package does not do

`l10nchain` does not parse resource files. It provides no message syntax,
plural rules, number formatting or file-based resource loading. Your code
provides the bundles. `l10nchain.generator.Bundle` describes what a bundle
must offer, and a `BundleGenerator` that you write builds the bundles.
`l10nchain` handles the fallback, caching and error reporting on top of them.

## Concepts

- **`l10nchain.types`**
  - `ResourceId(value, resource_type=ResourceType.REQUIRED)` names a
    resource, for example `"main.ftl"`.
  - Equality and hashing of a `ResourceId` use only `value`. A `ResourceId`
    also compares equal to a plain string with the same value.
  - `is_required()` and `is_optional()` report the resource type.
  - `to_resource_id(value, resource_type)` builds a `ResourceId` with a type
    that you choose.
  - `L10nKey(id, args=None)` is a message id together with its formatting
    arguments.
  - `L10nMessage(value, attributes)` and `L10nAttribute(name, value)` hold
    formatted results.
- **`l10nchain.env`**
  - A `LocalesProvider` supplies locales through `locales()`. The locales
    must already be negotiated and ordered by preference.
  - `StaticLocales` holds a list of locales. `set_locales` replaces that list.
- **`l10nchain.generator`**
  - A `Bundle` has a `locales` sequence. `locales[0]` is the bundle's own
    locale.
  - `get_message(id)` returns an object with a `value` pattern (or `None`)
    and `attributes`. Each attribute has an `id` and a `value` pattern. If
    there is no message with that id, `get_message` returns `None`.
  - `format_pattern(pattern, args)` returns a tuple `(text, errors)`.
  - `BundleResult(bundle, errors=[])` pairs a bundle with the errors met while
    building it. `is_ok()` is true when that list of errors is empty.
  - `BundleGenerator` produces one `BundleResult` per locale.
    `bundles_iter(locales, res_ids)` produces them synchronously.
    `bundles_stream(locales, res_ids)` produces them as an async iterator.
    There are two ways to write a generator:
    - Override `_build_bundle(locale, res_ids)`. Both modes then use it, and
      the stream simply walks the synchronous iterator.
    - Override `bundles_iter` and `bundles_stream` directly.
- **`l10nchain.cache`**
  - `Cache` and `AsyncCache` wrap an iterator or async iterator. Each item is
    fetched only when an iteration first needs it, and then cached.
  - When several async consumers run at once, each item is still fetched only
    once.
- **`l10nchain.localization`**
  - `Localization(res_ids, sync, provider, generator)` combines all of these
    parts. `provider` can be a `LocalesProvider` or a plain iterable of
    locale strings.
  - `bundles()` returns a `Bundles` object from `l10nchain.bundles`. It builds
    this object lazily and keeps it until the state changes.

## Example

```python
from dataclasses import dataclass, field

from l10nchain.generator import BundleGenerator, BundleResult
from l10nchain.localization import Localization
from l10nchain.types import L10nKey


@dataclass
class Message:
    value: str | None
    attributes: list = field(default_factory=list)


class DictBundle:
    def __init__(self, locale, messages):
        self.locales = [locale]
        self._messages = messages

    def get_message(self, id):
        return self._messages.get(id)

    def format_pattern(self, pattern, args):
        try:
            return pattern.format(**(args or {})), []
        except KeyError as err:
            return pattern, [err]


class DictGenerator(BundleGenerator):
    def __init__(self, catalog):
        self.catalog = catalog

    def _build_bundle(self, locale, res_ids):
        return BundleResult(DictBundle(locale, self.catalog[locale]))


catalog = {
    "pl": {"greeting": Message("Cześć, {name}!")},
    "en-US": {"greeting": Message("Hi, {name}!"), "farewell": Message("Bye")},
}

loc = Localization(["main.ftl"], True, ["pl", "en-US"], DictGenerator(catalog))
bundles = loc.bundles()

value, errors = bundles.format_value_sync("farewell")
# value == "Bye"
# errors == [MissingMessageError("farewell", "pl")]

values, errors = bundles.format_values_sync(
    [L10nKey("greeting", {"name": "Ann"}), "farewell"]
)
messages, errors = bundles.format_messages_sync([L10nKey("greeting", {"name": "Ann"})])
```

## Formatting methods

Every formatting method on `Bundles` returns a tuple `(result, errors)`. A
message that no locale can supply comes back as `None`; it does not raise. The
keys you pass to `format_values*` and `format_messages*` can be `L10nKey`
objects or plain id strings.

- **`format_value_sync(id, args=None)`** / **`await format_value(id, args=None)`**
  - Returns the value from the first bundle whose message has a value.
  - Each locale that lacks the message adds a `MissingMessageError` for that
    locale.
  - Each locale where the message has no value adds a `MissingValueError` for
    that locale.
  - If nothing is found, a final error without a locale is added.
- **`format_values_sync(keys)`** / **`await format_values(keys)`**
  - Resolves each key with its own fallback.
  - Stops at the first bundle after which no key is still missing.
- **`format_messages_sync(keys)`** / **`await format_messages(keys)`**
  - Returns `L10nMessage` objects with their formatted attributes.
  - A message without a value comes back with `value=None`.
- Formatting errors inside a bundle are reported as a `ResolverError` for that
  id and locale.
- Errors that a bundle was built with are added as `BundleError`s.

## Asynchronous mode

Build the `Localization` with `sync=False`, then await `format_value`,
`format_values` and `format_messages`. The awaitable methods also work in
synchronous mode. The `*_sync` methods raise `SyncRequestInAsyncModeError` in
asynchronous mode.

Prefetching:

- `Localization.prefetch_sync()` calls `prefetch_sync()` on the iterator that
  the generator returned, if the iterator has that method.
- `await Localization.prefetch_async()` calls `prefetch_async()` on the stream
  in the same way.
- Calling the prefetch method that does not match the current mode raises
  `RuntimeError`.

## Reacting to change

If the provider's locales change, call `on_change()`. The next call to
`bundles()` then builds a fresh `Bundles` object. The following methods do
this for you:

- `add_resource_id` and `add_resource_ids`.
- `remove_resource_id` and `remove_resource_ids`. Both return the number of
  resources that remain.
- `set_async`.

A `Bundles` object that you obtained earlier keeps working from the state it
was built with.

## Errors

All errors are in `l10nchain.errors` and derive from `LocalizationError`. Two
errors compare equal when they have the same type and the same fields.

- `BundleError(error)`: an error that was reported while a bundle was built.
- `ResolverError(id, locale, errors)`: an error raised while a pattern was
  formatted.
- `MissingMessageError(id, locale=None)`: there is no message with that id,
  either in the given locale or, when `locale` is `None`, in any locale.
- `MissingValueError(id, locale=None)`: the message has no value, either in the
  given locale or, when `locale` is `None`, in any locale.
- `SyncRequestInAsyncModeError()`

## Pseudolocalization

```python
from l10nchain.pseudo import transform, transform_dom

transform("Hello World", False, True)    # 'Ħeeŀŀoo Ẇoořŀḓ'
transform("Hello World", False, False)   # 'Ħeŀŀo Ẇořŀḓ'
transform("Hello World", True, False)    # 'Hǝʅʅo Moɹʅp'

transform_dom("Hello <a>World</a>", False, True, False)
# 'Ħeeŀŀoo <a>Ẇoořŀḓ</a>'
transform_dom("Hello World within markers", False, False, True)
# '[Ħeŀŀo Ẇořŀḓ ẇiŧħiƞ ḿařķeřş]'
```

`transform` replaces ASCII letters with look-alike characters.

- The `flipped` argument selects upside-down letters instead of accented
  ones.
- The `elongate` argument doubles the lowercase letters a, e, o and u.

`transform_dom` leaves markup tags and character entities as they are, and
adds brackets around the result when `with_markers` is true.

- Text before the last tag or entity is always accented and elongated.
- The `flipped` and `elongate` options apply only to the text after the last
  tag or entity.
- A one-character ASCII string, such as an access key, is returned unchanged.