import pytest

from l10nchain.generator import Bundle, BundleGenerator, BundleResult
from l10nchain.types import ResourceId


class FakeBundle:
    def __init__(self, locale, messages):
        self.locales = [locale]
        self._messages = messages

    def get_message(self, id):
        return self._messages.get(id)

    def format_pattern(self, pattern, args):
        return pattern.format(**(args or {})), []


class FakeGenerator(BundleGenerator):
    def bundles_iter(self, locales, res_ids):
        for locale in locales:
            yield BundleResult(FakeBundle(locale, {r.value: locale for r in res_ids}))


class AsyncGenerator(BundleGenerator):
    async def _produce(self, locales):
        for locale in locales:
            yield BundleResult(FakeBundle(locale, {}), ["broken"])

    def bundles_stream(self, locales, res_ids):
        return self._produce(locales)


def test_bundle_result_ok():
    result = BundleResult(FakeBundle("pl", {}))
    assert result.is_ok()
    assert result.errors == []
    assert isinstance(result.bundle, Bundle)
    assert not isinstance(object(), Bundle)


def test_bundle_result_with_errors():
    result = BundleResult(FakeBundle("pl", {}), ["parse error"])
    assert not result.is_ok()
    assert result.bundle.locales == ["pl"]


def test_sync_generator_yields_per_locale():
    results = list(FakeGenerator().bundles_iter(iter(["pl", "en-US"]), {ResourceId("a")}))
    assert [r.bundle.locales[0] for r in results] == ["pl", "en-US"]
    assert results[1].bundle.get_message("a") == "en-US"
    assert [r.is_ok() for r in results] == [True, True]


@pytest.mark.asyncio
async def test_async_generator_yields_results():
    stream = AsyncGenerator().bundles_stream(iter(["pl", "en-US"]), set())
    results = [r async for r in stream]
    assert [r.bundle.locales[0] for r in results] == ["pl", "en-US"]
    assert [r.is_ok() for r in results] == [False, False]
    assert [r.errors for r in results] == [["broken"], ["broken"]]
    assert BundleResult(results[0].bundle).is_ok()