import pytest

from l10nchain.env import LocalesProvider, StaticLocales


def test_static_locales_order():
    provider = StaticLocales(["pl", "en-US"])
    assert list(provider.locales()) == ["pl", "en-US"]


def test_each_call_gives_fresh_iterator():
    provider = StaticLocales(["pl", "en-US"])
    first = provider.locales()
    assert list(first) == ["pl", "en-US"]
    assert list(first) == []
    assert list(provider.locales()) == ["pl", "en-US"]


def test_set_locales_replaces():
    provider = StaticLocales(["en-GB"])
    provider.set_locales(["de", "en-GB"])
    assert list(provider.locales()) == ["de", "en-GB"]


def test_snapshot_unaffected_by_later_change():
    provider = StaticLocales(["en-US"])
    snapshot = provider.locales()
    provider.set_locales(["pl"])
    assert list(snapshot) == ["en-US"]


def test_source_list_is_copied():
    source = ["en-US"]
    provider = StaticLocales(source)
    source.append("pl")
    assert list(provider.locales()) == ["en-US"]


def test_provider_is_abstract():
    with pytest.raises(TypeError):
        LocalesProvider()

    class Incomplete(LocalesProvider):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_static_locales_serves_as_provider():
    provider = StaticLocales(["b", "a"])
    assert isinstance(provider, LocalesProvider)
    assert list(provider.locales()) == ["b", "a"]