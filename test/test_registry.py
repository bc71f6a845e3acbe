import pytest

from TerminalTranslator.core.registry import Registry, TRANSLATION_REGISTRY
from TerminalTranslator.services.translate import GoogleTranslateClient


def test_register_and_create_forwards_kwargs():
    reg = Registry()
    reg.register('echo', lambda **kw: kw)
    assert reg.create('echo', a=1) == {'a': 1}


def test_names_are_case_insensitive():
    reg = Registry()
    reg.register('Echo', lambda: 'built')
    assert reg.create(' ECHO ') == 'built'


def test_duplicate_registration_fails():
    reg = Registry("widget")
    reg.register('x', dict)
    with pytest.raises(ValueError, match="widget named 'x'"):
        reg.register('X', dict)


def test_unknown_name_lists_available_providers():
    reg = Registry("translation provider")
    reg.register('google', dict)
    reg.register('deepl', dict)
    with pytest.raises(KeyError) as info:
        reg.create('missing')
    assert "available: deepl, google" in str(info.value)


def test_unknown_name_with_empty_registry():
    with pytest.raises(KeyError) as info:
        Registry().create('missing')
    assert 'available: none' in str(info.value)


def test_google_provider_is_registered(catalog):
    client = TRANSLATION_REGISTRY.create('google', catalog=catalog, session=object())
    assert isinstance(client, GoogleTranslateClient)
    assert client.catalog is catalog
