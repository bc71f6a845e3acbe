import json

import pytest

from TerminalTranslator.core.errors import ValidationError
from TerminalTranslator.core.models import LanguageEntry
from TerminalTranslator.services.languages.catalog import LanguageCatalog


def test_lookup_known_and_unknown(catalog):
    for code, _ in catalog.listing():
        assert catalog.lookup(code).code == code
    assert catalog.lookup('zz') is None
    assert catalog.lookup(None) is None
    # lookup itself is case-sensitive
    assert catalog.lookup('EN') is None


def test_pattern_matches_every_code_and_rejects_others(catalog):
    pattern = catalog.valid_codes_pattern()
    for code, _ in catalog.listing():
        assert pattern.match(code)
    assert pattern.match('ZH-cn')
    assert not pattern.match('zz')
    assert not pattern.match('eng')
    assert not pattern.match('zh')


def test_pattern_follows_the_live_table():
    cat = LanguageCatalog([LanguageEntry('en', 'English'), LanguageEntry('x.y', 'Dotted')])
    pattern = cat.valid_codes_pattern()
    assert pattern.match('x.y')
    assert not pattern.match('xzy')


def test_normalize_returns_stored_spelling(catalog):
    assert catalog.normalize('EN') == 'en'
    assert catalog.normalize(' zh-cn ') == 'zh-CN'
    with pytest.raises(ValidationError):
        catalog.normalize('klingon')
    with pytest.raises(ValidationError):
        catalog.normalize('')


def test_listing_keeps_load_order(catalog):
    assert catalog.listing() == [
        ('en', 'English'),
        ('es', 'Spanish'),
        ('fr', 'French'),
        ('zh-CN', 'Chinese (Simplified)'),
    ]
    assert len(catalog) == 4
    assert 'fr' in catalog


def test_duplicate_code_keeps_first_entry():
    cat = LanguageCatalog([LanguageEntry('en', 'English'), LanguageEntry('en', 'Other')])
    assert cat.lookup('en').name == 'English'


def test_from_json(tmp_path):
    path = tmp_path / 'langs.json'
    path.write_text(json.dumps([{'code': 'de', 'name': 'German'}, {'code': 'it', 'name': 'Italian'}]), encoding='utf8')
    cat = LanguageCatalog.from_json(path)
    assert cat.listing() == [('de', 'German'), ('it', 'Italian')]


def test_from_json_rejects_non_array(tmp_path):
    path = tmp_path / 'langs.json'
    path.write_text('{"code": "de"}', encoding='utf8')
    with pytest.raises(ValueError):
        LanguageCatalog.from_json(path)


def test_default_catalog_ships_with_package():
    cat = LanguageCatalog.load_default()
    assert cat.lookup('en') == LanguageEntry('en', 'English')
    assert cat.lookup('es').name == 'Spanish'
    assert 'auto' not in cat
    codes = [code for code, _ in cat.listing()]
    assert len(codes) == len(set(codes))
