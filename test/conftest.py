import sys
from pathlib import Path

import pytest

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from TerminalTranslator.core.models import LanguageEntry
from TerminalTranslator.services.languages.catalog import LanguageCatalog


class FakeResponse:
    def __init__(self, text='', status_code=200):
        self.text = text
        self.status_code = status_code
        self.encoding = None


class FakeSession:
    """Stands in for requests.Session; records every GET."""
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def catalog():
    return LanguageCatalog([
        LanguageEntry('en', 'English'),
        LanguageEntry('es', 'Spanish'),
        LanguageEntry('fr', 'French'),
        LanguageEntry('zh-CN', 'Chinese (Simplified)'),
    ])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('JA_GTC_SOURCE', 'JA_GTC_TARGET', 'TRANSLATE_SOURCE', 'TRANSLATE_TARGET',
                 'TRANSLATE_TIMEOUT', 'TRANSLATE_ENDPOINT'):
        monkeypatch.delenv(name, raising=False)
