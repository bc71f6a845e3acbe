"""Language catalog.

Static table of provider language codes and their display names. The table is
loaded once and handed to whoever needs it; nothing here is module-global.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Pattern, Tuple

from TerminalTranslator.core.errors import ValidationError
from TerminalTranslator.core.models import LanguageEntry

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGES_PATH = Path(__file__).resolve().parents[2] / 'data' / 'languages.json'


class LanguageCatalog:
    def __init__(self, entries: Iterable[LanguageEntry]):
        self._entries: List[LanguageEntry] = list(entries)
        self._by_code: Dict[str, LanguageEntry] = {}
        self._by_lower: Dict[str, str] = {}
        for entry in self._entries:
            if entry.code in self._by_code:
                logger.warning('Duplicate language code %r in catalog, keeping first entry', entry.code)
                continue
            self._by_code[entry.code] = entry
            self._by_lower.setdefault(entry.code.lower(), entry.code)

    @classmethod
    def from_json(cls, path: str | Path) -> 'LanguageCatalog':
        """Load a catalog from a JSON array of `{"code": ..., "name": ...}` objects."""
        path = Path(path)
        with path.open('r', encoding='utf8') as fh:
            raw = json.load(fh)
        if not isinstance(raw, list):
            raise ValueError(f'{path}: expected a JSON array of languages')
        entries = [LanguageEntry(code=str(item['code']), name=str(item['name'])) for item in raw]
        logger.debug('Loaded %d languages from %s', len(entries), path)
        return cls(entries)

    @classmethod
    def load_default(cls) -> 'LanguageCatalog':
        return cls.from_json(DEFAULT_LANGUAGES_PATH)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def lookup(self, code: Optional[str]) -> Optional[LanguageEntry]:
        """Exact, case-sensitive lookup. Unknown codes return None."""
        if code is None:
            return None
        return self._by_code.get(code)

    def valid_codes_pattern(self) -> Pattern[str]:
        """Anchored, case-insensitive pattern matching exactly the known codes.

        Built from the live table on every call.
        """
        alternatives = '|'.join(re.escape(entry.code) for entry in self._entries)
        return re.compile('^(' + alternatives + ')$', re.IGNORECASE)

    def normalize(self, code: str) -> str:
        """Validate a user supplied code and return the catalog's spelling of it."""
        candidate = (code or '').strip()
        if not self.valid_codes_pattern().match(candidate):
            raise ValidationError(f"Unknown language code '{code}'")
        if candidate in self._by_code:
            return candidate
        return self._by_lower[candidate.lower()]

    def listing(self) -> List[Tuple[str, str]]:
        """(code, name) pairs in load order."""
        return [(entry.code, entry.name) for entry in self._entries]
