"""Google Translate client.

HTTP client for the public ``translate_a/single`` endpoint. Builds the query,
performs one GET and turns the loosely structured reply into a
`TranslationResult`.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from TerminalTranslator.core.config import TranslationConfig
from TerminalTranslator.core.errors import EmptyInputError, NetworkError, ParseError, ValidationError
from TerminalTranslator.core.models import TranslationResult
from TerminalTranslator.services.languages.catalog import LanguageCatalog
from .response_parser import load_body

logger = logging.getLogger(__name__)

AUTO = 'auto'

# positions in the outer response array
SENTENCES_INDEX = 0
DETECTED_SOURCE_INDEX = 2


class GoogleTranslateClient:
    def __init__(self, catalog: LanguageCatalog, config: Optional[TranslationConfig] = None, session: Any = None):
        self.catalog = catalog
        self.config = config or TranslationConfig()
        self.session = session if session is not None else requests.Session()

    def build_request_url(self, source_lang: str, target_lang: str, text: str) -> str:
        """Return the GET URL for translating `text`.

        `source_lang` may be ``"auto"``; both codes must otherwise be catalog
        codes. Nothing is sent for empty text.
        """
        if not isinstance(text, str) or not text.strip():
            raise EmptyInputError('Cannot translate an empty text')
        if source_lang != AUTO and source_lang not in self.catalog:
            raise ValidationError(f"Unknown source language '{source_lang}'")
        if target_lang not in self.catalog:
            raise ValidationError(f"Unknown target language '{target_lang}'")

        params = {
            'client': self.config.client,
            'ie': 'UTF-8',
            'oe': 'UTF-8',
            'sl': source_lang,
            'tl': target_lang,
            'dt': 't',
            'q': text,
        }
        return requests.Request('GET', self.config.endpoint, params=params).prepare().url

    def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        url = self.build_request_url(source_lang, target_lang, text)
        logger.debug('GET %s', url)
        try:
            resp = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.debug('Translation request failed: %s', e)
            raise NetworkError(f'Request to translation provider failed: {e}') from e

        logger.debug('Provider replied with status %s', resp.status_code)
        if resp.status_code != 200:
            logger.debug('Translation provider returned HTTP %s', resp.status_code)
            raise NetworkError(f'Translation provider returned HTTP {resp.status_code}',
                               status_code=resp.status_code)

        resp.encoding = 'utf-8'
        return self.parse_response(resp.text, target_lang, source_lang == AUTO, source_lang=source_lang)

    def parse_response(self, body: str, target_lang: str, was_auto_detected: bool,
                       source_lang: Optional[str] = None) -> TranslationResult:
        """Turn a raw response body into a `TranslationResult`.

        Sentence tuples are ``[target, source, ...]`` and are concatenated in
        order without separators. When auto-detection was requested the
        detected code sits at position 2 of the outer array and the confidence
        is the first number after it.
        """
        structure = load_body(body)
        if not isinstance(structure, list) or not structure:
            raise ParseError('Response is not a non-empty array', body=body)

        sentences = structure[SENTENCES_INDEX]
        if not isinstance(sentences, list) or not sentences:
            raise ParseError('Response contains no sentences', body=body)

        target_parts: List[str] = []
        source_parts: List[str] = []
        for sentence in sentences:
            if not isinstance(sentence, list):
                raise ParseError(f'Unexpected sentence entry: {sentence!r}', body=body)
            target_fragment = sentence[0] if len(sentence) > 0 else None
            source_fragment = sentence[1] if len(sentence) > 1 else None
            for fragment in (target_fragment, source_fragment):
                if fragment is not None and not isinstance(fragment, str):
                    raise ParseError(f'Unexpected sentence fragment: {fragment!r}', body=body)
            # transliteration rows carry no target fragment
            if target_fragment is not None:
                target_parts.append(target_fragment)
            if source_fragment is not None:
                source_parts.append(source_fragment)

        if not target_parts:
            raise ParseError('Response contains no translated text', body=body)

        detected = None
        if len(structure) > DETECTED_SOURCE_INDEX and isinstance(structure[DETECTED_SOURCE_INDEX], str):
            detected = structure[DETECTED_SOURCE_INDEX]

        if was_auto_detected:
            source_code = detected or AUTO
            confidence = _find_confidence(structure)
            logger.info('Detected source language %s (confidence %s)', source_code, confidence)
        else:
            source_code = source_lang or detected or ''
            confidence = 1.0

        return TranslationResult(
            source_text=''.join(source_parts),
            target_text=''.join(target_parts),
            confidence=confidence,
            source_lang=self.catalog.lookup(source_code),
            target_lang=self.catalog.lookup(target_lang),
            source_code=source_code,
            target_code=target_lang,
        )


def _find_confidence(structure: list) -> Optional[float]:
    # first number after the detected code, ignoring bools
    for value in structure[DETECTED_SOURCE_INDEX + 1:]:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return min(max(float(value), 0.0), 1.0)
    return None
