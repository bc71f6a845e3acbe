"""Terminal output for a `TranslationResult`."""
from __future__ import annotations

from TerminalTranslator.core.models import TranslationResult


def _language_label(entry, code: str) -> str:
    if entry is not None:
        return entry.name
    return code or '?'


def format_result(result: TranslationResult, details: bool = False) -> str:
    """Plain mode is the translated text only; detailed mode adds a
    ``[Source -> Target]`` header line. Unknown languages show their raw code.
    """
    if not details:
        return result.target_text
    source = _language_label(result.source_lang, result.source_code)
    target = _language_label(result.target_lang, result.target_code)
    return f'[{source} -> {target}]\n{result.target_text}'
