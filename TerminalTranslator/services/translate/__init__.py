"""Translation providers.

Importing this package registers the available providers in
`TRANSLATION_REGISTRY`.
"""
from TerminalTranslator.core.registry import TRANSLATION_REGISTRY

from .formatting import format_result
from .google_translate import GoogleTranslateClient

TRANSLATION_REGISTRY.register('google', GoogleTranslateClient)

__all__ = ["GoogleTranslateClient", "format_result"]
