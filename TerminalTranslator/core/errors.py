"""Error taxonomy.

Library code raises these; only the CLI boundary turns them into messages and
exit codes.
"""
from __future__ import annotations
from typing import Optional


class TranslatorError(Exception):
    """Base class for every error the translator raises on purpose."""


class ValidationError(TranslatorError, ValueError):
    """A language code is malformed or not in the catalog."""


class EmptyInputError(TranslatorError, ValueError):
    """There is no text to translate."""


class NetworkError(TranslatorError):
    """Transport failure, timeout or non-200 reply from the provider."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(TranslatorError):
    """The response body does not have the expected shape."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        # keep only an excerpt, bodies can be large
        self.body = body[:200] if body else body
