"""Helpers for the provider's array-shaped response body.

The endpoint replies with JavaScript array literals that leave empty slots for
missing values, e.g. ``[[["Hola","Hello",,,1]],,"en"]``. That is not valid JSON,
so empty slots are rewritten to ``null`` before handing the text to ``json``.
"""
from __future__ import annotations

import json
from typing import Any

from TerminalTranslator.core.errors import ParseError

_WHITESPACE = ' \t\r\n'


def _next_significant(body: str, start: int) -> str:
    i = start
    while i < len(body) and body[i] in _WHITESPACE:
        i += 1
    return body[i] if i < len(body) else ''


def normalize_gaps(body: str) -> str:
    """Insert ``null`` into every empty array slot outside string literals.

    ``[,`` and ``,,`` and ``,]`` each gain a ``null``; ``[]`` is left alone.
    """
    out = []
    in_string = False
    escaped = False
    for i, ch in enumerate(body):
        out.append(ch)
        if in_string:
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == ',':
            if _next_significant(body, i + 1) in (',', ']'):
                out.append('null')
        elif ch == '[':
            if _next_significant(body, i + 1) == ',':
                out.append('null')
    return ''.join(out)


def load_body(body: str) -> Any:
    """Normalize and decode a response body, raising ParseError on failure."""
    if not isinstance(body, str) or not body.strip():
        raise ParseError('Empty response body', body=body if isinstance(body, str) else None)
    try:
        return json.loads(normalize_gaps(body))
    except json.JSONDecodeError as e:
        raise ParseError(f'Response body is not a valid array literal: {e}', body=body) from e
