"""Core data model.

Plain immutable dataclasses shared by the catalog, the translate handler and
the output formatter.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LanguageEntry:
    code: str  # provider code e.g. "en", "zh-CN"
    name: str  # human readable e.g. "English"


@dataclass(frozen=True)
class TranslationResult:
    source_text: str
    target_text: str
    confidence: Optional[float]  # 1.0 when the source language was explicit
    source_lang: Optional[LanguageEntry]
    target_lang: Optional[LanguageEntry]
    source_code: str = ""  # raw code, kept for display when the lookup misses
    target_code: str = ""
