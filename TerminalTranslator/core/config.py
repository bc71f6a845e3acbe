"""Configuration schema.

Dataclass structures with built-in defaults. `load_config` layers environment
variable overrides on top; command-line flags are applied later by the CLI.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://translate.googleapis.com/translate_a/single"

# first name found wins; JA_GTC_* are the names earlier releases of the tool read
ENV_SOURCE = ("JA_GTC_SOURCE", "TRANSLATE_SOURCE")
ENV_TARGET = ("JA_GTC_TARGET", "TRANSLATE_TARGET")
ENV_TIMEOUT = "TRANSLATE_TIMEOUT"
ENV_ENDPOINT = "TRANSLATE_ENDPOINT"


@dataclass
class TranslationConfig:
    provider: str = "google"
    endpoint: str = DEFAULT_ENDPOINT
    client: str = "gtx"  # public client identifier accepted without a key
    timeout: float = 10.0  # seconds
    default_source: str = "en"
    default_target: str = "es"


@dataclass
class AppConfig:
    translation: TranslationConfig = field(default_factory=TranslationConfig)


def _env(environ: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return None


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build an `AppConfig` from defaults, letting env vars take precedence."""
    if environ is None:
        environ = os.environ
    cfg = AppConfig()
    tr = cfg.translation

    source = _env(environ, *ENV_SOURCE)
    if source:
        tr.default_source = source
    target = _env(environ, *ENV_TARGET)
    if target:
        tr.default_target = target
    endpoint = _env(environ, ENV_ENDPOINT)
    if endpoint:
        tr.endpoint = endpoint

    timeout = _env(environ, ENV_TIMEOUT)
    if timeout:
        try:
            value = float(timeout)
            if value <= 0:
                raise ValueError(timeout)
            tr.timeout = value
        except ValueError:
            logger.warning("Ignoring invalid %s=%r, using %ss", ENV_TIMEOUT, timeout, tr.timeout)

    logger.debug("Loaded config: %s", cfg)
    return cfg
