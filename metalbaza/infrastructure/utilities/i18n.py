"""
Simple i18n helper for translating user-facing strings.

Usage
-----
from metalbaza.infrastructure.utilities.i18n import tr
text = tr("ERROR_EMPTY_CART", lang)  # returns Uzbek / Russian string

Strings are stored in JSON files under metalbaza/infrastructure/locales/<lang>.json
Missing keys fall back to Uzbek, then to the key name.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
_FALLBACK_LANG = "uz"
SUPPORTED_LANGUAGES = ("uz", "ru")


@lru_cache(maxsize=None)
def _load_locale(lang: str) -> Dict[str, str]:
    """Load language JSON and cache the result."""
    file_path = _LOCALES_DIR / f"{lang}.json"
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        # Unknown language, fall back to Uzbek
        return {}


def default_language() -> str:
    lang = os.getenv("DEFAULT_LANGUAGE", _FALLBACK_LANG).lower()
    return lang if lang in SUPPORTED_LANGUAGES else _FALLBACK_LANG


def normalize_language(value: str | None) -> str | None:
    """Map ``ru-RU,ru;q=0.9`` style values onto a supported language"""
    if not value:
        return None
    lang = value.split(",")[0].split(";")[0].split("-")[0].strip().lower()
    return lang if lang in SUPPORTED_LANGUAGES else None


def tr(key: str, lang: str | None = None, **params) -> str:
    """Translate *key* for *lang* (default = env/DEFAULT_LANGUAGE).

    Falls back to Uzbek, then to the key itself if not found.
    """
    lang = lang or default_language()

    text = _load_locale(lang).get(key)
    if text is None and lang != _FALLBACK_LANG:
        text = _load_locale(_FALLBACK_LANG).get(key)
    if text is None:
        return key

    return text.format(**params) if params else text
