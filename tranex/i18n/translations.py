"""Internationalization System"""

import json
from pathlib import Path
from typing import Any

from tranex.logging import get_logger

logger = get_logger(__name__)

# Supported languages with their names
SUPPORTED_LANGUAGES = {
    "en": "English",
    "ar": "العربية",
}

# Languages written right to left
RTL_LANGUAGES = {"ar"}

# Default language
DEFAULT_LANGUAGE = "en"

LOCALES_PATH = Path(__file__).parent / "locales"

# Cache for loaded translations
_translations: dict[str, dict[str, Any]] = {}


def _load_translations(lang: str) -> dict[str, Any]:
    """Load translations for a language"""
    if lang in _translations:
        return _translations[lang]

    file_path = LOCALES_PATH / f"{lang}.json"

    if not file_path.exists():
        # Fallback to English
        if lang != DEFAULT_LANGUAGE:
            return _load_translations(DEFAULT_LANGUAGE)
        return {}

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load translations for {lang}: {e}")
        return {}

    if not isinstance(data, dict):
        return {}
    _translations[lang] = data
    return data


def _lookup(translations: dict[str, Any], key: str) -> Any:
    """Resolve a dot-separated key, None if any part is missing."""
    current: Any = translations
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def detect_language(language_code: str | None) -> str:
    """
    Normalize a language code ("ar-SA" -> "ar").

    Returns:
        Supported language code, DEFAULT_LANGUAGE if unsupported
    """
    if not language_code:
        return DEFAULT_LANGUAGE
    lang = language_code.split("-")[0].lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def text_direction(lang: str | None) -> str:
    """Document direction for a language: "rtl" or "ltr"."""
    return "rtl" if detect_language(lang) in RTL_LANGUAGES else "ltr"


def get_text(key: str, lang: str = DEFAULT_LANGUAGE, default: str | None = None, **kwargs) -> str:
    """
    Get translated text by key.

    Args:
        key: Translation key (e.g., "nav.home", "store.no_products")
        lang: Language code (e.g., "en", "ar")
        default: Default value if key not found (instead of returning key)
        **kwargs: Variables to format into the string

    Returns:
        Translated string or key/default if not found
    """
    lang = detect_language(lang)

    text = _lookup(_load_translations(lang), key)

    # Fallback to English if key not found
    if text is None and lang != DEFAULT_LANGUAGE:
        text = _lookup(_load_translations(DEFAULT_LANGUAGE), key)

    # Missing, or a partial key pointing at a section
    if not isinstance(text, str):
        return default if default is not None else key

    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            return text

    return text


def get_all_texts(lang: str = DEFAULT_LANGUAGE) -> dict[str, Any]:
    """Get all translations for a language"""
    return _load_translations(detect_language(lang))


def reload_translations() -> None:
    """Clear translation cache and reload"""
    global _translations
    _translations = {}
