# Internationalization Module
from .translations import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    detect_language,
    get_text,
    text_direction,
)

__all__ = ["DEFAULT_LANGUAGE", "SUPPORTED_LANGUAGES", "detect_language", "get_text", "text_direction"]
