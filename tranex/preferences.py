"""
Site preferences: color theme and interface language.

Both are persisted in the same key-value storage as the cart, under
"tranex-theme" and "tranex-language".
"""

from typing import Optional

from tranex.db import StorageKeys
from tranex.i18n import DEFAULT_LANGUAGE, detect_language, get_text, text_direction
from tranex.logging import get_logger
from tranex.storage import KeyValueStorage

logger = get_logger(__name__)

THEMES = ("light", "dark")


class Preferences:
    """
    Theme and language state for one visitor.

    Args:
        storage: Storage holding saved preferences
        prefers_dark: System color-scheme preference, used when no theme is saved
    """

    def __init__(self, storage: KeyValueStorage, prefers_dark: bool = False):
        self.storage = storage
        self.prefers_dark = prefers_dark

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.storage.get(key)
        except Exception as e:
            logger.warning(f"Failed to read preference {key}: {e}")
            return None

    def _write(self, key: str, value: str) -> None:
        try:
            self.storage.set(key, value)
        except Exception as e:
            logger.error(f"Failed to save preference {key}: {e}")

    # --- Theme ---

    @property
    def theme(self) -> str:
        saved = self._read(StorageKeys.THEME)
        if saved in THEMES:
            return saved
        return "dark" if self.prefers_dark else "light"

    def set_theme(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self._write(StorageKeys.THEME, theme)
        return theme

    def toggle_theme(self) -> str:
        """Flip between light and dark; returns the new theme."""
        return self.set_theme("light" if self.theme == "dark" else "dark")

    def theme_toggle_label(self) -> str:
        """aria-label for the theme button in the current language."""
        key = "theme.to_light" if self.theme == "dark" else "theme.to_dark"
        return get_text(key, self.language)

    # --- Language ---

    @property
    def language(self) -> str:
        saved = self._read(StorageKeys.LANGUAGE)
        return detect_language(saved) if saved else DEFAULT_LANGUAGE

    @property
    def direction(self) -> str:
        return text_direction(self.language)

    def switch_language(self, lang: str) -> bool:
        """
        Switch the interface language.

        Returns:
            False if lang normalizes to the current language, True otherwise
        """
        target = detect_language(lang)
        if target == self.language:
            return False
        self._write(StorageKeys.LANGUAGE, target)
        logger.debug(f"Language switched to {target}")
        return True

    def toggle_language(self) -> str:
        """Switch between English and Arabic; returns the new language."""
        self.switch_language("en" if self.language == "ar" else "ar")
        return self.language

    def language_switcher(self) -> dict:
        """Label and aria-label for the language button."""
        return {
            "label": get_text("language.switch_label", self.language),
            "aria_label": get_text("language.switch_aria", self.language),
        }
