"""
Logging setup for the storefront package.

Every module logs through a child of the "tranex" logger:

    tranex.cart.service              cart mutations, subscriber failures
    tranex.cart.storage              corrupt or skipped cart records, failed saves
    tranex.storage                   file and Redis backend problems
    tranex.services.domains.catalog  catalog query failures, mock catalog fallback
    tranex.auth.service              sign in/up/out outcomes (emails masked)
    tranex.components                component fetch and injection errors

LOG_LEVEL sets the level of the "tranex" logger. A stdout handler is added
to the root logger only when nothing else configured logging first.

Usage:
    from tranex.logging import get_logger
    logger = get_logger(__name__)

    logger.warning(f"Skipping invalid cart record: {e}")
"""

import logging
import os
import sys
from functools import cache

PACKAGE_LOGGER = "tranex"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# HTTP libraries under supabase and the component loader; one line per request otherwise
NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def _get_log_level() -> int:
    """LOG_LEVEL from the environment, INFO if unset or unknown."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def _configure_logging() -> None:
    level = _get_log_level()
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    is_production = os.environ.get("TRANEX_ENV") == "production"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


_configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module.

    Names outside the package (scripts, "__main__") are nested under
    "tranex" so LOG_LEVEL applies to them too.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape newlines and control characters that could forge log entries (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Product or record id for logging: control characters escaped, first 8 chars kept.

    Returns:
        Sanitized id or "N/A" if empty
    """
    if not id_value:
        return "N/A"
    safe_value = _escape_log_injection(str(id_value))
    return safe_value[:8] if len(safe_value) > 8 else safe_value


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """User-supplied text (search term, selector) escaped and cut to max_length."""
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


def mask_email_for_logging(email: str | None) -> str:
    """
    Email with the local part masked: "nour@tranex.test" -> "n***@tranex.test".

    Values without "@" are masked entirely.
    """
    if not email:
        return "N/A"
    local, sep, domain = str(email).strip().partition("@")
    if not sep or not local:
        return "***"
    return sanitize_string_for_logging(f"{local[0]}***@{domain}")


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "PACKAGE_LOGGER",
    "get_logger",
    "mask_email_for_logging",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
