"""Tests for logging helpers"""
import logging

from tranex.logging import (
    PACKAGE_LOGGER,
    get_logger,
    mask_email_for_logging,
    sanitize_id_for_logging,
    sanitize_string_for_logging,
)


def test_get_logger_keeps_package_names():
    assert get_logger("tranex.cart.service").name == "tranex.cart.service"
    assert get_logger(PACKAGE_LOGGER).name == "tranex"


def test_get_logger_nests_outside_names():
    logger = get_logger("check_catalog")

    assert logger.name == "tranex.check_catalog"
    assert logger.getEffectiveLevel() == logging.getLogger(PACKAGE_LOGGER).level


def test_get_logger_is_cached():
    assert get_logger("tranex.storage") is get_logger("tranex.storage")


def test_sanitize_id_for_logging():
    assert sanitize_id_for_logging(None) == "N/A"
    assert sanitize_id_for_logging("product-12345") == "product-"
    assert sanitize_id_for_logging("a\nb") == "a\\nb"


def test_sanitize_string_for_logging():
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."
    assert sanitize_string_for_logging("#header\r") == "#header\\r"


def test_mask_email_for_logging():
    assert mask_email_for_logging("nour@tranex.test") == "n***@tranex.test"
    assert mask_email_for_logging("no-at-sign") == "***"
    assert mask_email_for_logging("") == "N/A"
    assert mask_email_for_logging("a@b.co\nFAKE") == "a***@b.co\\nFAKE"
