"""Tests for validators"""
import pytest

from tranex.utils import validate_field, validate_form


@pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@mail.example.org"])
def test_valid_email(email):
    assert validate_field("email", email) is None


@pytest.mark.parametrize("email", ["plain", "a@b", "@b.co", "a b@c.co"])
def test_invalid_email(email):
    assert validate_field("email", email) == "Please enter a valid email address"


def test_password_rules():
    assert validate_field("password", "secret123") is None
    assert validate_field("password", "short1") is not None
    assert validate_field("password", "lettersonly") is not None
    assert validate_field("password", "12345678") is not None


def test_username_rules():
    assert validate_field("username", "tranex_fan") is None
    assert validate_field("username", "ab") is not None


def test_required_and_optional():
    assert validate_field("email", "   ") == "Email is required"
    assert validate_field("email", None, required=False) is None


def test_arabic_messages():
    assert validate_field("password", "", lang="ar") == "كلمة المرور مطلوبة"


def test_unknown_language_uses_english():
    assert validate_field("email", "", lang="fr") == "Email is required"


def test_confirm_password():
    assert validate_field("confirmPassword", "secret123", password="secret123") is None
    assert validate_field("confirmPassword", "secret124", password="secret123") == "Passwords do not match"


def test_validate_form():
    errors = validate_form({
        "email": "a@b.co",
        "password": "secret123",
        "confirmPassword": "different1",
    })

    assert errors == {"confirmPassword": "Passwords do not match"}


def test_validate_form_all_valid():
    assert validate_form({"email": "a@b.co", "password": "secret123"}) == {}


def test_password_checked_as_submitted():
    assert validate_field("password", " secret123 ") is not None
    assert validate_field("password", "   ") == "Password is required"


def test_confirm_password_compares_exact_strings():
    assert validate_field("confirmPassword", "secret123 ", password="secret123") is not None


def test_email_surrounding_whitespace_ignored():
    assert validate_field("email", "  a@b.co ") is None
