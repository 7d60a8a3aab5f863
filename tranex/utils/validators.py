"""Auth form validation with localized messages."""
import re
from typing import Mapping, Optional

PATTERNS = {
    "email": re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"),
    "password": re.compile(r"^(?=.*[A-Za-z])(?=.*\d)[A-Za-z\d@$!%*#?&]{8,}$"),
    "username": re.compile(r"^[a-zA-Z0-9_]{3,20}$"),
}

# Compared verbatim, never stripped
PASSWORD_FIELDS = ("password", "confirmPassword")

MESSAGES = {
    "en": {
        "email": {
            "pattern": "Please enter a valid email address",
            "required": "Email is required",
        },
        "password": {
            "pattern": "Password must be at least 8 characters and contain letters and numbers",
            "required": "Password is required",
        },
        "username": {
            "pattern": "Username must be 3-20 characters and can contain letters, numbers, and underscores",
            "required": "Username is required",
        },
        "confirmPassword": {
            "match": "Passwords do not match",
            "required": "Please confirm your password",
        },
    },
    "ar": {
        "email": {
            "pattern": "يرجى إدخال عنوان بريد إلكتروني صحيح",
            "required": "البريد الإلكتروني مطلوب",
        },
        "password": {
            "pattern": "يجب أن تتكون كلمة المرور من 8 أحرف على الأقل وتحتوي على أحرف وأرقام",
            "required": "كلمة المرور مطلوبة",
        },
        "username": {
            "pattern": "يجب أن يتكون اسم المستخدم من 3-20 حرفًا ويمكن أن يحتوي على أحرف وأرقام وشرطات سفلية",
            "required": "اسم المستخدم مطلوب",
        },
        "confirmPassword": {
            "match": "كلمات المرور غير متطابقة",
            "required": "يرجى تأكيد كلمة المرور",
        },
    },
}


def _messages(lang: str) -> dict:
    return MESSAGES.get(lang, MESSAGES["en"])


def validate_field(
    field: str,
    value: Optional[str],
    lang: str = "en",
    required: bool = True,
    password: Optional[str] = None,
) -> Optional[str]:
    """
    Validate one form field.

    Args:
        field: Field name (email, password, username, confirmPassword)
        value: Submitted value; surrounding whitespace is ignored except
            in passwords, which are checked exactly as submitted
        lang: Message language
        required: Whether an empty value is an error
        password: The password to compare against for confirmPassword

    Returns:
        Error message, or None if the value is valid
    """
    messages = _messages(lang).get(field, {})
    value = value or ""
    if field not in PASSWORD_FIELDS:
        value = value.strip()

    if not value.strip():
        return messages.get("required") if required else None

    pattern = PATTERNS.get(field)
    if pattern and not pattern.match(value):
        return messages.get("pattern")

    if field == "confirmPassword" and value != (password or ""):
        return messages.get("match")

    return None


def validate_form(fields: Mapping[str, Optional[str]], lang: str = "en") -> dict[str, str]:
    """Validate all fields; returns {field: message} for the failing ones."""
    errors = {}
    for field, value in fields.items():
        message = validate_field(field, value, lang, password=fields.get("password"))
        if message:
            errors[field] = message
    return errors
