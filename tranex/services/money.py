"""
Money Utilities - Safe Decimal operations for prices and totals.

Avoids float drift in cart totals by using Decimal throughout; floats
appear only at serialization boundaries.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Largest accepted unit price
MAX_PRICE = Decimal("1000000000000")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "SAR": "ر.س",
    "AED": "د.إ",
}

# Symbol goes before the amount for these
PREFIX_CURRENCIES = ("USD", "EUR", "GBP")


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")

    try:
        # Go through str for floats so 0.1 stays 0.1
        result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def parse_money(value: Union[Number, None]) -> Decimal:
    """
    Strict conversion for incoming prices.

    Raises:
        ValueError: If value is missing, not numeric, or outside 0..MAX_PRICE
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"not a price: {value!r}")
    try:
        result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValueError(f"not a price: {value!r}") from e
    if not is_valid_price(result):
        raise ValueError(f"not a price: {value!r}")
    return result


def is_valid_price(value: Decimal) -> bool:
    """True for a finite price between 0 and MAX_PRICE inclusive."""
    return value.is_finite() and 0 <= value <= MAX_PRICE


def round_money(value: Number) -> Decimal:
    """Round monetary value to cents."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def discount_percent(price: Number, original_price: Union[Number, None]) -> int:
    """
    Whole-percent discount of price against original_price.

    Returns 0 when there is no original price or it is not higher than price.
    """
    original = to_decimal(original_price)
    current = to_decimal(price)
    if original <= 0 or original <= current:
        return 0
    ratio = Decimal("1") - current / original
    return int((ratio * 100).to_integral_value(rounding=ROUND_HALF_UP))


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, SAR, ...)

    Returns:
        Formatted string, e.g. "$1,234.50" or "99.00 ر.س"
    """
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    formatted = f"{round_money(value):,.2f}"
    if currency in PREFIX_CURRENCIES:
        return f"{symbol}{formatted}"
    return f"{formatted} {symbol}"


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at serialization boundaries, not for internal calculations.
    """
    return float(to_decimal(value))
