"""Persian number formatting helpers."""

from __future__ import annotations

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
GROUP_SEPARATOR = "٬"

_TO_PERSIAN = str.maketrans("0123456789", PERSIAN_DIGITS)
_TO_ENGLISH = str.maketrans(PERSIAN_DIGITS, "0123456789")


def format_number(number: int) -> str:
    """Format an integer with Persian digits and thousands separators."""
    value = int(number)
    grouped = f"{abs(value):,}".replace(",", GROUP_SEPARATOR)
    sign = "-" if value < 0 else ""
    return sign + grouped.translate(_TO_PERSIAN)


def to_english_digits(text: str) -> str:
    """Replace Persian digits in text with ASCII digits."""
    return text.translate(_TO_ENGLISH)