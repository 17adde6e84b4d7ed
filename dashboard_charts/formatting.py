"""
Text formatting helpers shared by the chart renderers.

Everything here is locale independent: month names come from a fixed English
table and thousands are always grouped with commas, so rendered labels do not
change with the host's locale settings.
"""

import math
from datetime import date, datetime
from typing import Optional, Union

from .constants import ELLIPSIS, LABEL_MAX_LENGTH, MONTH_ABBREVIATIONS


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def percentage(value: float, total: float) -> int:
    """Whole-number share of ``value`` in ``total``; 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(value / total * 100)


def truncate_label(text: str, max_length: int = LABEL_MAX_LENGTH) -> str:
    """
    Shorten a label to ``max_length`` characters plus an ellipsis.

    Example:
        >>> truncate_label("a" * 25, 20)
        'aaaaaaaaaaaaaaaaaaaa...'
        >>> truncate_label("short", 20)
        'short'
    """
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def format_label(key: Optional[str]) -> str:
    """
    Normalize a categorical key for display.

    Boolean-flavored keys produced by the query layer ("true"/"false") read
    as Yes/No, missing keys as "Unknown", and anything else gets its first
    letter capitalized.
    """
    if not key:
        return "Unknown"
    if key == "true":
        return "Yes"
    if key == "false":
        return "No"
    return key[0].upper() + key[1:]


def parse_bucket(bucket: str) -> date:
    """
    Parse a time bucket identifier into a calendar date.

    Accepts plain dates ("2024-01-05") and ISO timestamps, including a
    trailing "Z". Raises ValueError for anything else.
    """
    text = bucket.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text).date()


def format_date(bucket: Union[str, date]) -> str:
    """Abbreviated month and day, e.g. "Jan 5"."""
    day = bucket if isinstance(bucket, date) else parse_bucket(bucket)
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def format_long_date(bucket: Union[str, date]) -> str:
    """Abbreviated month, day and year, e.g. "Jan 5, 2024"."""
    day = bucket if isinstance(bucket, date) else parse_bucket(bucket)
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}, {day.year}"


def format_value(value: float) -> str:
    """Plain numeric text: integral values without a decimal point."""
    if float(value).is_integer():
        return str(int(value))
    return str(float(value))


def format_number(value: float) -> str:
    """Group thousands with commas, keeping up to three decimals."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_currency(value: float) -> str:
    """Whole US dollars, e.g. "$85,000"."""
    sign = "-" if value < 0 else ""
    return f"{sign}${round_half_up(abs(value)):,}"
