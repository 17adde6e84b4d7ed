"""Tests for label and number formatting helpers."""
from __future__ import annotations

from datetime import date

import pytest

from dashboard_charts.formatting import (
    format_currency,
    format_date,
    format_label,
    format_long_date,
    format_number,
    format_value,
    parse_bucket,
    percentage,
    round_half_up,
    truncate_label,
)


def test_truncate_label_long_text() -> None:
    """25 characters become the first 20 plus an ellipsis."""
    result = truncate_label("a" * 25, 20)

    assert len(result) == 23
    assert result.endswith("...")
    assert result[:20] == "a" * 20


def test_truncate_label_short_text_unchanged() -> None:
    assert truncate_label("short", 20) == "short"
    assert truncate_label("b" * 20, 20) == "b" * 20


@pytest.mark.parametrize(
    "key,expected",
    [
        ("true", "Yes"),
        ("false", "No"),
        ("", "Unknown"),
        (None, "Unknown"),
        ("engineer", "Engineer"),
        ("linkedin", "Linkedin"),
        ("remote work", "Remote work"),
        ("ACME", "ACME"),
    ],
)
def test_format_label(key, expected) -> None:
    assert format_label(key) == expected


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4) == 2
    assert round_half_up(-0.5) == 0


def test_percentage() -> None:
    assert percentage(30, 100) == 30
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
    assert percentage(5, 0) == 0


def test_format_date() -> None:
    assert format_date("2024-01-05") == "Jan 5"
    assert format_date("2024-03-15T10:00:00Z") == "Mar 15"
    assert format_date(date(2024, 12, 31)) == "Dec 31"


def test_format_long_date() -> None:
    assert format_long_date("2024-01-05") == "Jan 5, 2024"


def test_parse_bucket_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_bucket("last tuesday")


def test_format_value() -> None:
    assert format_value(12.0) == "12"
    assert format_value(2.5) == "2.5"


def test_format_number() -> None:
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234.5) == "1,234.5"
    assert format_number(0) == "0"


def test_format_currency() -> None:
    assert format_currency(85000) == "$85,000"
    assert format_currency(-1200.4) == "-$1,200"
