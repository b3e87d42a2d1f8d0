from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from gymdash.core.validation import parse_amount, parse_calendar_date


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2023-10-01", date(2023, 10, 1)),
        (" 2023-10-01 ", date(2023, 10, 1)),
        ("2023-10-01T08:30:00Z", date(2023, 10, 1)),
        ("2023-10-01T23:30:00+02:00", date(2023, 10, 1)),
        (date(2023, 10, 1), date(2023, 10, 1)),
        (datetime(2023, 10, 1, 12), date(2023, 10, 1)),
        ("2023-13-01", None),
        ("Oct 1", None),
        ("", None),
        (None, None),
        (1696118400, None),
    ],
)
def test_parse_calendar_date(raw, expected):
    assert parse_calendar_date(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("10.50", Decimal("10.50")),
        ("$89.99", Decimal("89.99")),
        ("1,250", Decimal("1250")),
        (5, Decimal("5")),
        (2.5, Decimal("2.5")),
        (Decimal("3.10"), Decimal("3.10")),
        ("abc", None),
        ("", None),
        ("NaN", None),
        ("Infinity", None),
        (True, None),
        (None, None),
        ([1], None),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected
