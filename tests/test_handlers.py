from __future__ import annotations

from gymdash.bot.handlers.reports import parse_range_args
from gymdash.reports.date_range import RangeId


def test_no_arguments_use_view_default():
    assert parse_range_args(None, RangeId.THIS_MONTH) == (RangeId.THIS_MONTH, None)
    assert parse_range_args("   ", RangeId.LAST_7_DAYS) == (RangeId.LAST_7_DAYS, None)


def test_single_argument_is_a_range_id():
    assert parse_range_args("lastmonth", RangeId.THIS_MONTH) == (RangeId.LAST_MONTH, None)
    assert parse_range_args("whenever", RangeId.THIS_MONTH) == (RangeId.LAST_7_DAYS, None)


def test_two_arguments_are_custom_bounds():
    assert parse_range_args("2023-10-01 2023-10-31", RangeId.THIS_MONTH) == (
        RangeId.CUSTOM,
        {"start_date": "2023-10-01", "end_date": "2023-10-31"},
    )
