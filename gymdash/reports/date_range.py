"""
Named date ranges and their resolution into concrete calendar intervals.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from gymdash.core.validation import parse_calendar_date


logger = logging.getLogger(__name__)

# 23:59:59.999, the last instant counted as part of a day
END_OF_DAY = time(23, 59, 59, 999000)


class InvalidRangeError(ValueError):
    """Custom date range could not be parsed into calendar dates."""


class RangeId(str, Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_7_DAYS = "last7Days"
    LAST_30_DAYS = "last30Days"
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    LAST_3_MONTHS = "last3Months"
    THIS_YEAR = "thisYear"
    CUSTOM = "custom"


RANGE_LABELS: dict[RangeId, str] = {
    RangeId.TODAY: "Today",
    RangeId.YESTERDAY: "Yesterday",
    RangeId.LAST_7_DAYS: "Last 7 Days",
    RangeId.LAST_30_DAYS: "Last 30 Days",
    RangeId.THIS_MONTH: "This Month",
    RangeId.LAST_MONTH: "Last Month",
    RangeId.LAST_3_MONTHS: "Last 3 Months",
    RangeId.THIS_YEAR: "This Year",
    RangeId.CUSTOM: "Custom Range",
}

_RANGE_IDS_BY_KEY = {r.value.lower(): r for r in RangeId}


class DateRange(BaseModel):
    """Inclusive calendar interval."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    label: str = ""

    @model_validator(mode="after")
    def _ordered(self) -> "DateRange":
        if self.start_date > self.end_date:
            raise ValueError(
                f"start_date {self.start_date} is after end_date {self.end_date}"
            )
        return self

    @property
    def end_of_day(self) -> datetime:
        return datetime.combine(self.end_date, END_OF_DAY)

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def contains(self, value: Union[date, datetime]) -> bool:
        if isinstance(value, datetime):
            start = datetime.combine(self.start_date, time.min, tzinfo=value.tzinfo)
            end = self.end_of_day.replace(tzinfo=value.tzinfo)
            return start <= value <= end
        return self.start_date <= value <= self.end_date


def parse_range_id(raw: Union[RangeId, str, None]) -> RangeId:
    """
    Map a range identifier to `RangeId`, case-insensitively.

    Unknown or empty identifiers fall back to the last 7 days.
    """

    if isinstance(raw, RangeId):
        return raw
    if raw:
        found = _RANGE_IDS_BY_KEY.get(raw.strip().lower())
        if found is not None:
            return found
        logger.debug("Unknown range id %r, using last 7 days", raw)
    return RangeId.LAST_7_DAYS


def _month_start(day: date) -> date:
    return day.replace(day=1)


def _month_end(day: date) -> date:
    next_month = (day.replace(day=1) + timedelta(days=32)).replace(day=1)
    return next_month - timedelta(days=1)


def _shift_months(day: date, months: int) -> date:
    """First day of the month `months` away from `day`'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def _parse_custom(custom: Optional[Mapping[str, str]]) -> tuple[date, date]:
    if not custom:
        raise InvalidRangeError("Custom range requires start and end dates")

    start_raw = custom.get("start_date", custom.get("startDate"))
    end_raw = custom.get("end_date", custom.get("endDate"))
    start = _parse_custom_date(start_raw, "start")
    end = _parse_custom_date(end_raw, "end")

    if start > end:
        logger.debug("Swapping reversed custom range %s..%s", start, end)
        start, end = end, start
    return start, end


def _parse_custom_date(raw: object, which: str) -> date:
    # Custom bounds must be plain YYYY-MM-DD strings or dates
    if isinstance(raw, str) and len(raw.strip()) != 10:
        raise InvalidRangeError(f"Invalid {which} date: {raw!r}")
    parsed = parse_calendar_date(raw)
    if parsed is None:
        raise InvalidRangeError(f"Invalid {which} date: {raw!r}")
    return parsed


def resolve_date_range(
    range_id: Union[RangeId, str, None],
    custom: Optional[Mapping[str, str]] = None,
    now: Union[date, datetime, None] = None,
) -> DateRange:
    """
    Resolve a named range into a concrete `DateRange`.

    `custom` is only read for the custom range and holds `start_date` and
    `end_date` (or `startDate`/`endDate`) as `YYYY-MM-DD` strings. A reversed
    custom pair is swapped. Raises `InvalidRangeError` when a custom bound is
    missing or not a calendar date.
    """

    rid = parse_range_id(range_id)
    if now is None:
        today = date.today()
    elif isinstance(now, datetime):
        today = now.date()
    else:
        today = now

    if rid is RangeId.TODAY:
        start, end = today, today
    elif rid is RangeId.YESTERDAY:
        start = end = today - timedelta(days=1)
    elif rid is RangeId.LAST_30_DAYS:
        start, end = today - timedelta(days=29), today
    elif rid is RangeId.THIS_MONTH:
        start, end = _month_start(today), _month_end(today)
    elif rid is RangeId.LAST_MONTH:
        start = _shift_months(today, -1)
        end = _month_end(start)
    elif rid is RangeId.LAST_3_MONTHS:
        start, end = _shift_months(today, -2), _month_end(today)
    elif rid is RangeId.THIS_YEAR:
        start, end = date(today.year, 1, 1), date(today.year, 12, 31)
    elif rid is RangeId.CUSTOM:
        start, end = _parse_custom(custom)
    else:
        start, end = today - timedelta(days=6), today

    return DateRange(start_date=start, end_date=end, label=RANGE_LABELS[rid])
