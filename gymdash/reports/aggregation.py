"""
Grouping of filtered records into chart/report buckets.

Two modes are used by the reports:

- sum-by-period: payment amounts summed per day (`Oct 1`) or month (`Oct`);
- count-by-category: records counted per category (activity type,
  membership type), labelled with display-friendly names.

Buckets keep the order in which their groups were first seen.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict

from gymdash.core.validation import parse_amount
from gymdash.reports.date_range import DateRange
from gymdash.reports.filtering import record_date


class Granularity(str, Enum):
    DAY = "day"
    MONTH = "month"


# Windows longer than this are grouped by month
MAX_DAILY_WINDOW_DAYS = 93

CATEGORY_LABELS: dict[str, str] = {
    "check-in": "Check-ins",
    "payment": "Payments",
    "class-booking": "Class Bookings",
    "new-member": "New Members",
}


class AggregationBucket(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: Union[int, Decimal]


Classifier = Callable[[Any], Optional[str]]


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def granularity_for_range(date_range: DateRange) -> Granularity:
    if date_range.days > MAX_DAILY_WINDOW_DAYS:
        return Granularity.MONTH
    return Granularity.DAY


def period_label(
    day: date,
    granularity: Union[Granularity, str],
    with_year: bool = False,
) -> str:
    if Granularity(granularity) is Granularity.MONTH:
        label = day.strftime("%b")
        return f"{label} {day.year}" if with_year else label
    label = f"{day.strftime('%b')} {day.day}"
    return f"{label}, {day.year}" if with_year else label


def category_label(key: str) -> str:
    label = CATEGORY_LABELS.get(key)
    if label is not None:
        return label
    return key[:1].upper() + key[1:]


def aggregate_sum(
    records: Iterable[Any],
    granularity: Union[Granularity, str] = Granularity.DAY,
) -> list[AggregationBucket]:
    """
    Sum `amount` per period label.

    Amounts that are not numbers count as zero. Records without a date are
    skipped. Records are visited in date order (ties keep their input order),
    so labels come out chronologically whatever order the backend used.
    When the records span more than one year the labels carry the year
    (`Oct 2022`, `Oct 5, 2022`) so periods from different years stay apart.
    """

    dated: list[tuple[date, Any]] = []
    for record in records:
        value = record_date(record)
        if value is None:
            continue
        dated.append((_as_date(value), record))
    dated.sort(key=lambda item: item[0])
    with_year = len({day.year for day, _ in dated}) > 1

    totals: dict[str, Decimal] = {}
    for day, record in dated:
        label = period_label(day, granularity, with_year)
        amount = parse_amount(_field(record, "amount")) or Decimal(0)
        totals[label] = totals.get(label, Decimal(0)) + amount

    return [AggregationBucket(label=label, value=total) for label, total in totals.items()]


def aggregate_count(
    records: Iterable[Any],
    classify: Classifier,
) -> list[AggregationBucket]:
    """
    Count records per category returned by `classify`.

    Categories are labelled through `CATEGORY_LABELS`; anything else is shown
    with its first letter capitalized. A classifier returning nothing puts
    the record in `other`.
    """

    counts: dict[str, int] = {}
    for record in records:
        key = classify(record) or "other"
        counts[key] = counts.get(key, 0) + 1

    return [
        AggregationBucket(label=category_label(key), value=count)
        for key, count in counts.items()
    ]


def by_activity_type(record: Any) -> str:
    value = _field(record, "type")
    if isinstance(value, Enum):
        value = value.value
    return value or "other"


def by_membership_type(record: Any) -> str:
    value = _field(record, "membership_type")
    if value is None and isinstance(record, dict):
        value = record.get("membershipType")
    return value or "standard"


def bucket_total(buckets: Iterable[AggregationBucket]) -> Union[int, Decimal]:
    return sum((b.value for b in buckets), 0)
