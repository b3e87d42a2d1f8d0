from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Optional, Protocol, TypeVar, Union

from gymdash.core.validation import parse_calendar_date
from gymdash.reports.date_range import DateRange


logger = logging.getLogger(__name__)


class Dated(Protocol):
    @property
    def date(self) -> Any: ...


RecordT = TypeVar("RecordT", bound=Dated)


def record_date(record: Any) -> Optional[Union[date, datetime]]:
    """
    Calendar date (or timestamp) of a record, or None when missing/unparseable.

    Model instances already hold a parsed `date`; plain mappings are parsed
    leniently.
    """

    if isinstance(record, dict):
        value = record.get("date")
    else:
        value = getattr(record, "date", None)

    if value is None or isinstance(value, (date, datetime)):
        return value
    return parse_calendar_date(value)


def filter_by_range(records: Iterable[RecordT], date_range: DateRange) -> list[RecordT]:
    """
    Records whose date falls inside `date_range`, in their original order.

    Records without a usable date are left out.
    """

    selected: list[RecordT] = []
    skipped = 0
    for record in records:
        value = record_date(record)
        if value is None:
            skipped += 1
            continue
        if date_range.contains(value):
            selected.append(record)

    if skipped:
        logger.warning("Skipped %d record(s) without a usable date", skipped)
    return selected
