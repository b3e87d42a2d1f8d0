from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any


_ISO_DATE_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def parse_calendar_date(raw: Any) -> date | None:
    """
    Lenient calendar date parsing for backend values.

    Accepts `date`, `datetime` (its date part) and ISO strings such as
    `2023-10-01` or `2023-10-01T08:30:00Z`. Returns None for anything else.
    """

    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        return None

    value = raw.strip()
    if not _ISO_DATE_REGEX.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def parse_amount(raw: Any) -> Decimal | None:
    """
    Parse a money amount coming from the backend.

    Numbers and numeric strings (optionally prefixed with `$`) become Decimal.
    Booleans, NaN/infinity and unparseable values give None.
    """

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        amount = raw
    elif isinstance(raw, (int, float)):
        amount = Decimal(str(raw))
    elif isinstance(raw, str):
        value = raw.strip().lstrip("$").replace(",", "")
        if not value:
            return None
        try:
            amount = Decimal(value)
        except InvalidOperation:
            return None
    else:
        return None

    if not amount.is_finite():
        return None
    return amount
