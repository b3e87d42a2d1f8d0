from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union


def format_relative_time(
    value: Union[date, datetime],
    now: Union[date, datetime],
    time: Optional[str] = None,
) -> str:
    """
    Human label for how long ago `value` was, counted in calendar days.

    Same day gives `time` when given (the record's own time-of-day string),
    otherwise "Today". One day earlier gives "Yesterday", anything older
    "N days ago". Dates after `now` are not expected; they read as today.
    """

    day = value.date() if isinstance(value, datetime) else value
    today = now.date() if isinstance(now, datetime) else now

    days = (today - day).days
    if days <= 0:
        return time or "Today"
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"
