"""Simple week-of-year numbering.

Weeks are counted from January 1 in blocks of seven days, using UTC
calendar components only. This is not ISO-8601: there is no Monday
alignment and no week-year carry-over, so the last one or two days of a
year form a short week 53.
"""

from __future__ import annotations

import math
import numbers
from datetime import date, datetime, timezone

from weekseason.models.raw import TimestampLike


def to_utc_datetime(value: TimestampLike) -> datetime:
    """Normalize a timestamp-like value to an aware UTC datetime.

    Accepts epoch seconds, ISO-8601 strings (date or datetime), ``date``
    and ``datetime``. Naive datetimes are taken to be UTC already.

    Raises:
        ValueError: If the value is ``None``, non-finite or unparseable.
        TypeError: If the value has an unsupported type.
    """
    if value is None:
        raise ValueError("timestamp is missing")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, bool):
        raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise ValueError(f"non-finite timestamp: {value}")
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return to_utc_datetime(datetime.fromisoformat(text))
    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")


def week_number(value: TimestampLike) -> int:
    """Return the simple week-of-year (1..53) for a date or timestamp.

    ``ceil((day_of_year + 1) / 7)`` with a 0-based UTC day of year, so
    Jan 1-7 is week 1 and Dec 30/31 fall in week 53.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        day = value
    else:
        day = to_utc_datetime(value).date()
    day_of_year = (day - date(day.year, 1, 1)).days
    return math.ceil((day_of_year + 1) / 7)
