"""Unparsed weekly row as delivered by a data source."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

TimestampLike = Union[int, float, str, date, datetime, None]


@dataclass(frozen=True)
class RawBar:
    """Single weekly row before validation.

    Attributes:
        timestamp: Seconds since the Unix epoch, ISO date string, ``date``
            or ``datetime``.
        open: Opening price, ``None`` when the source has a gap.
        close: Closing price, ``None`` when the source has a gap.
    """

    timestamp: TimestampLike
    open: float | None = None
    close: float | None = None
