"""Weekly bar data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class WeeklyBar:
    """One retained weekly observation with its derived fields.

    Attributes:
        timestamp: Bar timestamp (start of the week, UTC).
        open: Opening price (non-zero).
        close: Closing price.
        week_number: Simple week-of-year index, 1..53.
        weekly_return: ``(close - open) / open``.
    """

    timestamp: datetime
    open: float
    close: float
    week_number: int
    weekly_return: float

    @property
    def day(self) -> date:
        return self.timestamp.date()
