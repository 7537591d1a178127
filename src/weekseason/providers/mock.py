"""Mock provider for testing and CI, no network access."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from weekseason.models.raw import RawBar
from weekseason.providers.base import BaseWeeklyProvider


class MockProvider(BaseWeeklyProvider):
    """In-memory provider that returns configurable static rows.

    Use ``set_rows`` to pre-load a symbol, or leave defaults for a
    deterministic synthetic history.
    """

    def __init__(self, years: int = 3, start_year: int = 2020) -> None:
        self.years = years
        self.start_year = start_year
        self._rows: dict[str, list[RawBar]] = {}

    def set_rows(self, symbol: str, rows: list[RawBar]) -> None:
        self._rows[symbol.upper()] = rows

    def get_weekly_rows(self, symbol: str) -> list[RawBar]:
        key = symbol.upper()
        if key in self._rows:
            return list(self._rows[key])
        return self._generate_rows()

    def _generate_rows(self) -> list[RawBar]:
        """Weekly rows starting on the first Monday of ``start_year``."""
        start = datetime(self.start_year, 1, 1, tzinfo=timezone.utc)
        start += timedelta(days=(7 - start.weekday()) % 7)
        end = datetime(self.start_year + self.years, 1, 1, tzinfo=timezone.utc)

        rows: list[RawBar] = []
        price = 100.0
        i = 0
        ts = start
        while ts < end:
            # repeating up/up/down/flat pattern
            step = (0.02, 0.01, -0.015, 0.0)[i % 4]
            o = round(price, 2)
            c = round(o * (1 + step), 2)
            rows.append(RawBar(timestamp=int(ts.timestamp()), open=o, close=c))
            price = c
            ts += timedelta(weeks=1)
            i += 1
        return rows
