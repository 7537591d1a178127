"""Abstract base class for weekly data providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from weekseason.models.raw import RawBar


class BaseWeeklyProvider(ABC):
    """Abstract base for all weekly price sources.

    Providers only fetch and parse; they never drop rows. Null and
    zero-open rows are passed through so the series builder applies one
    skip policy for every source.
    """

    @abstractmethod
    def get_weekly_rows(self, symbol: str) -> list[RawBar]:
        """Fetch the full weekly history of a symbol.

        Args:
            symbol: Ticker symbol.

        Returns:
            Raw rows ordered by timestamp ascending. An empty list means
            the symbol exists but has no history.
        """
        ...
