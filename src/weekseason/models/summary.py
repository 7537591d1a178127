"""Per-week seasonality statistics."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryRow:
    """Statistics for every return that fell in one week-of-year slot.

    Attributes:
        week_number: Week-of-year key, 1..53.
        count: Number of returns in the group (always >= 1).
        win_count: Number of strictly positive returns.
        win_rate: ``win_count / count``.
        avg_return: Arithmetic mean return.
        profit_factor: Summed gains over summed absolute losses,
            ``math.inf`` when the group has no losses.
        sharpe_ratio: ``avg_return / std_dev * sqrt(52)``, 0 when flat.
        std_dev: Population standard deviation of returns.
        max_return: Best return in the group.
        min_return: Worst return in the group.
    """

    week_number: int
    count: int
    win_count: int
    win_rate: float
    avg_return: float
    profit_factor: float
    sharpe_ratio: float
    std_dev: float
    max_return: float
    min_return: float

    @property
    def has_losses(self) -> bool:
        return not math.isinf(self.profit_factor)
