"""Week-of-year grouping and per-group statistics."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterator

import pandas as pd

from weekseason.models.bar import WeeklyBar
from weekseason.models.summary import SummaryRow

PERIODS_PER_YEAR = 52
MAX_WEEK = 53

SUMMARY_COLUMNS = [
    "count",
    "win_count",
    "win_rate",
    "avg_return",
    "profit_factor",
    "sharpe_ratio",
    "std_dev",
    "max_return",
    "min_return",
]


def summarize_returns(week: int, returns: list[float]) -> SummaryRow:
    """Compute the statistics for one non-empty group of returns.

    Degenerate groups are defined, not errors: no losses gives an
    infinite profit factor (also when every return is zero) and zero
    variance gives a Sharpe ratio of 0.
    """
    if not returns:
        raise ValueError(f"week {week} has no returns")

    n = len(returns)
    hi = max(returns)
    lo = min(returns)
    # fsum can still land one ulp outside the extremes
    avg = min(max(math.fsum(returns) / n, lo), hi)
    std = math.sqrt(math.fsum((r - avg) ** 2 for r in returns) / n)

    wins = sum(1 for r in returns if r > 0)
    gains = math.fsum(r for r in returns if r > 0)
    losses = abs(math.fsum(r for r in returns if r < 0))
    profit_factor = math.inf if losses == 0 else gains / losses
    sharpe = 0.0 if std == 0 else (avg / std) * math.sqrt(PERIODS_PER_YEAR)

    return SummaryRow(
        week_number=week,
        count=n,
        win_count=wins,
        win_rate=wins / n,
        avg_return=avg,
        profit_factor=profit_factor,
        sharpe_ratio=sharpe,
        std_dev=std,
        max_return=hi,
        min_return=lo,
    )


def group_returns(bars: list[WeeklyBar]) -> dict[int, list[float]]:
    """Collect weekly returns by week number."""
    groups: dict[int, list[float]] = defaultdict(list)
    for b in bars:
        groups[b.week_number].append(b.weekly_return)
    return dict(groups)


def aggregate(bars: list[WeeklyBar]) -> dict[int, SummaryRow]:
    """Aggregate a (possibly filtered) series into per-week statistics.

    Only populated weeks appear; keys are inserted in ascending order.
    """
    groups = group_returns(bars)
    return {week: summarize_returns(week, groups[week]) for week in sorted(groups)}


def ordered_rows(summary: dict[int, SummaryRow]) -> Iterator[SummaryRow]:
    """Yield summary rows by ascending week 1..53, skipping absent weeks."""
    for week in range(1, MAX_WEEK + 1):
        row = summary.get(week)
        if row is not None:
            yield row


def summary_to_frame(summary: dict[int, SummaryRow]) -> pd.DataFrame:
    """Summary statistics as a DataFrame indexed by ``week_number``."""
    records = [
        {"week_number": r.week_number, **{c: getattr(r, c) for c in SUMMARY_COLUMNS}}
        for r in ordered_rows(summary)
    ]
    df = pd.DataFrame(records, columns=["week_number", *SUMMARY_COLUMNS])
    return df.set_index("week_number")
