"""Lag-1 conditional filter over a weekly return series."""

from __future__ import annotations

from weekseason.config import FilterMode
from weekseason.models.bar import WeeklyBar


def apply_filter(bars: list[WeeklyBar], mode: FilterMode | str) -> list[WeeklyBar]:
    """Select bars by the sign of the previous bar's return.

    ``bars`` must be in chronological order: the predicate looks at the
    neighbour by position, not by week number.

    - ``all``: every bar, same order.
    - ``after-up``: ``bars[i]`` for i >= 1 where ``bars[i-1]`` rose.
    - ``after-down``: ``bars[i]`` for i >= 1 where ``bars[i-1]`` fell.

    A flat previous week (return exactly 0) qualifies for neither mode.
    The result may be empty.

    Raises:
        SeasonalityError: If ``mode`` is not a known filter mode.
    """
    mode = FilterMode.parse(mode)
    if mode is FilterMode.ALL:
        return list(bars)

    selected: list[WeeklyBar] = []
    for i in range(1, len(bars)):
        prev = bars[i - 1].weekly_return
        if mode is FilterMode.AFTER_UP and prev > 0:
            selected.append(bars[i])
        elif mode is FilterMode.AFTER_DOWN and prev < 0:
            selected.append(bars[i])
    return selected
