"""Weekly return series construction and DataFrame interchange."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Union

import pandas as pd

from weekseason.models.bar import WeeklyBar
from weekseason.models.raw import RawBar
from weekseason.weeks import to_utc_datetime, week_number

logger = logging.getLogger(__name__)

RawRow = Union[RawBar, Mapping[str, Any]]

FRAME_COLUMNS = ["timestamp", "week_number", "open", "close", "weekly_return"]


def _field(row: RawRow, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _price(value: Any) -> float | None:
    """Coerce a price cell to float; ``None`` for gaps and NaN."""
    if value is None:
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(price):
        return None
    return price


def to_weekly_bar(row: RawRow) -> WeeklyBar | None:
    """Build a WeeklyBar from one raw row, or ``None`` if it must be dropped.

    A row is dropped when open or close is missing, when open is zero
    (undefined return) or when the timestamp cannot be parsed.
    """
    open_ = _price(_field(row, "open"))
    close = _price(_field(row, "close"))
    if open_ is None or close is None or open_ == 0:
        return None
    try:
        ts = to_utc_datetime(_field(row, "timestamp"))
    except (TypeError, ValueError, OverflowError, OSError):
        return None
    return WeeklyBar(
        timestamp=ts,
        open=open_,
        close=close,
        week_number=week_number(ts),
        weekly_return=(close - open_) / open_,
    )


def build_return_series(rows: Iterable[RawRow] | None) -> list[WeeklyBar]:
    """Turn raw rows into an ordered list of WeeklyBars.

    Input order is preserved (expected oldest first); nothing is sorted or
    de-duplicated. ``None`` or an empty input gives an empty list.
    """
    bars: list[WeeklyBar] = []
    skipped = 0
    for row in rows or ():
        bar = to_weekly_bar(row)
        if bar is None:
            skipped += 1
            continue
        bars.append(bar)
    if skipped:
        logger.debug("Dropped %d of %d raw rows", skipped, skipped + len(bars))
    return bars


def series_from_frame(df: pd.DataFrame) -> list[WeeklyBar]:
    """Build a series from a DataFrame with ``open``/``close`` columns.

    Timestamps come from a ``timestamp`` column when present (numeric
    values are epoch seconds), otherwise from a DatetimeIndex. Tz-naive
    values are read as UTC.
    """
    if df is None or df.empty:
        return []
    if "timestamp" in df.columns:
        column = df["timestamp"]
        if pd.api.types.is_numeric_dtype(column):
            # epoch seconds, same unit as build_return_series
            stamps = pd.to_datetime(column, unit="s", utc=True, errors="coerce")
        else:
            stamps = pd.to_datetime(column, utc=True, errors="coerce")
    elif isinstance(df.index, pd.DatetimeIndex):
        stamps = pd.Series(
            df.index.tz_localize("UTC") if df.index.tz is None
            else df.index.tz_convert("UTC"),
            index=df.index,
        )
    else:
        raise ValueError("DataFrame needs a 'timestamp' column or a DatetimeIndex")

    rows = [
        RawBar(
            timestamp=None if pd.isna(ts) else ts.to_pydatetime(),
            open=None if pd.isna(o) else float(o),
            close=None if pd.isna(c) else float(c),
        )
        for ts, o, c in zip(stamps, df["open"], df["close"])
    ]
    return build_return_series(rows)


def bars_to_frame(bars: list[WeeklyBar]) -> pd.DataFrame:
    """Export bars as a DataFrame, one row per bar in series order."""
    if not bars:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    records = [
        {
            "timestamp": b.timestamp,
            "week_number": b.week_number,
            "open": b.open,
            "close": b.close,
            "weekly_return": b.weekly_return,
        }
        for b in bars
    ]
    return pd.DataFrame(records, columns=FRAME_COLUMNS)
