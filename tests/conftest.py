"""Shared fixtures for weekseason tests."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from weekseason.models.bar import WeeklyBar
from weekseason.models.raw import RawBar
from weekseason.providers.mock import MockProvider
from weekseason.weeks import week_number


def make_bar(ret: float, week: int = 1, ts: datetime | None = None, open_: float = 100.0) -> WeeklyBar:
    """WeeklyBar with a given return; week number is not tied to ``ts``."""
    return WeeklyBar(
        timestamp=ts or datetime(2024, 1, 1, tzinfo=timezone.utc),
        open=open_,
        close=open_ * (1 + ret),
        week_number=week,
        weekly_return=ret,
    )


def make_series(returns: list[float], start: datetime | None = None) -> list[WeeklyBar]:
    """Consecutive weekly bars with the given returns, oldest first."""
    base = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
    bars = []
    for i, r in enumerate(returns):
        ts = base + timedelta(weeks=i)
        bars.append(make_bar(r, week=week_number(ts), ts=ts))
    return bars


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


@pytest.fixture
def sample_rows() -> list[RawBar]:
    """6 weekly rows starting Monday 2024-01-01, with one gap and one zero open."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    prices = [
        (100.0, 102.0),
        (102.0, 100.98),
        (None, 101.0),
        (101.0, 104.03),
        (0.0, 5.0),
        (104.0, 101.92),
    ]
    return [
        RawBar(timestamp=int((base + timedelta(weeks=i)).timestamp()), open=o, close=c)
        for i, (o, c) in enumerate(prices)
    ]
