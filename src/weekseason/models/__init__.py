"""Seasonality data models."""

from weekseason.models.bar import WeeklyBar
from weekseason.models.raw import RawBar
from weekseason.models.summary import SummaryRow

__all__ = [
    "RawBar",
    "WeeklyBar",
    "SummaryRow",
]
