"""weekseason: weekly seasonality statistics for a single instrument.

Groups a weekly price history by simple week-of-year (1..53) and reports
win rate, average return, volatility, profit factor, Sharpe ratio and
extremes per week, optionally conditioned on the previous week's
direction.

Quick start::

    from weekseason import create_analyzer_from_env
    analyzer = create_analyzer_from_env()
    result = analyzer.run("SPY", "after-up")
"""

from __future__ import annotations

import os

from weekseason.aggregate import aggregate, ordered_rows, summarize_returns, summary_to_frame
from weekseason.analyzer import AnalysisResult, AnalysisStatus, SeasonalityAnalyzer
from weekseason.config import FilterMode, ProviderType, SeasonalityConfig
from weekseason.errors import SeasonalityError, SeasonalityErrorCode
from weekseason.filters import apply_filter
from weekseason.models.bar import WeeklyBar
from weekseason.models.raw import RawBar
from weekseason.models.summary import SummaryRow
from weekseason.render import Cell, RenderedTable, detail_table, summary_table
from weekseason.series import bars_to_frame, build_return_series, series_from_frame
from weekseason.sorting import SortDirection, TableSorter, compare_cells, sort_rows, sort_summary_rows
from weekseason.weeks import week_number

__version__ = "0.1.0"

__all__ = [
    # Analyzer
    "SeasonalityAnalyzer",
    "AnalysisResult",
    "AnalysisStatus",
    "create_analyzer_from_env",
    # Config
    "SeasonalityConfig",
    "FilterMode",
    "ProviderType",
    # Errors
    "SeasonalityError",
    "SeasonalityErrorCode",
    # Models
    "RawBar",
    "WeeklyBar",
    "SummaryRow",
    # Engine
    "week_number",
    "build_return_series",
    "series_from_frame",
    "bars_to_frame",
    "apply_filter",
    "aggregate",
    "summarize_returns",
    "ordered_rows",
    "summary_to_frame",
    # Rendering and sorting
    "Cell",
    "RenderedTable",
    "detail_table",
    "summary_table",
    "SortDirection",
    "TableSorter",
    "compare_cells",
    "sort_rows",
    "sort_summary_rows",
]


def create_analyzer_from_env() -> SeasonalityAnalyzer:
    """Zero-config factory. Reads provider list and options from env vars.

    Environment variables:
        WEEKSEASON_PROVIDERS: Comma-separated provider list (default: "yahoo").
        WEEKSEASON_FILTER: Default filter mode, one of "all", "after-up",
            "after-down" (default: "all").
        WEEKSEASON_PROXY_URL: Optional pass-through proxy for chart requests.
        WEEKSEASON_TIMEOUT: HTTP timeout in seconds (default: 30).
    """
    provider_str = os.getenv("WEEKSEASON_PROVIDERS", "yahoo")
    provider_types = [
        ProviderType(name.strip().lower())
        for name in provider_str.split(",")
        if name.strip()
    ]

    config = SeasonalityConfig(
        providers=provider_types,
        filter_mode=FilterMode.parse(os.getenv("WEEKSEASON_FILTER", "all")),
        proxy_url=os.getenv("WEEKSEASON_PROXY_URL") or None,
        timeout_seconds=float(os.getenv("WEEKSEASON_TIMEOUT", "30")),
    )

    return SeasonalityAnalyzer(config)
