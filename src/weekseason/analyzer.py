"""SeasonalityAnalyzer: fetch, filter, aggregate and render one run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from weekseason.aggregate import aggregate, ordered_rows
from weekseason.config import FilterMode, ProviderType, SeasonalityConfig
from weekseason.errors import SeasonalityError, SeasonalityErrorCode
from weekseason.filters import apply_filter
from weekseason.models.bar import WeeklyBar
from weekseason.models.summary import SummaryRow
from weekseason.providers import create_provider
from weekseason.providers.base import BaseWeeklyProvider
from weekseason.render import RenderedTable, detail_table, summary_table
from weekseason.series import build_return_series

logger = logging.getLogger(__name__)


class AnalysisStatus(Enum):
    """Outcome of a run. Empty outcomes are informational, not errors."""

    OK = "ok"
    NO_DATA = "no_data"
    EMPTY_AFTER_FILTER = "empty_after_filter"


@dataclass
class AnalysisResult:
    """Everything one analysis run produced.

    Attributes:
        symbol: Ticker the data belongs to ("" for caller-supplied data).
        mode: Filter mode applied before aggregation.
        status: OK, NO_DATA or EMPTY_AFTER_FILTER.
        message: Human-readable note for the non-OK statuses.
        bars: Full chronological series (unfiltered).
        filtered: Bars that went into the aggregation.
        summary: Week number -> statistics, ascending week order.
    """

    symbol: str
    mode: FilterMode
    status: AnalysisStatus
    message: str = ""
    bars: list[WeeklyBar] = field(default_factory=list)
    filtered: list[WeeklyBar] = field(default_factory=list)
    summary: dict[int, SummaryRow] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is AnalysisStatus.OK

    def summary_rows(self) -> list[SummaryRow]:
        return list(ordered_rows(self.summary))

    def detail_table(self) -> RenderedTable:
        """Detail view of the full series, newest first."""
        return detail_table(self.bars)

    def summary_table(self) -> RenderedTable:
        return summary_table(self.summary)


class SeasonalityAnalyzer:
    """Central orchestrator: provider -> series -> filter -> aggregate.

    Every call takes the dataset and filter mode explicitly and returns a
    fresh result; nothing from a previous run is kept.

    Usage::

        from weekseason import create_analyzer_from_env
        analyzer = create_analyzer_from_env()
        result = analyzer.run("SPY", "after-down")
        for row in result.summary_rows():
            print(row.week_number, row.win_rate)
    """

    def __init__(self, config: SeasonalityConfig | None = None) -> None:
        self.config = config or SeasonalityConfig()

        self.providers: list[BaseWeeklyProvider] = []
        for pt in self.config.providers:
            kwargs: dict[str, Any] = {}
            if pt is ProviderType.YAHOO:
                kwargs["proxy_url"] = self.config.proxy_url
                kwargs["timeout_seconds"] = self.config.timeout_seconds
                kwargs["user_agent"] = self.config.user_agent
            self.providers.append(create_provider(pt, **kwargs))

    # ----------------------------------------------------------------- fetch

    def fetch(self, symbol: str) -> list[WeeklyBar]:
        """Fetch a symbol's weekly history and build its return series.

        Tries each provider in order. Retryable errors fall through to
        the next provider; non-retryable errors are raised immediately.
        """
        last_error: SeasonalityError | None = None
        for provider in self.providers:
            try:
                rows = provider.get_weekly_rows(symbol)
                bars = build_return_series(rows)
                logger.info(
                    "Fetched %d weekly rows for %s (%d usable) from %s",
                    len(rows), symbol, len(bars), type(provider).__name__,
                )
                return bars
            except SeasonalityError as e:
                if not e.retryable:
                    raise
                logger.warning("%s failed for %s: %s", type(provider).__name__, symbol, e)
                last_error = e
                continue

        raise last_error or SeasonalityError(
            "No providers configured",
            code=SeasonalityErrorCode.NO_DATA,
        )

    # --------------------------------------------------------------- analyze

    def analyze(
        self,
        bars: list[WeeklyBar],
        mode: FilterMode | str | None = None,
        symbol: str = "",
    ) -> AnalysisResult:
        """Filter and aggregate an already-built series."""
        mode = FilterMode.parse(mode if mode is not None else self.config.filter_mode)
        label = symbol or "input"

        if not bars:
            return AnalysisResult(
                symbol=symbol,
                mode=mode,
                status=AnalysisStatus.NO_DATA,
                message=f"No weekly data found for {label}.",
            )

        filtered = apply_filter(bars, mode)
        if not filtered:
            return AnalysisResult(
                symbol=symbol,
                mode=mode,
                status=AnalysisStatus.EMPTY_AFTER_FILTER,
                message=f"No weeks in {label} match the '{mode.value}' filter.",
                bars=list(bars),
            )

        summary = aggregate(filtered)
        logger.info(
            "Aggregated %d of %d bars for %s into %d weeks (%s)",
            len(filtered), len(bars), label, len(summary), mode.value,
        )
        return AnalysisResult(
            symbol=symbol,
            mode=mode,
            status=AnalysisStatus.OK,
            bars=list(bars),
            filtered=filtered,
            summary=summary,
        )

    def run(self, symbol: str, mode: FilterMode | str | None = None) -> AnalysisResult:
        """Fetch ``symbol`` and analyze it in one call."""
        symbol = symbol.strip().upper()
        if not symbol:
            raise SeasonalityError(
                "Please enter a stock ticker.",
                code=SeasonalityErrorCode.INVALID_ARGUMENT,
            )
        return self.analyze(self.fetch(symbol), mode, symbol=symbol)
