"""Text rendering of the detail and summary views.

Cells are plain display strings plus an optional tone ("positive" /
"negative") the presentation layer maps to colours.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from weekseason.aggregate import ordered_rows
from weekseason.models.bar import WeeklyBar
from weekseason.models.summary import SummaryRow

POSITIVE = "positive"
NEGATIVE = "negative"
INFINITY = "∞"

DETAIL_HEADERS = ("Week", "Date", "Open", "Close", "Weekly Return")
SUMMARY_HEADERS = (
    "Week",
    "Count",
    "Win Rate",
    "Avg Return",
    "Profit Factor",
    "Sharpe Ratio",
    "Std Dev",
    "Max Return",
    "Min Return",
)


@dataclass(frozen=True)
class Cell:
    """One rendered table cell."""

    text: str
    tone: str | None = None

    def __str__(self) -> str:
        return self.text


@dataclass
class RenderedTable:
    """Headers and rows of display cells for one view."""

    headers: tuple[str, ...]
    rows: list[list[Cell]] = field(default_factory=list)

    def texts(self) -> list[list[str]]:
        return [[c.text for c in row] for row in self.rows]

    def column(self, index: int) -> list[str]:
        return [row[index].text for row in self.rows]


def format_currency(value: float) -> str:
    return f"${value:.2f}"


def format_percent(value: float, decimals: int = 2) -> str:
    """Format a fractional return as a percentage (0.0123 -> "1.23%")."""
    return f"{value * 100:.{decimals}f}%"


def format_ratio(value: float) -> str:
    if math.isinf(value):
        return INFINITY
    return f"{value:.2f}"


def sign_tone(value: float) -> str:
    return POSITIVE if value >= 0 else NEGATIVE


def detail_table(bars: list[WeeklyBar]) -> RenderedTable:
    """Render one row per bar, newest first."""
    table = RenderedTable(headers=DETAIL_HEADERS)
    for b in reversed(bars):
        table.rows.append([
            Cell(str(b.week_number)),
            Cell(b.day.isoformat()),
            Cell(format_currency(b.open)),
            Cell(format_currency(b.close)),
            Cell(format_percent(b.weekly_return), sign_tone(b.weekly_return)),
        ])
    return table


def summary_row_cells(row: SummaryRow) -> list[Cell]:
    return [
        Cell(str(row.week_number)),
        Cell(str(row.count)),
        Cell(format_percent(row.win_rate, decimals=1)),
        Cell(format_percent(row.avg_return), sign_tone(row.avg_return)),
        Cell(format_ratio(row.profit_factor) if row.has_losses else INFINITY),
        Cell(format_ratio(row.sharpe_ratio)),
        Cell(format_percent(row.std_dev)),
        Cell(format_percent(row.max_return), POSITIVE),
        Cell(format_percent(row.min_return), NEGATIVE),
    ]


def summary_table(summary: dict[int, SummaryRow]) -> RenderedTable:
    """Render populated weeks in ascending order."""
    return RenderedTable(
        headers=SUMMARY_HEADERS,
        rows=[summary_row_cells(r) for r in ordered_rows(summary)],
    )
