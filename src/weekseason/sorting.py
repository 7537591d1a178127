"""Column sorting for rendered tables.

Cells are compared by the number embedded in their display text
("$10.00", "12.34%", "3") and fall back to a locale-aware string
comparison when either side does not reduce to a number ("∞", ISO dates,
labels).
"""

from __future__ import annotations

import locale
import re
from enum import Enum
from functools import cmp_to_key
from typing import Any, Sequence

from weekseason.errors import SeasonalityError, SeasonalityErrorCode
from weekseason.models.summary import SummaryRow

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")


class SortDirection(Enum):
    UNSORTED = "unsorted"
    ASCENDING = "ascending"
    DESCENDING = "descending"


def _text(cell: Any) -> str:
    text = getattr(cell, "text", cell)
    return "" if text is None else str(text)


def parse_cell_number(text: str) -> float | None:
    """Number left after stripping everything but digits, '-' and '.'.

    The whole stripped string must parse: "2024-01-07" -> "2024-01-07"
    is not a number, "-1.5%" -> -1.5 is.
    """
    stripped = _NON_NUMERIC.sub("", text)
    if not stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None


def compare_cells(a: Any, b: Any) -> int:
    """Three-way compare of two cells (strings or rendered ``Cell``s)."""
    text_a, text_b = _text(a), _text(b)
    num_a = parse_cell_number(text_a)
    num_b = parse_cell_number(text_b)
    if num_a is not None and num_b is not None:
        return (num_a > num_b) - (num_a < num_b)
    order = locale.strcoll(text_a, text_b)
    return (order > 0) - (order < 0)


def sort_rows(
    rows: Sequence[Sequence[Any]],
    column: int,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[Sequence[Any]]:
    """Stable sort of rows by one column; ``UNSORTED`` keeps the order."""
    if direction is SortDirection.UNSORTED:
        return list(rows)
    sign = -1 if direction is SortDirection.DESCENDING else 1

    def cmp(row_a: Sequence[Any], row_b: Sequence[Any]) -> int:
        return sign * compare_cells(row_a[column], row_b[column])

    return sorted(rows, key=cmp_to_key(cmp))


class TableSorter:
    """Header-click sort state for one table view.

    Clicking the active column flips its direction; clicking another
    column makes it active in ascending order and resets the rest to
    ``UNSORTED``. Every view keeps its own instance.

    Usage::

        sorter = TableSorter(table.headers, table.rows)
        sorter.click(2)   # ascending by column 2
        sorter.click(2)   # descending
        sorter.rows
    """

    def __init__(self, headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
        self.headers = tuple(headers)
        self.rows: list[Sequence[Any]] = list(rows)
        self.directions: list[SortDirection] = [SortDirection.UNSORTED] * len(self.headers)
        self.active: int | None = None

    def direction(self, column: int) -> SortDirection:
        return self.directions[column]

    def click(self, column: int) -> list[Sequence[Any]]:
        """Toggle the sort on ``column`` and return the reordered rows."""
        if not 0 <= column < len(self.headers):
            raise SeasonalityError(
                f"Column {column} out of range for {len(self.headers)} columns",
                code=SeasonalityErrorCode.INVALID_ARGUMENT,
            )

        if self.directions[column] is SortDirection.ASCENDING:
            new = SortDirection.DESCENDING
        else:
            new = SortDirection.ASCENDING

        self.directions = [SortDirection.UNSORTED] * len(self.headers)
        self.directions[column] = new
        self.active = column
        self.rows = sort_rows(self.rows, column, new)
        return self.rows


def sort_summary_rows(
    rows: Sequence[SummaryRow],
    field: str,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[SummaryRow]:
    """Sort typed summary rows by attribute, without re-parsing text."""
    if field not in SummaryRow.__dataclass_fields__:
        raise SeasonalityError(
            f"Unknown summary field: {field}",
            code=SeasonalityErrorCode.INVALID_ARGUMENT,
        )
    if direction is SortDirection.UNSORTED:
        return list(rows)
    return sorted(
        rows,
        key=lambda r: getattr(r, field),
        reverse=direction is SortDirection.DESCENDING,
    )
