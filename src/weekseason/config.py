"""Seasonality analysis configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from weekseason.errors import SeasonalityError, SeasonalityErrorCode


class ProviderType(Enum):
    """Supported weekly data sources."""

    YAHOO = "yahoo"
    MOCK = "mock"


class FilterMode(Enum):
    """Conditioning applied to the series before aggregation."""

    ALL = "all"
    AFTER_UP = "after-up"
    AFTER_DOWN = "after-down"

    @classmethod
    def parse(cls, value: FilterMode | str) -> FilterMode:
        """Accept an enum member or its string value ("after-up", ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = [m.value for m in cls]
            raise SeasonalityError(
                f"Invalid filter mode: {value!r}. Valid: {valid}",
                code=SeasonalityErrorCode.INVALID_ARGUMENT,
            ) from None


@dataclass
class SeasonalityConfig:
    """Configuration for SeasonalityAnalyzer.

    Attributes:
        providers: Data sources ordered by priority.
        filter_mode: Default conditioning used by ``run``.
        proxy_url: Optional pass-through proxy wrapping the chart request.
            The proxy receives the target as the ``url`` query parameter
            and answers ``{"contents": "<json text>"}``.
        timeout_seconds: HTTP timeout per request.
        user_agent: User-Agent header sent to the chart endpoint.
    """

    providers: list[ProviderType] = field(
        default_factory=lambda: [ProviderType.YAHOO]
    )
    filter_mode: FilterMode = FilterMode.ALL
    proxy_url: str | None = None
    timeout_seconds: float = 30.0
    user_agent: str = "Mozilla/5.0 (compatible; weekseason/0.1)"
