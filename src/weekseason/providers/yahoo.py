"""Yahoo Finance weekly chart provider.

Fetches the complete weekly history of a symbol from the public v8 chart
endpoint, optionally through a pass-through proxy that wraps the upstream
body as ``{"contents": "<json text>"}``.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import requests

from weekseason.errors import SeasonalityError, SeasonalityErrorCode
from weekseason.models.raw import RawBar
from weekseason.providers.base import BaseWeeklyProvider

logger = logging.getLogger(__name__)

CHART_URL = "https://query2.finance.yahoo.com/v8/finance/chart/{symbol}"


class YahooProvider(BaseWeeklyProvider):
    """Fetch weekly bars from Yahoo Finance.

    Null opens and closes are kept in the returned rows; the series
    builder drops them.
    """

    def __init__(
        self,
        proxy_url: str | None = None,
        timeout_seconds: float = 30.0,
        user_agent: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.proxy_url = proxy_url
        self.timeout = timeout_seconds
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers.update({"User-Agent": user_agent})

    # ------------------------------------------------------------------ rows

    def get_weekly_rows(self, symbol: str) -> list[RawBar]:
        symbol = symbol.strip().upper()
        if not symbol:
            raise SeasonalityError(
                "Ticker symbol required",
                code=SeasonalityErrorCode.INVALID_ARGUMENT,
            )

        try:
            chart = self._fetch_chart(symbol)
            return self._chart_to_rows(symbol, chart)
        except SeasonalityError:
            raise
        except requests.Timeout as exc:
            raise SeasonalityError(
                f"Yahoo request timed out for {symbol}",
                code=SeasonalityErrorCode.TIMEOUT,
                retryable=True,
            ) from exc
        except Exception as exc:
            raise SeasonalityError(
                f"Yahoo get_weekly_rows failed: {exc}",
                code=SeasonalityErrorCode.PROVIDER_ERROR,
                retryable=True,
            ) from exc

    def chart_params(self) -> dict[str, Any]:
        return {
            "period1": 0,
            "period2": int(time.time()),
            "interval": "1wk",
            "events": "history",
        }

    def _fetch_chart(self, symbol: str) -> dict[str, Any]:
        url = CHART_URL.format(symbol=symbol)
        params = self.chart_params()

        if self.proxy_url:
            target = requests.Request("GET", url, params=params).prepare().url
            logger.debug("GET %s via proxy %s", target, self.proxy_url)
            resp = self.session.get(
                self.proxy_url, params={"url": target}, timeout=self.timeout,
            )
            self._check_response(resp, symbol)
            wrapper = resp.json()
            contents = wrapper.get("contents")
            if not contents:
                raise SeasonalityError(
                    f"Proxy returned no contents for {symbol}",
                    code=SeasonalityErrorCode.PROVIDER_ERROR,
                    retryable=True,
                )
            return json.loads(contents)

        logger.debug("GET %s", url)
        resp = self.session.get(url, params=params, timeout=self.timeout)
        self._check_response(resp, symbol)
        return resp.json()

    @staticmethod
    def _chart_to_rows(symbol: str, data: dict[str, Any]) -> list[RawBar]:
        chart = data.get("chart") if isinstance(data, dict) else None
        if not isinstance(chart, dict):
            chart = {}
        error = chart.get("error")
        if error:
            if isinstance(error, dict):
                description = error.get("description") or error.get("code") or error
            else:
                description = error
            raise SeasonalityError(
                f"Yahoo Finance error for {symbol}: {description}",
                code=SeasonalityErrorCode.NOT_FOUND,
            )

        results = chart.get("result") or []
        if not results or not isinstance(results[0], dict):
            return []
        result = results[0]

        timestamps = result.get("timestamp")
        if not timestamps:
            return []

        indicators = result.get("indicators")
        quote_list = indicators.get("quote") if isinstance(indicators, dict) else None
        quotes = quote_list[0] if quote_list and isinstance(quote_list[0], dict) else {}
        opens = quotes.get("open") or []
        closes = quotes.get("close") or []

        rows: list[RawBar] = []
        for i, ts in enumerate(timestamps):
            rows.append(RawBar(
                timestamp=ts,
                open=opens[i] if i < len(opens) else None,
                close=closes[i] if i < len(closes) else None,
            ))
        return rows

    @staticmethod
    def _check_response(resp: Any, symbol: str) -> None:
        if resp.status_code == 429:
            raise SeasonalityError(
                "Yahoo Finance rate limited",
                code=SeasonalityErrorCode.RATE_LIMITED,
                retryable=True,
            )
        if resp.status_code == 404:
            raise SeasonalityError(
                f"Symbol {symbol} not found on Yahoo Finance",
                code=SeasonalityErrorCode.NOT_FOUND,
            )
        resp.raise_for_status()
