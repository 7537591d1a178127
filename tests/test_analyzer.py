"""Tests for SeasonalityAnalyzer: provider fallback, statuses, views."""

import logging

import pytest

from weekseason import create_analyzer_from_env
from weekseason.analyzer import AnalysisStatus, SeasonalityAnalyzer
from weekseason.config import FilterMode, ProviderType, SeasonalityConfig
from weekseason.errors import SeasonalityError, SeasonalityErrorCode
from weekseason.providers.mock import MockProvider
from weekseason.providers.yahoo import YahooProvider

from conftest import make_series


class _FailingProvider:
    def __init__(self, error):
        self.error = error
        self.calls = 0

    def get_weekly_rows(self, symbol):
        self.calls += 1
        raise self.error


def _make_analyzer(mode=FilterMode.ALL) -> SeasonalityAnalyzer:
    config = SeasonalityConfig(providers=[ProviderType.MOCK], filter_mode=mode)
    return SeasonalityAnalyzer(config)


class TestAnalyzerRun:
    def test_run_with_mock(self):
        result = _make_analyzer().run("spy")
        assert result.ok
        assert result.symbol == "SPY"
        assert result.mode is FilterMode.ALL
        assert len(result.filtered) == len(result.bars)
        assert sum(r.count for r in result.summary_rows()) == len(result.bars)

    def test_run_after_up(self):
        result = _make_analyzer().run("SPY", "after-up")
        assert result.ok
        assert 0 < len(result.filtered) < len(result.bars)

    def test_default_mode_from_config(self):
        result = _make_analyzer(FilterMode.AFTER_DOWN).run("SPY")
        assert result.mode is FilterMode.AFTER_DOWN

    def test_blank_symbol(self):
        with pytest.raises(SeasonalityError) as exc_info:
            _make_analyzer().run("   ")
        assert exc_info.value.code == SeasonalityErrorCode.INVALID_ARGUMENT

    def test_invalid_mode(self):
        with pytest.raises(SeasonalityError) as exc_info:
            _make_analyzer().run("SPY", "sideways")
        assert exc_info.value.code == SeasonalityErrorCode.INVALID_ARGUMENT

    def test_string_mode_passed_through(self):
        result = _make_analyzer().run("SPY", " After-Down ")
        assert result.mode is FilterMode.AFTER_DOWN
        assert result.ok

    def test_views(self):
        result = _make_analyzer().run("SPY")
        detail = result.detail_table()
        summary = result.summary_table()
        assert len(detail.rows) == len(result.bars)
        assert detail.rows[0][1].text == result.bars[-1].day.isoformat()
        assert len(summary.rows) == len(result.summary)

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="weekseason"):
            _make_analyzer().run("SPY")
        assert any("Aggregated" in r.message for r in caplog.records)


class TestAnalyzerStatuses:
    def test_no_data(self):
        result = _make_analyzer().analyze([])
        assert result.status is AnalysisStatus.NO_DATA
        assert not result.ok
        assert result.summary == {}
        assert "No weekly data" in result.message

    def test_empty_after_filter(self):
        bars = make_series([0.01, 0.02, 0.03])
        result = _make_analyzer().analyze(bars, FilterMode.AFTER_DOWN, symbol="XYZ")
        assert result.status is AnalysisStatus.EMPTY_AFTER_FILTER
        assert result.bars == bars
        assert result.filtered == []
        assert "after-down" in result.message

    def test_mock_without_data(self):
        analyzer = _make_analyzer()
        analyzer.providers[0].set_rows("EMPTY", [])
        result = analyzer.run("EMPTY")
        assert result.status is AnalysisStatus.NO_DATA

    def test_results_are_fresh(self):
        analyzer = _make_analyzer()
        bars = make_series([0.01, -0.01, 0.02])
        first = analyzer.analyze(bars, "all")
        second = analyzer.analyze(bars, "after-up")
        assert first.summary is not second.summary
        assert first.filtered == bars


class TestProviderFallback:
    def test_retryable_falls_through(self):
        analyzer = _make_analyzer()
        failing = _FailingProvider(SeasonalityError("down", retryable=True))
        analyzer.providers.insert(0, failing)
        bars = analyzer.fetch("SPY")
        assert failing.calls == 1
        assert len(bars) > 0

    def test_non_retryable_raises(self):
        analyzer = _make_analyzer()
        analyzer.providers.insert(
            0,
            _FailingProvider(SeasonalityError("gone", code=SeasonalityErrorCode.NOT_FOUND)),
        )
        with pytest.raises(SeasonalityError) as exc_info:
            analyzer.fetch("SPY")
        assert exc_info.value.code == SeasonalityErrorCode.NOT_FOUND

    def test_all_fail(self):
        analyzer = _make_analyzer()
        analyzer.providers = [_FailingProvider(SeasonalityError("x", retryable=True))]
        with pytest.raises(SeasonalityError) as exc_info:
            analyzer.fetch("SPY")
        assert exc_info.value.retryable

    def test_no_providers(self):
        analyzer = SeasonalityAnalyzer(SeasonalityConfig(providers=[]))
        with pytest.raises(SeasonalityError) as exc_info:
            analyzer.fetch("SPY")
        assert exc_info.value.code == SeasonalityErrorCode.NO_DATA


class TestCreateFromEnv:
    def test_defaults(self, monkeypatch):
        for var in ("WEEKSEASON_PROVIDERS", "WEEKSEASON_FILTER", "WEEKSEASON_PROXY_URL", "WEEKSEASON_TIMEOUT"):
            monkeypatch.delenv(var, raising=False)
        analyzer = create_analyzer_from_env()
        assert isinstance(analyzer.providers[0], YahooProvider)
        assert analyzer.config.filter_mode is FilterMode.ALL
        assert analyzer.config.proxy_url is None

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("WEEKSEASON_PROVIDERS", "mock, yahoo")
        monkeypatch.setenv("WEEKSEASON_FILTER", "after-down")
        monkeypatch.setenv("WEEKSEASON_PROXY_URL", "https://proxy.example/get")
        monkeypatch.setenv("WEEKSEASON_TIMEOUT", "5")
        analyzer = create_analyzer_from_env()
        assert isinstance(analyzer.providers[0], MockProvider)
        assert isinstance(analyzer.providers[1], YahooProvider)
        assert analyzer.providers[1].proxy_url == "https://proxy.example/get"
        assert analyzer.providers[1].timeout == 5.0
        assert analyzer.config.filter_mode is FilterMode.AFTER_DOWN
