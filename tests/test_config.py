"""Tests for configuration (CalculatorConfig, MARKET_MODES)."""

from __future__ import annotations

from surebet.config import (
    DEFAULT_MARKET_MODE,
    MARKET_MODES,
    ONE_WAY_MODE,
    CalculatorConfig,
)


class TestMarketModes:
    def test_labels_present(self):
        for mode in ("Win/Lose", "Over/Under", "Odd/Even", "Handicap", "1 Way"):
            assert mode in MARKET_MODES

    def test_one_way_label(self):
        assert ONE_WAY_MODE == "1 Way"

    def test_default_is_first(self):
        assert DEFAULT_MARKET_MODE == "Win/Lose"


class TestCalculatorConfig:
    def test_default_config(self):
        config = CalculatorConfig()
        assert config.currency_symbol == "₱"
        assert config.default_market_mode == "Win/Lose"
        assert config.log_level == "INFO"

    def test_unknown_mode_falls_back(self):
        config = CalculatorConfig(default_market_mode="Corners")
        assert config.default_market_mode == DEFAULT_MARKET_MODE

    def test_log_level_upper(self):
        assert CalculatorConfig(log_level="debug").log_level == "DEBUG"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SUREBET_CURRENCY_SYMBOL", "$")
        monkeypatch.setenv("SUREBET_MARKET_MODE", "1 Way")
        monkeypatch.setenv("SUREBET_LOG_LEVEL", "warning")
        config = CalculatorConfig.from_env()
        assert config.currency_symbol == "$"
        assert config.default_market_mode == "1 Way"
        assert config.log_level == "WARNING"

    def test_from_env_defaults(self, monkeypatch):
        for name in ("SUREBET_CURRENCY_SYMBOL", "SUREBET_MARKET_MODE", "SUREBET_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        config = CalculatorConfig.from_env()
        assert config.currency_symbol == "₱"
        assert config.default_market_mode == "Win/Lose"
