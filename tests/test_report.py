"""Tests for result rendering and currency formatting."""

from __future__ import annotations

from surebet.models.odds import ProviderOdds, StakeInput
from surebet.monitoring.report import (
    NO_COMBINATIONS_MESSAGE,
    NO_PROFITABLE_MESSAGE,
    NO_STAKE_MESSAGE,
    format_combination_line,
    format_currency,
    render_result,
)
from surebet.strategy.arbitrage import evaluate_input


class TestFormatCurrency:
    def test_thousands_and_cents(self):
        assert format_currency(1234.567) == "₱1,234.57"

    def test_zero(self):
        assert format_currency(0.0) == "₱0.00"

    def test_negative(self):
        assert format_currency(-1.0) == "-₱1.00"

    def test_negative_rounding_to_zero_has_no_sign(self):
        assert format_currency(-0.001) == "₱0.00"

    def test_custom_symbol(self):
        assert format_currency(37.349, symbol="$") == "$37.35"


class TestFormatCombinationLine:
    def test_best_line_has_money(self, sample_input):
        result = evaluate_input(sample_input)
        line = format_combination_line(result.combinations[0], best_id=result.best.id)
        assert "[A1_B2]" in line
        assert "BEST SUREBET" in line
        assert "odds: 2.10 & 2.05" in line
        assert "arb %: 0.9640" in line
        assert "profit: ₱37.35" in line
        assert "ROI: 3.73%" in line

    def test_unprofitable_line(self, sample_input):
        result = evaluate_input(sample_input)
        line = format_combination_line(result.combinations[1], best_id=result.best.id)
        assert "NOT PROFITABLE" in line
        assert "profit:" not in line

    def test_profitable_but_not_best(self, sample_input):
        result = evaluate_input(sample_input)
        line = format_combination_line(result.combinations[0], best_id=None)
        assert "| PROFITABLE" in line

    def test_break_even_status(self, break_even_input):
        combo = evaluate_input(break_even_input).combinations[0]
        assert "BREAK-EVEN" in format_combination_line(combo)


class TestRenderResult:
    def test_no_combinations(self):
        result = evaluate_input(StakeInput(total_stake=100.0))
        assert render_result(result) == NO_COMBINATIONS_MESSAGE

    def test_no_profitable(self, break_even_input):
        text = render_result(evaluate_input(break_even_input))
        assert NO_PROFITABLE_MESSAGE in text
        assert NO_COMBINATIONS_MESSAGE not in text
        assert "Break-even only" in text

    def test_unprofitable_not_break_even(self):
        inp = StakeInput(
            total_stake=100.0,
            market_mode="1 Way",
            provider_a=ProviderOdds(option1=1.5),
            provider_b=ProviderOdds(option1=1.5),
        )
        text = render_result(evaluate_input(inp))
        assert NO_PROFITABLE_MESSAGE in text
        assert "Break-even only" not in text

    def test_best_block(self, sample_input):
        text = render_result(evaluate_input(sample_input))
        assert "Best combination: Book A Option 1 + Book B Option 2" in text
        assert "Stake 1: ₱493.98" in text
        assert "Stake 2: ₱506.02" in text
        assert "Guaranteed payout: ₱1,037.35" in text

    def test_zero_stake_prompts_for_stake(self):
        inp = StakeInput(
            total_stake=0.0,
            provider_a=ProviderOdds(option1=2.10, option2=1.80),
            provider_b=ProviderOdds(option1=1.95, option2=2.05),
        )
        text = render_result(evaluate_input(inp))
        assert NO_STAKE_MESSAGE in text
        assert NO_PROFITABLE_MESSAGE not in text
