"""Command-line surebet calculator: parse → evaluate → render.

Usage:
    python -m surebet --stake 1000 --a1 2.10 --a2 1.80 --b1 1.95 --b2 2.05
    python -m surebet --mode "1 Way" --stake 500 --a1 2.05 --b1 2.02
    python -m surebet ... --json
"""

from __future__ import annotations

import argparse
import json
import logging

from surebet.config import DEFAULT_CURRENCY_SYMBOL, MARKET_MODES, CalculatorConfig
from surebet.form.state import CalculatorForm
from surebet.models.combination import ArbitrageResult
from surebet.monitoring.report import render_result
from surebet.strategy.arbitrage import evaluate_input

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Banner
# ---------------------------------------------------------------------------

BANNER = r"""
╔══════════════════════════════════════════════╗
║   surebet · Arbitrage Betting Calculator     ║
║   Two Bookmakers · Equal-Payout Staking       ║
╚══════════════════════════════════════════════╝
"""

# ---------------------------------------------------------------------------
# Core functions
# ---------------------------------------------------------------------------


def build_form(args: argparse.Namespace, config: CalculatorConfig) -> CalculatorForm:
    """CLI 인자로 입력 폼 구성."""
    form = CalculatorForm(market_mode=config.default_market_mode)
    if args.mode is not None:
        form.set_market_mode(args.mode)
    form.set_total_stake(args.stake)
    form.set_book_a_option1(args.a1)
    form.set_book_a_option2(args.a2)
    form.set_book_b_option1(args.b1)
    form.set_book_b_option2(args.b2)
    return form


def run(args: argparse.Namespace, config: CalculatorConfig) -> ArbitrageResult:
    """단일 평가: form → StakeInput → evaluate."""
    form = build_form(args, config)
    stake_input = form.to_stake_input()
    logger.info(
        "Evaluating %s market, stake=%.2f", stake_input.market_mode, stake_input.total_stake
    )
    return evaluate_input(stake_input)


def format_output(
    result: ArbitrageResult,
    as_json: bool = False,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    if as_json:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    return render_result(result, symbol=symbol)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """커맨드라인 인자 파싱."""
    parser = argparse.ArgumentParser(
        prog="surebet",
        description="Two-bookmaker arbitrage (surebet) stake calculator",
    )
    parser.add_argument(
        "--mode", type=str, default=None,
        choices=MARKET_MODES,
        help="Market type (default: SUREBET_MARKET_MODE or Win/Lose)",
    )
    parser.add_argument(
        "--stake", type=str, default="0",
        help="Total stake to split across both bookmakers (default: 0)",
    )
    parser.add_argument("--a1", type=str, default="", help="Bookmaker A option 1 odds")
    parser.add_argument("--a2", type=str, default="", help="Bookmaker A option 2 odds")
    parser.add_argument("--b1", type=str, default="", help="Bookmaker B option 1 odds")
    parser.add_argument("--b2", type=str, default="", help="Bookmaker B option 2 odds")
    parser.add_argument(
        "--json", action="store_true", default=False,
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", default=False,
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def cli_main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = parse_args(argv)
    config = CalculatorConfig.from_env()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    result = run(args, config)
    if not args.json:
        print(BANNER)
    print(format_output(result, as_json=args.json, symbol=config.currency_symbol))


if __name__ == "__main__":
    cli_main()
