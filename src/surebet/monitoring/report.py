"""Plain-text rendering of an ArbitrageResult.

Empty results (no valid odds) and valid-but-unprofitable results get
separate messages; callers must never treat best=None as an error.
"""

from __future__ import annotations

from typing import Optional

from surebet.config import DEFAULT_CURRENCY_SYMBOL
from surebet.models.combination import ArbitrageResult, EvaluatedCombination

NO_COMBINATIONS_MESSAGE = "Enter valid odds to see combinations."
NO_PROFITABLE_MESSAGE = "No profitable arbitrage opportunity found."
NO_STAKE_MESSAGE = "Enter a total stake to size the surebet."


def format_currency(value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """금액 포맷: 1234.567 → "₱1,234.57", -1 → "-₱1.00"."""
    sign = "-" if value < 0 and round(abs(value), 2) > 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def combination_status(combo: EvaluatedCombination, best_id: Optional[str]) -> str:
    if combo.profitable:
        return "BEST SUREBET" if combo.id == best_id else "PROFITABLE"
    if combo.break_even:
        return "BREAK-EVEN"
    return "NOT PROFITABLE"


def format_combination_line(
    combo: EvaluatedCombination,
    best_id: Optional[str] = None,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    """단일 조합을 한 줄 문자열로 포맷."""
    line = (
        f"  [{combo.id}] {combo.selection:<34} "
        f"| odds: {combo.odd1:.2f} & {combo.odd2:.2f} "
        f"| arb %: {combo.arbitrage_percentage:.4f} "
        f"| {combination_status(combo, best_id)}"
    )
    if combo.profitable and combo.stake1 > 0:
        line += (
            f" | stakes: {format_currency(combo.stake1, symbol)}"
            f" / {format_currency(combo.stake2, symbol)}"
            f" | payout: {format_currency(combo.guaranteed_payout, symbol)}"
            f" | profit: {format_currency(combo.profit, symbol)}"
            f" | ROI: {combo.roi:.2f}%"
        )
    return line


def format_best_block(
    best: EvaluatedCombination,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> list[str]:
    """Best combination as a multi-line block with the stake working."""
    return [
        f"Best combination: {best.selection}",
        f"  Arbitrage %: {best.arbitrage_percentage:.4f}",
        f"  Stake 1: {format_currency(best.stake1, symbol)} "
        f"({best.stake1:.2f} × {best.odd1:.2f} = {format_currency(best.ret1, symbol)})",
        f"  Stake 2: {format_currency(best.stake2, symbol)} "
        f"({best.stake2:.2f} × {best.odd2:.2f} = {format_currency(best.ret2, symbol)})",
        f"  Guaranteed payout: {format_currency(best.guaranteed_payout, symbol)}",
        f"  Profit: {format_currency(best.profit, symbol)} (ROI {best.roi:.2f}%)",
    ]


def render_result(
    result: ArbitrageResult,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    """결과 전체를 출력용 텍스트로 렌더링."""
    if not result.combinations:
        return NO_COMBINATIONS_MESSAGE

    best_id = result.best.id if result.best is not None else None
    lines = ["Combinations:"]
    lines.extend(
        format_combination_line(c, best_id, symbol) for c in result.combinations
    )
    lines.append("")

    if not result.has_profitable:
        lines.append(NO_PROFITABLE_MESSAGE)
        if any(c.break_even for c in result.combinations):
            lines.append("Break-even only: total payout equals stake, no profit.")
        return "\n".join(lines)

    if result.best.stake1 > 0:
        lines.extend(format_best_block(result.best, symbol))
    else:
        lines.append(f"Best combination: {result.best.selection}")
        lines.append(NO_STAKE_MESSAGE)
    return "\n".join(lines)
