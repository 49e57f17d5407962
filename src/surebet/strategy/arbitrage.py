"""Two-provider surebet (arbitrage) staking engine.

A surebet exists when 1/odd1 + 1/odd2 < 1.0 for a pair of opposing
selections quoted by two different providers. Splitting the stake as

    stake_i = total_stake * (1/odd_i) / (1/odd1 + 1/odd2)

pays the same amount whichever outcome wins, so
profit = payout - total_stake is guaranteed.
"""

from __future__ import annotations

import logging
from typing import Optional

from surebet.config import ONE_WAY_MODE
from surebet.models.combination import ArbitrageResult, ComboSpec, EvaluatedCombination
from surebet.models.odds import ProviderOdds, StakeInput, is_valid_odds
from surebet.strategy.ranking import pick_best

logger = logging.getLogger(__name__)

# 1 Way: 두 북메이커가 같은 라인을 제시 → A1 + B1 하나뿐
ONE_WAY_COMBOS: tuple[ComboSpec, ...] = (ComboSpec(1, 1),)

# 반대 결과 마켓: 교차 헤지 A1 + B2, A2 + B1
OPPOSITE_COMBOS: tuple[ComboSpec, ...] = (ComboSpec(1, 2), ComboSpec(2, 1))


def combos_for_mode(market_mode: str) -> tuple[ComboSpec, ...]:
    """Candidate pairings for a market mode, in output order."""
    if market_mode == ONE_WAY_MODE:
        return ONE_WAY_COMBOS
    return OPPOSITE_COMBOS


def evaluate_combination(
    spec: ComboSpec,
    odd1: Optional[float],
    odd2: Optional[float],
    total_stake: float,
) -> Optional[EvaluatedCombination]:
    """
    단일 조합 평가.

    Args:
        spec: 조합 식별자 (A/B 옵션 인덱스)
        odd1: 북메이커 A 배당
        odd2: 북메이커 B 배당
        total_stake: 총 스테이크

    Returns:
        EvaluatedCombination, or None if either quote is missing or <= 1
    """
    if not is_valid_odds(odd1) or not is_valid_odds(odd2):
        logger.debug("Dropping %s: invalid odds (%r, %r)", spec.id, odd1, odd2)
        return None

    inv1 = 1.0 / odd1
    inv2 = 1.0 / odd2
    arb_pct = inv1 + inv2
    profitable = arb_pct < 1.0

    combo = EvaluatedCombination(
        id=spec.id,
        selection=spec.label,
        odd1=odd1,
        odd2=odd2,
        arbitrage_percentage=arb_pct,
        profitable=profitable,
    )

    if profitable and total_stake > 0:
        combo.stake1 = total_stake * inv1 / arb_pct
        combo.stake2 = total_stake * inv2 / arb_pct
        combo.ret1 = combo.stake1 * odd1
        combo.ret2 = combo.stake2 * odd2
        combo.profit = min(combo.ret1, combo.ret2) - total_stake
        combo.roi = combo.profit / total_stake * 100.0

    return combo


def evaluate(
    total_stake: float,
    market_mode: str,
    provider_a: ProviderOdds,
    provider_b: ProviderOdds,
) -> ArbitrageResult:
    """Evaluate every valid cross-provider combination and pick the best.

    ``combinations`` keeps enumeration order; ``best`` is the top profitable
    combination by profit (ties: lower arbitrage percentage). Profitability
    depends on odds only, so ``has_profitable`` holds even with zero stake.
    """
    combinations: list[EvaluatedCombination] = []
    for spec in combos_for_mode(market_mode):
        combo = evaluate_combination(
            spec,
            provider_a.get(spec.from_a),
            provider_b.get(spec.from_b),
            total_stake,
        )
        if combo is not None:
            combinations.append(combo)

    best = pick_best(combinations)

    logger.debug(
        "Evaluated %d combination(s) in %r mode, %d profitable, best=%s",
        len(combinations), market_mode,
        sum(1 for c in combinations if c.profitable),
        best.id if best is not None else None,
    )
    return ArbitrageResult(
        combinations=combinations,
        best=best,
        has_profitable=best is not None,
    )


def evaluate_input(stake_input: StakeInput) -> ArbitrageResult:
    """evaluate() for a StakeInput."""
    return evaluate(
        stake_input.total_stake,
        stake_input.market_mode,
        stake_input.provider_a,
        stake_input.provider_b,
    )
