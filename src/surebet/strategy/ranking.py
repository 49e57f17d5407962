"""Combination ranking and best selection."""

from __future__ import annotations

from typing import Optional

from surebet.models.combination import EvaluatedCombination


def rank_combinations(
    combinations: list[EvaluatedCombination],
) -> list[EvaluatedCombination]:
    """수익 조합만 profit 내림차순, arbitrage % 오름차순으로 정렬.

    Returns new list (원본 불변).
    """
    return sorted(
        (c for c in combinations if c.profitable),
        key=lambda c: (-c.profit, c.arbitrage_percentage),
    )


def pick_best(
    combinations: list[EvaluatedCombination],
) -> Optional[EvaluatedCombination]:
    """최고 수익 조합. 수익 조합이 없으면 None."""
    ranked = rank_combinations(combinations)
    return ranked[0] if ranked else None
