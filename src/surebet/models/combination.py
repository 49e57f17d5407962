"""ComboSpec, EvaluatedCombination and ArbitrageResult data models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

BREAK_EVEN_TOLERANCE = 1e-12


@dataclass(frozen=True)
class ComboSpec:
    """Cross-provider pairing: one outcome from book A, one from book B.

    Identity is the pair of option indices; id and label derive from it.
    """

    a_index: int
    b_index: int

    @property
    def id(self) -> str:
        return f"A{self.a_index}_B{self.b_index}"

    @property
    def from_a(self) -> str:
        return f"option{self.a_index}"

    @property
    def from_b(self) -> str:
        return f"option{self.b_index}"

    @property
    def label(self) -> str:
        """e.g. "Book A Option 1 + Book B Option 2"."""
        return f"Book A Option {self.a_index} + Book B Option {self.b_index}"


@dataclass
class EvaluatedCombination:
    """평가된 조합. 수익 불가 또는 스테이크 0이면 금액 필드는 모두 0."""

    id: str
    selection: str
    odd1: float
    odd2: float
    arbitrage_percentage: float  # 1/odd1 + 1/odd2
    profitable: bool             # arbitrage_percentage < 1 (strict)
    stake1: float = 0.0
    stake2: float = 0.0
    ret1: float = 0.0            # stake1 * odd1
    ret2: float = 0.0            # stake2 * odd2
    profit: float = 0.0          # min(ret1, ret2) - total_stake
    roi: float = 0.0             # profit / total_stake * 100

    @property
    def guaranteed_payout(self) -> float:
        """어느 결과가 나와도 받는 최소 지급액."""
        return min(self.ret1, self.ret2)

    @property
    def break_even(self) -> bool:
        """Not profitable, with arbitrage percentage sitting on 1."""
        return not self.profitable and math.isclose(
            self.arbitrage_percentage, 1.0, rel_tol=0.0, abs_tol=BREAK_EVEN_TOLERANCE
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "selection": self.selection,
            "odds": {"odd1": self.odd1, "odd2": self.odd2},
            "arbitrage_percentage": self.arbitrage_percentage,
            "profitable": self.profitable,
            "break_even": self.break_even,
            "stake1": self.stake1,
            "stake2": self.stake2,
            "returns": {"ret1": self.ret1, "ret2": self.ret2},
            "profit": self.profit,
            "roi": self.roi,
        }


@dataclass
class ArbitrageResult:
    """한 번의 평가 결과."""

    combinations: list[EvaluatedCombination] = field(default_factory=list)
    best: Optional[EvaluatedCombination] = None
    has_profitable: bool = False

    def to_dict(self) -> dict:
        return {
            "combinations": [c.to_dict() for c in self.combinations],
            "best": self.best.to_dict() if self.best is not None else None,
            "has_profitable": self.has_profitable,
        }
