"""Odds input models: ProviderOdds and StakeInput."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from surebet.config import DEFAULT_MARKET_MODE

OPTION_NAMES: tuple[str, ...] = ("option1", "option2")


def is_valid_odds(odds: Optional[float]) -> bool:
    """소수 배당 유효성. None, 무한대, 1 이하는 무효 (지급액이 스테이크를 넘지 못함)."""
    return odds is not None and math.isfinite(odds) and odds > 1.0


@dataclass(frozen=True)
class ProviderOdds:
    """한 북메이커의 두 선택지 배당. None = 아직 입력되지 않음 (0과 구분)."""

    option1: Optional[float] = None
    option2: Optional[float] = None

    def get(self, option: str) -> Optional[float]:
        """Return the quote for ``option1`` / ``option2``."""
        if option not in OPTION_NAMES:
            raise KeyError(option)
        return getattr(self, option)


@dataclass(frozen=True)
class StakeInput:
    """Caller-provided input for one evaluation."""

    total_stake: float = 0.0
    market_mode: str = DEFAULT_MARKET_MODE
    provider_a: ProviderOdds = field(default_factory=ProviderOdds)
    provider_b: ProviderOdds = field(default_factory=ProviderOdds)
