"""Calculator configuration: market modes, env-based config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 마켓 모드
# ---------------------------------------------------------------------------

ONE_WAY_MODE = "1 Way"

# "1 Way" 이외의 모드는 모두 반대 결과(opposite-outcome) 마켓으로 취급
MARKET_MODES: list[str] = [
    "Win/Lose",
    "Over/Under",
    "Odd/Even",
    "Handicap",
    ONE_WAY_MODE,
]

DEFAULT_MARKET_MODE = MARKET_MODES[0]

DEFAULT_CURRENCY_SYMBOL = "₱"


# ---------------------------------------------------------------------------
# CalculatorConfig: 환경변수 기반 설정
# ---------------------------------------------------------------------------


@dataclass
class CalculatorConfig:
    """계산기 설정. 환경변수 또는 기본값."""

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    default_market_mode: str = DEFAULT_MARKET_MODE
    log_level: str = "INFO"

    def __post_init__(self):
        if self.default_market_mode not in MARKET_MODES:
            logger.warning(
                "Unknown market mode %r, falling back to %r",
                self.default_market_mode, DEFAULT_MARKET_MODE,
            )
            self.default_market_mode = DEFAULT_MARKET_MODE
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> CalculatorConfig:
        """환경변수에서 설정 로드. 없으면 안전한 기본값."""
        return cls(
            currency_symbol=os.environ.get(
                "SUREBET_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL
            ),
            default_market_mode=os.environ.get(
                "SUREBET_MARKET_MODE", DEFAULT_MARKET_MODE
            ),
            log_level=os.environ.get("SUREBET_LOG_LEVEL", "INFO"),
        )
