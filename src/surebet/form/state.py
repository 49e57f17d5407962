"""Calculator input form: raw text fields with typed setters.

Raw text is kept as entered; parsing happens once in to_stake_input().
Odds that are blank or unparseable become None (absent), never 0, so
"not entered" stays distinct from "entered zero".
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from surebet.config import DEFAULT_MARKET_MODE, MARKET_MODES
from surebet.models.odds import ProviderOdds, StakeInput

logger = logging.getLogger(__name__)


def _to_float(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    stripped = text.strip().replace(",", "")
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        logger.debug("Unparseable numeric input: %r", text)
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_odds(text: Optional[str]) -> Optional[float]:
    """배당 텍스트 파싱. 빈 값, 파싱 불가, 0 이하 → None."""
    value = _to_float(text)
    if value is None or value <= 0:
        return None
    return value


def parse_stake(text: Optional[str]) -> float:
    """스테이크 텍스트 파싱. 빈 값, 파싱 불가, 음수 → 0.0."""
    value = _to_float(text)
    if value is None or value < 0:
        return 0.0
    return value


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass
class CalculatorForm:
    """입력 폼 상태. 필드마다 전용 setter 하나."""

    total_stake: str = "0"
    market_mode: str = DEFAULT_MARKET_MODE
    book_a_option1: str = ""
    book_a_option2: str = ""
    book_b_option1: str = ""
    book_b_option2: str = ""
    last_updated: datetime = field(default_factory=_now)

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_total_stake(self, text: str) -> None:
        self.total_stake = text
        self._touch()

    def set_market_mode(self, mode: str) -> None:
        if mode not in MARKET_MODES:
            raise ValueError(
                f"Unknown market mode {mode!r}; expected one of {MARKET_MODES}"
            )
        self.market_mode = mode
        self._touch()

    def set_book_a_option1(self, text: str) -> None:
        self.book_a_option1 = text
        self._touch()

    def set_book_a_option2(self, text: str) -> None:
        self.book_a_option2 = text
        self._touch()

    def set_book_b_option1(self, text: str) -> None:
        self.book_b_option1 = text
        self._touch()

    def set_book_b_option2(self, text: str) -> None:
        self.book_b_option2 = text
        self._touch()

    def reset(self) -> None:
        """스테이크와 배당 초기화 (마켓 모드는 유지)."""
        self.total_stake = "0"
        self.book_a_option1 = ""
        self.book_a_option2 = ""
        self.book_b_option1 = ""
        self.book_b_option2 = ""
        self._touch()

    def _touch(self) -> None:
        self.last_updated = _now()

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_stake_input(self) -> StakeInput:
        """Parse the raw fields into the engine's input."""
        return StakeInput(
            total_stake=parse_stake(self.total_stake),
            market_mode=self.market_mode,
            provider_a=ProviderOdds(
                option1=parse_odds(self.book_a_option1),
                option2=parse_odds(self.book_a_option2),
            ),
            provider_b=ProviderOdds(
                option1=parse_odds(self.book_b_option1),
                option2=parse_odds(self.book_b_option2),
            ),
        )
