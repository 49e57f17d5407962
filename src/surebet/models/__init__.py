"""Data models for surebet."""

from surebet.models.combination import ArbitrageResult, ComboSpec, EvaluatedCombination
from surebet.models.odds import ProviderOdds, StakeInput, is_valid_odds

__all__ = [
    "ArbitrageResult",
    "ComboSpec",
    "EvaluatedCombination",
    "ProviderOdds",
    "StakeInput",
    "is_valid_odds",
]
