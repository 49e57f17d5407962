"""Shared test fixtures for surebet."""

from __future__ import annotations

import pytest

from surebet.models.odds import ProviderOdds, StakeInput


@pytest.fixture
def sample_input() -> StakeInput:
    """Two-outcome market where A1 + B2 is a surebet and A2 + B1 is not."""
    return StakeInput(
        total_stake=1000.0,
        market_mode="Win/Lose",
        provider_a=ProviderOdds(option1=2.10, option2=1.80),
        provider_b=ProviderOdds(option1=1.95, option2=2.05),
    )


@pytest.fixture
def break_even_input() -> StakeInput:
    """1 Way market at exactly 2.00 / 2.00 (arbitrage % == 1)."""
    return StakeInput(
        total_stake=1000.0,
        market_mode="1 Way",
        provider_a=ProviderOdds(option1=2.00),
        provider_b=ProviderOdds(option1=2.00),
    )
