"""Pytest helpers for the bs_calculator package."""

from __future__ import annotations

import pytest

from bs_calculator.types import MarketParameters


@pytest.fixture
def base_params() -> dict:
    """The calculator's default inputs, used as the reference scenario."""
    return {
        "spot_price": 1800.0,
        "strike_price": 1800.0,
        "risk_free_rate_percent": 1.0,
        "days_to_expiry": 30.0,
        "volatility_percent": 20.0,
    }


@pytest.fixture
def make_market():
    """Factory fixture for constructing MarketParameters."""

    def _make(
        *,
        spot: float = 100.0,
        strike: float = 100.0,
        rate: float = 5.0,
        days: float = 365.0,
        vol: float = 20.0,
    ) -> MarketParameters:
        return MarketParameters(
            spot_price=spot,
            strike_price=strike,
            risk_free_rate_percent=rate,
            days_to_expiry=days,
            volatility_percent=vol,
        )

    return _make
