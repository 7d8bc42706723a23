from __future__ import annotations

import math

from ..types import NormalizedParameters, PricingResult


def discount_factor(rate: float, t: float) -> float:
    return math.exp(-rate * t)


def forward_discounted(
    *, spot_price: float, strike_price: float, params: NormalizedParameters
) -> float:
    """S - K*e^{-r t} (the RHS of put-call parity without dividends)."""
    return spot_price - strike_price * discount_factor(params.r, params.t)


def put_call_parity_residual(
    result: PricingResult,
    *,
    spot_price: float,
    strike_price: float,
    params: NormalizedParameters,
) -> float:
    """
    Residual = (C - P) - (S - K e^{-r t}).
    Should be ~0 for European options under consistent inputs.
    """
    return (result.call_price - result.put_price) - forward_discounted(
        spot_price=spot_price, strike_price=strike_price, params=params
    )
