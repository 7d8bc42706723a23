from __future__ import annotations

import math

from ..config import DAYS_PER_YEAR, PERCENT, DegeneratePolicy
from ..exceptions import DegenerateMarketError, InvalidParameterError
from ..types import MarketParameters, NormalizedParameters


def _validate_market_inputs(raw: MarketParameters) -> None:
    for name in (
        "spot_price",
        "strike_price",
        "risk_free_rate_percent",
        "days_to_expiry",
        "volatility_percent",
    ):
        value = getattr(raw, name)
        if not math.isfinite(value):
            raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    if raw.spot_price <= 0.0:
        raise InvalidParameterError("spot_price must be positive")
    if raw.strike_price <= 0.0:
        raise InvalidParameterError("strike_price must be positive")
    if raw.days_to_expiry < 0.0:
        raise InvalidParameterError("days_to_expiry must be positive")
    if raw.volatility_percent < 0.0:
        raise InvalidParameterError("volatility_percent must be >= 0")


def normalize(
    raw: MarketParameters, *, policy: DegeneratePolicy = DegeneratePolicy.RAISE
) -> NormalizedParameters:
    """Validate raw inputs and convert them to model units.

    ``t = days / 365``, ``r = rate% / 100``, ``sigma = vol% / 100``.

    Zero volatility passes through; the pricing engine applies ``policy`` to it.
    Zero days is rejected here with :class:`DegenerateMarketError` unless
    ``policy`` is ``INTRINSIC``.

    Raises
    ------
    InvalidParameterError
        Non-finite input, non-positive spot or strike, negative days or
        volatility.
    DegenerateMarketError
        ``days_to_expiry == 0`` under the ``RAISE`` policy.
    """
    _validate_market_inputs(raw)
    if raw.days_to_expiry == 0.0 and policy == DegeneratePolicy.RAISE:
        raise DegenerateMarketError("days_to_expiry must be positive (zero time value)")

    return NormalizedParameters(
        time_to_expiry_years=float(raw.days_to_expiry) / DAYS_PER_YEAR,
        risk_free_rate=float(raw.risk_free_rate_percent) / PERCENT,
        volatility=float(raw.volatility_percent) / PERCENT,
    )
