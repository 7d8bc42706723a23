from __future__ import annotations

from ..config import CurveConfig, DegeneratePolicy
from ..diagnostics.sweep import generate_curve
from ..market.parameters import normalize
from ..models import bs as bs_model
from ..types import Curve, MarketParameters, PricingResult


def _market(
    spot_price: float,
    strike_price: float,
    risk_free_rate_percent: float,
    days_to_expiry: float,
    volatility_percent: float,
) -> MarketParameters:
    return MarketParameters(
        spot_price=float(spot_price),
        strike_price=float(strike_price),
        risk_free_rate_percent=float(risk_free_rate_percent),
        days_to_expiry=float(days_to_expiry),
        volatility_percent=float(volatility_percent),
    )


def price_market(
    params: MarketParameters, *, policy: DegeneratePolicy = DegeneratePolicy.RAISE
) -> PricingResult:
    return bs_model.price(
        normalize(params, policy=policy),
        params.strike_price,
        params.spot_price,
        policy=policy,
    )


def compute_option_prices(
    spot_price: float,
    strike_price: float,
    risk_free_rate_percent: float,
    days_to_expiry: float,
    volatility_percent: float,
    *,
    policy: DegeneratePolicy = DegeneratePolicy.RAISE,
) -> PricingResult:
    """Price a European call/put pair and their Greeks from raw market inputs.

    Rate and volatility are in percent, expiry in calendar days.

    Raises
    ------
    InvalidParameterError
        Non-finite input, non-positive spot/strike, negative days/volatility.
    DegenerateMarketError
        Zero volatility or zero days under ``DegeneratePolicy.RAISE``.
    """
    return price_market(
        _market(
            spot_price,
            strike_price,
            risk_free_rate_percent,
            days_to_expiry,
            volatility_percent,
        ),
        policy=policy,
    )


def compute_sensitivity_curve(
    spot_price: float,
    strike_price: float,
    risk_free_rate_percent: float,
    days_to_expiry: float,
    volatility_percent: float,
    *,
    policy: DegeneratePolicy = DegeneratePolicy.RAISE,
    config: CurveConfig | None = None,
) -> Curve:
    """Call/put price versus spot (default: 21 points, spot -10 % .. +10 %)."""
    return generate_curve(
        _market(
            spot_price,
            strike_price,
            risk_free_rate_percent,
            days_to_expiry,
            volatility_percent,
        ),
        policy=policy,
        config=config,
    )
