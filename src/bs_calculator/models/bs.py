from __future__ import annotations

import math

from ..config import DAYS_PER_YEAR, PERCENT, DegeneratePolicy
from ..exceptions import DegenerateMarketError
from ..market.parity import discount_factor
from ..types import NormalizedParameters, PricingResult
from .normal import cumulative_probability as N

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def d1_d2(
    *, spot: float, strike: float, r: float, sigma: float, tau: float
) -> tuple[float, float]:
    vol_sqrt_t = sigma * math.sqrt(tau)
    if vol_sqrt_t == 0.0:
        raise DegenerateMarketError(
            "sigma * sqrt(t) is zero (zero volatility or zero time to expiry)"
        )
    moneyness = spot / strike
    if moneyness == 0.0 or not math.isfinite(moneyness):
        raise DegenerateMarketError(f"spot/strike is not representable: {moneyness!r}")
    num = math.log(moneyness) + (r + 0.5 * sigma * sigma) * tau
    d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    if not (math.isfinite(d1) and math.isfinite(d2)):
        raise DegenerateMarketError(f"d1/d2 is not finite (d1={d1!r})")
    return float(d1), float(d2)


def _closed_form(
    *, spot: float, strike: float, r: float, sigma: float, tau: float
) -> PricingResult:
    d1, d2 = d1_d2(spot=spot, strike=strike, r=r, sigma=sigma, tau=tau)
    df = discount_factor(r, tau)

    Nd1 = N(d1)
    Nd2 = N(d2)
    Nmd1 = N(-d1)
    Nmd2 = N(-d2)

    call_price = spot * Nd1 - strike * df * Nd2
    put_price = strike * df * Nmd2 - spot * Nmd1

    call_delta = Nd1
    put_delta = call_delta - 1.0

    # e^{-d1^2/2}, the unnormalized density at d1
    g = math.exp(-(d1**2) / 2.0)
    gamma = g / (spot * sigma * math.sqrt(2.0 * math.pi * tau))
    vega = spot * math.sqrt(tau) * g / _SQRT_2PI / PERCENT

    decay = -spot * sigma * g / (2.0 * math.sqrt(2.0 * math.pi * tau))
    call_theta = (decay - r * strike * df * Nd2) / DAYS_PER_YEAR
    put_theta = (decay + r * strike * df * Nmd2) / DAYS_PER_YEAR

    call_rho = strike * tau * df * Nd2 / PERCENT
    put_rho = -strike * tau * df * Nmd2 / PERCENT

    return PricingResult(
        call_price=call_price,
        put_price=put_price,
        call_delta=call_delta,
        put_delta=put_delta,
        gamma=gamma,
        vega=vega,
        call_theta=call_theta,
        put_theta=put_theta,
        call_rho=call_rho,
        put_rho=put_rho,
    )


def _intrinsic_limit(*, spot: float, strike: float, r: float, tau: float) -> PricingResult:
    """Sigma -> 0 limit of the closed form.

    N(d1) and N(d2) collapse to a step in the moneyness ``S - K e^{-r t}``
    (1 in the money, 0 out of the money, 1/2 exactly at the money) and the
    density terms vanish.
    """
    df = discount_factor(r, tau)
    moneyness = spot - strike * df
    if moneyness > 0.0:
        n = 1.0
    elif moneyness < 0.0:
        n = 0.0
    else:
        n = 0.5

    return PricingResult(
        call_price=max(moneyness, 0.0),
        put_price=max(-moneyness, 0.0),
        call_delta=n,
        put_delta=n - 1.0,
        gamma=0.0,
        vega=0.0,
        call_theta=-r * strike * df * n / DAYS_PER_YEAR,
        put_theta=r * strike * df * (1.0 - n) / DAYS_PER_YEAR,
        call_rho=strike * tau * df * n / PERCENT,
        put_rho=-strike * tau * df * (1.0 - n) / PERCENT,
    )


def _ensure_finite(result: PricingResult) -> PricingResult:
    bad = [k for k, v in result.as_dict().items() if not math.isfinite(v)]
    if bad:
        raise DegenerateMarketError(f"Non-finite pricing result for: {', '.join(bad)}")
    return result


def price(
    params: NormalizedParameters,
    strike_price: float,
    spot_price: float,
    *,
    policy: DegeneratePolicy = DegeneratePolicy.RAISE,
) -> PricingResult:
    """
    Black–Scholes European call and put prices with analytic Greeks.

    Vega and rho are per 1 percentage point; theta is per calendar day (365).

    With ``sigma * sqrt(t) == 0`` the closed form is undefined: ``RAISE`` raises
    :class:`DegenerateMarketError`, ``INTRINSIC`` returns the sigma -> 0 limit
    (discounted intrinsic value). A non-finite result always raises.
    """
    spot = float(spot_price)
    strike = float(strike_price)
    r, sigma, tau = params.r, params.sigma, params.t

    try:
        if sigma * math.sqrt(tau) == 0.0 and policy == DegeneratePolicy.INTRINSIC:
            result = _intrinsic_limit(spot=spot, strike=strike, r=r, tau=tau)
        else:
            result = _closed_form(spot=spot, strike=strike, r=r, sigma=sigma, tau=tau)
    except OverflowError as e:
        raise DegenerateMarketError(f"Overflow while pricing: {e}") from e
    return _ensure_finite(result)
