from __future__ import annotations

import math

import pytest

from bs_calculator.config import DegeneratePolicy
from bs_calculator.exceptions import DegenerateMarketError, InvalidParameterError
from bs_calculator.market.parameters import normalize


def test_normalize_converts_units(make_market):
    n = normalize(make_market(rate=1.0, days=30.0, vol=20.0))

    assert n.time_to_expiry_years == pytest.approx(30.0 / 365.0)
    assert n.risk_free_rate == pytest.approx(0.01)
    assert n.volatility == pytest.approx(0.20)
    # short aliases
    assert (n.t, n.r, n.sigma) == (
        n.time_to_expiry_years,
        n.risk_free_rate,
        n.volatility,
    )


def test_normalize_allows_negative_rate(make_market):
    assert normalize(make_market(rate=-0.5)).risk_free_rate == pytest.approx(-0.005)


@pytest.mark.parametrize(
    "overrides",
    [
        {"strike": 0.0},
        {"spot": -5.0},
        {"spot": 0.0},
        {"days": -1.0},
        {"vol": -10.0},
    ],
    ids=lambda o: ",".join(f"{k}={v:g}" for k, v in o.items()),
)
def test_normalize_rejects_out_of_domain(make_market, overrides):
    with pytest.raises(InvalidParameterError) as exc:
        normalize(make_market(**overrides))
    assert not isinstance(exc.value, DegenerateMarketError)


@pytest.mark.parametrize("field", ["spot", "strike", "rate", "days", "vol"])
@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_normalize_rejects_non_finite(make_market, field, bad):
    with pytest.raises(InvalidParameterError):
        normalize(make_market(**{field: bad}))


def test_zero_days_is_degenerate_by_default(make_market):
    with pytest.raises(DegenerateMarketError):
        normalize(make_market(days=0.0))

    # still reported as an invalid parameter for callers that only catch that
    with pytest.raises(InvalidParameterError):
        normalize(make_market(days=0.0))


def test_zero_days_accepted_under_intrinsic_policy(make_market):
    n = normalize(make_market(days=0.0), policy=DegeneratePolicy.INTRINSIC)
    assert n.time_to_expiry_years == 0.0


def test_zero_volatility_accepted_structurally(make_market):
    assert normalize(make_market(vol=0.0)).volatility == 0.0
