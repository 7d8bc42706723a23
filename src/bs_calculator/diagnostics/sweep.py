from __future__ import annotations

import logging

from ..config import PERCENT, CurveConfig, DegeneratePolicy
from ..market.parameters import normalize
from ..models.bs import price
from ..types import Curve, CurvePoint, MarketParameters

logger = logging.getLogger(__name__)


def spot_grid(spot_price: float, config: CurveConfig | None = None) -> tuple[float, ...]:
    """Spots ``S * (1 + offset/100)`` for each configured offset, ascending."""
    config = config or CurveConfig()
    return tuple(spot_price * (1.0 + off / PERCENT) for off in config.offsets())


def generate_curve(
    params: MarketParameters,
    *,
    policy: DegeneratePolicy = DegeneratePolicy.RAISE,
    config: CurveConfig | None = None,
) -> Curve:
    """Sweep spot around ``params.spot_price`` and price a call/put at each point.

    Strike, rate, expiry and volatility are held fixed, so the inputs are
    normalized once. The default config yields 21 points from -10 % to +10 % of
    spot in 1 % steps.

    Any failure from an individual pricing call propagates; no partial curve is
    returned.
    """
    config = config or CurveConfig()
    norm_params = normalize(params, policy=policy)

    points = []
    for s in spot_grid(params.spot_price, config):
        res = price(norm_params, params.strike_price, s, policy=policy)
        points.append(
            CurvePoint(spot_price=s, call_price=res.call_price, put_price=res.put_price)
        )

    logger.debug(
        "Generated spot curve: base spot=%g, %d points", params.spot_price, len(points)
    )
    return Curve(points=tuple(points))
