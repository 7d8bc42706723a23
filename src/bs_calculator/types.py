from __future__ import annotations

from collections.abc import Iterator
from dataclasses import astuple, dataclass, fields
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True, slots=True)
class MarketParameters:
    """Raw market inputs, in the units a user types them.

    Parameters
    ----------
    spot_price : float
        Current price of the underlying, :math:`S` (currency units, > 0).
    strike_price : float
        Strike of the option, :math:`K` (currency units, > 0).
    risk_free_rate_percent : float
        Annualized risk-free rate in percent (``1.0`` means 1 %).
    days_to_expiry : float
        Calendar days until expiry (> 0).
    volatility_percent : float
        Annualized volatility in percent (``20.0`` means 20 %, >= 0).

    Notes
    -----
    Construction performs no validation. Use
    :func:`bs_calculator.market.parameters.normalize` to validate and convert to
    model units.
    """

    spot_price: float
    strike_price: float
    risk_free_rate_percent: float
    days_to_expiry: float
    volatility_percent: float

    def with_spot(self, spot_price: float) -> MarketParameters:
        return MarketParameters(
            spot_price=float(spot_price),
            strike_price=self.strike_price,
            risk_free_rate_percent=self.risk_free_rate_percent,
            days_to_expiry=self.days_to_expiry,
            volatility_percent=self.volatility_percent,
        )


@dataclass(frozen=True, slots=True)
class NormalizedParameters:
    """Model-consistent parameters derived from :class:`MarketParameters`.

    Attributes
    ----------
    time_to_expiry_years : float
        :math:`t = days / 365`.
    risk_free_rate : float
        :math:`r` as a decimal (continuously compounded).
    volatility : float
        :math:`\\sigma` as a decimal.
    """

    time_to_expiry_years: float
    risk_free_rate: float
    volatility: float

    @property
    def t(self) -> float:
        return self.time_to_expiry_years

    @property
    def r(self) -> float:
        return self.risk_free_rate

    @property
    def sigma(self) -> float:
        return self.volatility


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Prices and Greeks for a European call/put pair on the same inputs.

    Vega and rho are per one percentage point; theta is per calendar day.
    """

    call_price: float
    put_price: float
    call_delta: float
    put_delta: float
    gamma: float
    vega: float
    call_theta: float
    put_theta: float
    call_rho: float
    put_rho: float

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class CurvePoint:
    spot_price: float
    call_price: float
    put_price: float


@dataclass(frozen=True, slots=True)
class Curve:
    """Call and put prices sampled over ascending spot prices.

    The default generator produces 21 points, spot ``-10 %`` to ``+10 %`` of the
    base spot in steps of one percent.
    """

    points: tuple[CurvePoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[CurvePoint]:
        return iter(self.points)

    def __getitem__(self, i: int) -> CurvePoint:
        return self.points[i]

    def spots(self) -> np.ndarray:
        return np.array([p.spot_price for p in self.points], dtype=np.float64)

    def calls(self) -> np.ndarray:
        return np.array([p.call_price for p in self.points], dtype=np.float64)

    def puts(self) -> np.ndarray:
        return np.array([p.put_price for p in self.points], dtype=np.float64)

    def to_frame(self) -> pd.DataFrame:
        """Return the curve as a DataFrame with one row per point."""
        try:
            import pandas as pd
        except ModuleNotFoundError as e:
            raise ModuleNotFoundError(
                "Curve.to_frame requires pandas. Install it with: pip install pandas"
            ) from e

        return pd.DataFrame(
            [astuple(p) for p in self.points],
            columns=[f.name for f in fields(CurvePoint)],
        )
