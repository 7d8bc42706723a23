from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Calendar convention used to turn days into year fractions and theta into
# per-day decay.
DAYS_PER_YEAR = 365.0

# Rates and volatilities are quoted in percent; vega and rho are reported per
# one percentage point.
PERCENT = 100.0


class DegeneratePolicy(str, Enum):
    RAISE = "raise"  # reject sigma*sqrt(t) == 0 with DegenerateMarketError
    INTRINSIC = "intrinsic"  # price at the sigma -> 0 limit


@dataclass(frozen=True, slots=True)
class CurveConfig:
    """Spot offsets (in percent of the base spot) sampled by the curve generator.

    The default samples ``spot * (1 + i/100)`` for ``i = -10, ..., 10``.
    """

    min_offset_pct: float = -10.0
    max_offset_pct: float = 10.0
    step_pct: float = 1.0

    def __post_init__(self) -> None:
        if self.step_pct <= 0:
            raise ValueError("step_pct must be > 0")
        if self.min_offset_pct >= self.max_offset_pct:
            raise ValueError("min_offset_pct must be < max_offset_pct")
        if self.min_offset_pct <= -PERCENT:
            raise ValueError("min_offset_pct must be > -100 (spot must stay positive)")
        n = (self.max_offset_pct - self.min_offset_pct) / self.step_pct
        if abs(n - round(n)) > 1e-9:
            raise ValueError("offset range must be an integral number of steps")

    @property
    def n_points(self) -> int:
        return int(round((self.max_offset_pct - self.min_offset_pct) / self.step_pct)) + 1

    def offsets(self) -> tuple[float, ...]:
        """Offsets in percent, ascending, endpoints included."""
        return tuple(
            self.min_offset_pct + i * self.step_pct for i in range(self.n_points)
        )
