"""Standard normal CDF approximation.

Abramowitz & Stegun (26.2.17) polynomial on ``t = 1 / (1 + p|x|)``. The maximum
absolute error of this approximation is of order ``1e-7``; it is a modeling
limitation of the calculator and callers needing exact CDF values should use
``scipy.stats.norm`` instead.
"""

from __future__ import annotations

import math

from ..exceptions import InvalidInputError


class NormalDistribution:
    """Standard normal distribution with an approximated CDF."""

    P = 0.2316419
    DENSITY = 0.3989423  # ~ 1/sqrt(2*pi)
    B = (0.3193815, -0.3565638, 1.781478, -1.821256, 1.330274)

    def cumulative_probability(self, x: float) -> float:
        """Approximate :math:`\\Phi(x)`.

        The tail is computed for ``|x|`` and complemented for ``x > 0``, so
        ``Phi(-x) == 1 - Phi(x)`` holds up to floating-point rounding.

        Raises
        ------
        InvalidInputError
            If ``x`` is NaN or infinite.
        """
        x = float(x)
        if not math.isfinite(x):
            raise InvalidInputError(f"x must be finite, got {x!r}")

        t = 1.0 / (1.0 + self.P * abs(x))
        d = self.DENSITY * math.exp(-x * x / 2.0)
        b1, b2, b3, b4, b5 = self.B
        tail = d * t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))
        if x > 0.0:
            return 1.0 - tail
        return tail


_STANDARD_NORMAL = NormalDistribution()


def cumulative_probability(x: float) -> float:
    return _STANDARD_NORMAL.cumulative_probability(x)
