"""Closed-form Black-Scholes math and the normal CDF approximation it uses."""

from .bs import d1_d2, price
from .normal import NormalDistribution, cumulative_probability

__all__ = [
    "NormalDistribution",
    "cumulative_probability",
    "d1_d2",
    "price",
]
