import math

import numpy as np
import pytest
from scipy.stats import norm

from bs_calculator.exceptions import InvalidInputError
from bs_calculator.models.normal import NormalDistribution, cumulative_probability

XS = np.linspace(-6.0, 6.0, 241)


def test_cdf_at_zero_is_one_half():
    assert cumulative_probability(0.0) == pytest.approx(0.5, abs=3e-7)


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.96, 3.0, 6.0], ids=lambda x: f"x={x:g}")
def test_cdf_symmetry(x: float):
    """Phi(-x) = 1 - Phi(x) holds up to rounding under the approximation."""
    assert cumulative_probability(-x) == pytest.approx(
        1.0 - cumulative_probability(x), abs=1e-12
    )


def test_cdf_error_bound_against_scipy():
    """A&S-type approximation: max abs error on the order of 1e-7."""
    approx = np.array([cumulative_probability(float(x)) for x in XS])
    err = np.max(np.abs(approx - norm.cdf(XS)))
    assert err < 3e-7


def test_cdf_is_monotone_and_bounded():
    vals = np.array([cumulative_probability(float(x)) for x in XS])
    core = np.abs(XS) <= 4.0
    assert np.all(np.diff(vals[core]) > 0.0)
    assert np.all((vals >= 0.0) & (vals <= 1.0))


def test_cdf_extreme_tails():
    assert cumulative_probability(-40.0) == 0.0
    assert cumulative_probability(40.0) == 1.0


@pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
def test_cdf_rejects_non_finite(x: float):
    with pytest.raises(InvalidInputError):
        NormalDistribution().cumulative_probability(x)
