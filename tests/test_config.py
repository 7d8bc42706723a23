import pytest

from bs_calculator.config import CurveConfig, DegeneratePolicy


def test_default_curve_config_offsets():
    cfg = CurveConfig()
    offsets = cfg.offsets()

    assert cfg.n_points == 21
    assert offsets[0] == -10.0
    assert offsets[-1] == 10.0
    assert offsets == tuple(float(i) for i in range(-10, 11))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"step_pct": 0.0},
        {"step_pct": -1.0},
        {"min_offset_pct": 5.0, "max_offset_pct": 5.0},
        {"min_offset_pct": -100.0},
        {"min_offset_pct": -10.0, "max_offset_pct": 10.0, "step_pct": 3.0},
    ],
)
def test_curve_config_validation(kwargs):
    with pytest.raises(ValueError):
        CurveConfig(**kwargs)


def test_curve_config_is_frozen():
    cfg = CurveConfig()
    with pytest.raises(AttributeError):
        cfg.step_pct = 2.0  # type: ignore[misc]


def test_degenerate_policy_values():
    assert DegeneratePolicy("raise") is DegeneratePolicy.RAISE
    assert DegeneratePolicy("intrinsic") is DegeneratePolicy.INTRINSIC
