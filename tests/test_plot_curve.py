import pytest

from bs_calculator import MarketParameters, compute_sensitivity_curve

mpl = pytest.importorskip("matplotlib")
mpl.use("Agg")


def test_plot_curve_draws_call_and_put(tmp_path):
    import matplotlib.pyplot as plt

    from bs_calculator.viz.plot_curve import plot_curve

    base = MarketParameters(100.0, 100.0, 1.0, 30.0, 20.0)
    curve = compute_sensitivity_curve(100.0, 100.0, 1.0, 30.0, 20.0)

    fig, ax = plot_curve(curve, base=base, show=False, savepath=tmp_path / "c.png")
    try:
        labels = [line.get_label() for line in ax.get_lines()]
        assert "Call Price" in labels
        assert "Put Price" in labels
        assert (tmp_path / "c.png").exists()
    finally:
        plt.close(fig)


@pytest.mark.parametrize("style", ["pretty", "minimal"])
def test_plot_curve_styles(style):
    import matplotlib.pyplot as plt

    from bs_calculator.viz.plot_curve import plot_curve

    curve = compute_sensitivity_curve(100.0, 100.0, 1.0, 30.0, 20.0)
    fig, ax = plot_curve(curve, style=style, show=False)
    try:
        assert len(ax.get_lines()) == 2
        if style == "pretty":
            assert not ax.spines["top"].get_visible()
    finally:
        plt.close(fig)
