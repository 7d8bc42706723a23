from __future__ import annotations

from pathlib import Path
from typing import Literal

from ..types import Curve, MarketParameters

Style = Literal["pretty", "minimal"]


def _mpl_context(style: Style):
    import matplotlib as mpl

    if style == "minimal":
        return mpl.rc_context({})

    return mpl.rc_context(
        {
            "axes.grid": True,
            "grid.alpha": 0.2,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "axes.titleweight": "semibold",
            "lines.linewidth": 2.0,
        }
    )


def plot_curve(
    curve: Curve,
    *,
    base: MarketParameters | None = None,
    title: str = "Option Price vs Spot Price",
    style: Style = "pretty",
    show_strike: bool = True,
    figsize: tuple[float, float] = (9, 4.5),
    show: bool = True,
    savepath: str | Path | None = None,
    dpi: int = 150,
):
    """Plot call and put price against spot.

    If ``base`` is given, its strike is marked with a vertical line and the
    fixed inputs are shown as a subtitle.
    """
    try:
        import matplotlib.pyplot as plt
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "plot_curve requires matplotlib. Install it with: pip install matplotlib"
        ) from e

    x = curve.spots()

    with _mpl_context(style):
        fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
        ax.plot(x, curve.calls(), label="Call Price", color="#8884d8")
        ax.plot(x, curve.puts(), label="Put Price", color="#82ca9d")

        ax.set_xlabel("Spot (S)")
        ax.set_ylabel("Price")

        if base is None:
            ax.set_title(title, loc="left")
        else:
            subtitle = (
                f"K={base.strike_price:g}, r={base.risk_free_rate_percent:g}%, "
                f"days={base.days_to_expiry:g}, σ={base.volatility_percent:g}%"
            )
            ax.set_title(f"{title}\n{subtitle}", loc="left")
            if show_strike and x.min() <= base.strike_price <= x.max():
                ax.axvline(
                    base.strike_price, linestyle=(0, (3, 3)), linewidth=1.2, alpha=0.45
                )

        ax.legend()

        if savepath is not None:
            savepath = Path(savepath)
            savepath.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(savepath, dpi=dpi, bbox_inches="tight")

        if show:
            plt.show()

        return fig, ax
