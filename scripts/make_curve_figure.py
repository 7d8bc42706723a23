from __future__ import annotations

from pathlib import Path

from bs_calculator import MarketParameters, compute_sensitivity_curve
from bs_calculator.viz.plot_curve import plot_curve


def main() -> None:
    out_dir = Path(__file__).resolve().parents[1] / "docs" / "assets"
    out_dir.mkdir(parents=True, exist_ok=True)

    base = MarketParameters(
        spot_price=1800.0,
        strike_price=1800.0,
        risk_free_rate_percent=1.0,
        days_to_expiry=30.0,
        volatility_percent=20.0,
    )
    curve = compute_sensitivity_curve(
        base.spot_price,
        base.strike_price,
        base.risk_free_rate_percent,
        base.days_to_expiry,
        base.volatility_percent,
    )

    plot_curve(curve, base=base, show=False, savepath=out_dir / "price_vs_spot.png")
    curve.to_frame().to_csv(out_dir / "price_vs_spot.csv", index=False)
    print("Wrote figures to", out_dir)


if __name__ == "__main__":
    main()
