from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import configure_logging
from .config import DegeneratePolicy
from .exceptions import InvalidInputError
from .pricers.black_scholes import compute_option_prices, compute_sensitivity_curve
from .types import MarketParameters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bs-calculator",
        description="Black-Scholes European option prices, Greeks and spot curve.",
    )
    ap.add_argument("--spot", type=float, default=1800.0, help="spot price")
    ap.add_argument("--strike", type=float, default=1800.0, help="strike price")
    ap.add_argument("--rate", type=float, default=1.0, help="risk-free rate, percent")
    ap.add_argument("--days", type=float, default=30.0, help="calendar days to expiry")
    ap.add_argument(
        "--volatility", type=float, default=20.0, help="annual volatility, percent"
    )
    ap.add_argument(
        "--intrinsic",
        action="store_true",
        help="price zero volatility/expiry at intrinsic value instead of failing",
    )
    ap.add_argument("--curve", action="store_true", help="print the price-vs-spot curve")
    ap.add_argument("--plot", metavar="PATH", help="save a price-vs-spot chart to PATH")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def format_results(values: dict[str, float], *, digits: int = 4) -> str:
    width = max(len(k) for k in values)
    return "\n".join(f"{k:<{width}} : {v:.{digits}f}" for k, v in values.items())


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    policy = DegeneratePolicy.INTRINSIC if args.intrinsic else DegeneratePolicy.RAISE
    inputs = (args.spot, args.strike, args.rate, args.days, args.volatility)

    try:
        result = compute_option_prices(*inputs, policy=policy)
        curve = (
            compute_sensitivity_curve(*inputs, policy=policy)
            if args.curve or args.plot
            else None
        )
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("Results:")
    print(format_results(result.as_dict()))

    if curve is not None and args.curve:
        print()
        print("Option Price vs Spot Price:")
        print(f"{'spot':>12} {'call':>12} {'put':>12}")
        for p in curve:
            print(f"{p.spot_price:>12.2f} {p.call_price:>12.4f} {p.put_price:>12.4f}")

    if curve is not None and args.plot:
        from .viz.plot_curve import plot_curve

        base = MarketParameters(*inputs)
        plot_curve(curve, base=base, show=False, savepath=args.plot)
        logger.info("Saved chart to %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
