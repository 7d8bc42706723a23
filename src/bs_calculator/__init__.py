"""
bs_calculator

Black-Scholes European option calculator: prices, Greeks and a price-vs-spot
sensitivity curve from five market inputs.

The main entrypoints are exposed at the top level, so you can write:

    from bs_calculator import compute_option_prices, compute_sensitivity_curve
"""

import logging

from .config import CurveConfig, DegeneratePolicy
from .exceptions import DegenerateMarketError, InvalidInputError, InvalidParameterError
from .pricers.black_scholes import (
    compute_option_prices,
    compute_sensitivity_curve,
    price_market,
)
from .types import (
    Curve,
    CurvePoint,
    MarketParameters,
    NormalizedParameters,
    PricingResult,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

default_log_format = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
default_log_datefmt = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO) -> None:
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=default_log_format, datefmt=default_log_datefmt)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


__all__ = [
    # Types
    "MarketParameters",
    "NormalizedParameters",
    "PricingResult",
    "CurvePoint",
    "Curve",
    # Config
    "CurveConfig",
    "DegeneratePolicy",
    # Errors
    "InvalidInputError",
    "InvalidParameterError",
    "DegenerateMarketError",
    # Pricers
    "compute_option_prices",
    "compute_sensitivity_curve",
    "price_market",
    # Logging
    "configure_logging",
]
