class InvalidInputError(ValueError):
    """Raised when a numerical routine receives a non-finite input.

    The standard normal CDF approximation in :mod:`bs_calculator.models.normal`
    is total over finite reals only; NaN and ``±inf`` are rejected with this
    error instead of returning an implementation-defined value.
    """


class InvalidParameterError(InvalidInputError):
    """Raised when market parameters fall outside the Black-Scholes domain.

    Raised by :func:`bs_calculator.market.parameters.normalize` when

    - any of the five market inputs is non-finite,
    - ``spot_price <= 0`` or ``strike_price <= 0``,
    - ``days_to_expiry < 0`` or ``volatility_percent < 0``.
    """


class DegenerateMarketError(InvalidParameterError):
    """Raised when the closed-form formula has no finite value.

    Zero volatility or zero time to expiry make ``sigma * sqrt(t)`` vanish, so
    ``d1`` divides by zero. Under :attr:`DegeneratePolicy.RAISE
    <bs_calculator.config.DegeneratePolicy.RAISE>` the engine raises this error
    rather than returning NaN or infinity. It is also raised whenever a computed
    result is not finite (e.g. overflow for extreme inputs).

    Notes
    -----
    Subclasses :class:`InvalidParameterError`, so callers that only care about
    "bad inputs" can catch the parent class.
    """
