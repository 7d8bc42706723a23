from .parameters import normalize
from .parity import discount_factor, forward_discounted, put_call_parity_residual

__all__ = [
    "normalize",
    "discount_factor",
    "forward_discounted",
    "put_call_parity_residual",
]
