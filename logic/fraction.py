# logic/fraction.py
"""
Decimal to integer-ratio conversion for ratio-valued protocol parameters.

The engine does exact rational arithmetic, so values such as the pool
influence factor (A0) or the execution-unit prices are sent as a
numerator/denominator pair instead of a float.
No Streamlit dependencies.
"""

import math
import numbers
from typing import Tuple

MAX_ITERATIONS = 32
RELATIVE_TOLERANCE = 1e-12


class InvalidParameter(ValueError):
    """Raised when a value cannot be turned into a ratio."""


def to_fraction(value) -> Tuple[int, int]:
    """
    Approximate ``value`` with an integer ratio using a continued-fraction expansion.

    Args:
        value: Any finite real number

    Returns:
        (numerator, denominator) with a positive denominator

    Raises:
        InvalidParameter: If value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"Not a number: {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value), 1

    x = float(value)
    if not math.isfinite(x):
        raise InvalidParameter(f"Not a finite number: {value!r}")
    if x.is_integer():
        return int(x), 1

    tolerance = RELATIVE_TOLERANCE * abs(x)
    # convergents h/k, seeded with h(-1)/k(-1) = 1/0 and h(-2)/k(-2) = 0/1
    h_prev, h = 0, 1
    k_prev, k = 1, 0
    remainder = x
    for _ in range(MAX_ITERATIONS):
        term = math.floor(remainder)
        h_prev, h = h, term * h + h_prev
        k_prev, k = k, term * k + k_prev
        if abs(h / k - x) <= tolerance:
            break
        fractional = remainder - term
        # remainder vanished; the convergent is exact
        if fractional < 1e-300:
            break
        remainder = 1.0 / fractional

    if k == 0:
        return int(x), 1
    return h, k
