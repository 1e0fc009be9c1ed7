# utils/helpers.py
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import numpy as np

# integer form fields are 64-bit on the engine side
MAX_INT_MAGNITUDE = 2 ** 64
_MAX_INT_DIGITS = len(str(MAX_INT_MAGNITUDE))


def normalize_text(x) -> str:
    """Return a stripped string, converting NaN/None to ""."""
    try:
        if x is None:
            return ""
        if isinstance(x, float) and np.isnan(x):
            return ""
    except Exception:
        return ""
    return str(x).strip()


def parse_decimal(x: Any) -> Optional[float]:
    """Parse a form value as a finite decimal; None when it is not one."""
    if isinstance(x, bool):
        return None
    if isinstance(x, (int, float)):
        value = float(x)
        return value if math.isfinite(value) else None
    text = normalize_text(x)
    if text == "":
        return None
    try:
        value = float(Decimal(text))
    except (InvalidOperation, ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def parse_int(x: Any, default: Optional[int] = 0) -> Optional[int]:
    """
    Parse a form value as an integer.

    Integral decimals ("44.0", "1e10") are accepted; fractional values are
    truncated toward zero. Anything unparseable, or larger in magnitude than
    MAX_INT_MAGNITUDE, yields ``default``.
    """
    if isinstance(x, bool):
        return default
    if isinstance(x, int):
        return x if abs(x) <= MAX_INT_MAGNITUDE else default
    if isinstance(x, float):
        if not math.isfinite(x) or abs(x) > MAX_INT_MAGNITUDE:
            return default
        return int(x)
    text = normalize_text(x)
    if text == "":
        return default
    try:
        value = Decimal(text)
    except InvalidOperation:
        return default
    # checked on the exponent first so "1e2000000" never becomes an int
    if not value.is_finite() or value.adjusted() > _MAX_INT_DIGITS or abs(value) > MAX_INT_MAGNITUDE:
        return default
    return int(value)


def parse_bool(x: Any, default: bool = False) -> bool:
    """Parse a query-string flag ("true"/"1"/"yes"/"on")."""
    text = normalize_text(x).lower()
    if text == "":
        return default
    return text in ("true", "1", "yes", "on")


def format_param_label(name: str) -> str:
    """Min_fee_a -> Min Fee A"""
    return " ".join(w[:1].upper() + w[1:] for w in normalize_text(name).split("_") if w)
