"""Rounding of floating-point numbers to integral values under several rules."""

from __future__ import annotations

import math


def _integral(value: int, x: float) -> float:
    """Return ``value`` as a float carrying the sign of ``x`` (keeps -0.0)."""
    return math.copysign(float(value), x)


def nearest(x: float) -> float:
    """Round to the nearest integer, halfway cases away from zero."""
    x = float(x)
    if not math.isfinite(x):
        return x
    t = math.trunc(x)
    if abs(x - t) >= 0.5:
        t += 1 if x > 0 else -1
    return _integral(t, x)


def towards_zero(x: float) -> float:
    """Round towards zero (truncate)."""
    x = float(x)
    if not math.isfinite(x):
        return x
    return _integral(math.trunc(x), x)


def away_from_zero(x: float) -> float:
    """Round away from zero."""
    x = float(x)
    return ceil(x) if x >= 0.0 else floor(x)


def towards_even(x: float) -> float:
    """Round to the nearest integer, halfway cases to the even neighbour."""
    x = float(x)
    if not math.isfinite(x):
        return x
    return _integral(round(x), x)


def towards_odd(x: float) -> float:
    """Round to the nearest integer, halfway cases to the odd neighbour."""
    x = float(x)
    rounded = nearest(x)
    if not math.isfinite(x):
        return rounded
    if abs(x - rounded) == 0.5 and int(rounded) % 2 == 0:
        return rounded - 1.0 if x > 0 else rounded + 1.0
    return rounded


def ceil(x: float) -> float:
    """Smallest integral value not less than ``x``."""
    x = float(x)
    if not math.isfinite(x):
        return x
    return _integral(math.ceil(x), x)


def floor(x: float) -> float:
    """Largest integral value not greater than ``x``."""
    x = float(x)
    if not math.isfinite(x):
        return x
    return _integral(math.floor(x), x)