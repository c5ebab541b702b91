"""Floating point comparisons used by the interpolator."""

from __future__ import annotations

import math

from .constants import DEFAULT_RELATIVE_ACCURACY


def almost_zero(a: float, accuracy: float = DEFAULT_RELATIVE_ACCURACY) -> bool:
    return abs(a) < accuracy


def almost_equal(a: float, b: float, accuracy: float = DEFAULT_RELATIVE_ACCURACY) -> bool:
    """Relative comparison, falling back to an absolute one when either side is zero."""
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    if a == 0.0 or b == 0.0:
        return almost_zero(a - b, accuracy)
    return abs(a - b) <= accuracy * max(abs(a), abs(b))
