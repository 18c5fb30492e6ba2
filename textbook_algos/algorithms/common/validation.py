"""Scalar checks shared by the argument validators."""

import math
import numbers


def is_numeric(value) -> bool:
    """Real numbers only; ``bool`` does not count."""

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_finite(value) -> bool:
    # math.isfinite overflows on very large ints
    return isinstance(value, numbers.Integral) or math.isfinite(value)


def is_nan(value) -> bool:
    return value != value
