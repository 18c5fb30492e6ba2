"""Greatest common divisor via Euclidean remainder reduction."""

from ..errors import InvalidArgument
from .common.validation import is_finite, is_numeric


def euclidean(a, b):
    """Return gcd(a, b) as a non-negative number.

    Python's ``%`` takes the sign of the divisor, so intermediate remainders
    may be negative when the inputs are; the final ``abs`` normalises the
    result. ``euclidean(a, 0) == abs(a)`` and ``euclidean(0, 0) == 0``.
    """

    if not is_numeric(a) or not is_numeric(b):
        raise InvalidArgument(f"Both arguments must be numeric, got {a!r} and {b!r}.")
    if not (is_finite(a) and is_finite(b)):
        raise InvalidArgument(f"Both arguments must be finite, got {a!r} and {b!r}.")

    while b != 0:
        a, b = b, a % b

    return abs(a)
