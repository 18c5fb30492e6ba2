"""Error types raised by the algorithm helpers."""


class InvalidArgument(ValueError):
    """Raised when an input fails validation before any computation starts."""
