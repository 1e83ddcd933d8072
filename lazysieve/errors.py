"""
Typed failures raised by the sieve.

Responsibility: error taxonomy and argument checks only.
"""

import numpy as np


class SieveError(Exception):
    """Base class for every failure raised by lazysieve."""


class InvalidArgument(SieveError, ValueError):
    """A count or configuration value is out of range."""


class NumericOverflow(SieveError, OverflowError):
    """A candidate would exceed the representable integer range."""


def check_count(n, name: str = 'n') -> int:
    """
    Validate a non-negative element count.

    Parameters
    ----------
    n : int
        Count passed by the caller (Python or numpy integer).
    name : str
        Argument name used in the error message.

    Returns
    -------
    int
        The count as a Python int.

    Raises
    ------
    InvalidArgument
        If n is not an integer or is negative.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgument(f"{name} must be an integer, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {n}")
    return int(n)
