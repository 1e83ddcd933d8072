"""
Eager primality reference.

Responsibility: independent oracle for checking sieve output. Shares no
code with the lazy engine.
"""

from math import isqrt

import numpy as np


def is_prime(x: int) -> bool:
    """
    Trial division: True iff x > 1 has no divisor d with 1 < d < x.

    Parameters
    ----------
    x : int
        Integer to test.

    Returns
    -------
    bool
    """
    x = int(x)
    if x < 2:
        return False
    for d in range(2, isqrt(x) + 1):
        if x % d == 0:
            return False
    return True


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """Array of all primes <= N."""
    return np.nonzero(prime_flags_upto(N))[0]
