"""
Statistics reported on sieve output.

Responsibility: comparisons between output prefixes. Primality is
always judged by the oracle in primes.py, never by the engine.
"""

import numpy as np
from typing import Optional

from .primes import is_prime


def is_strictly_increasing(values: np.ndarray) -> bool:
    """True iff every element is larger than the one before it."""
    values = np.asarray(values)
    if len(values) < 2:
        return True
    return bool(np.all(np.diff(values) > 0))


def first_divergence(a: np.ndarray, b: np.ndarray) -> Optional[int]:
    """
    Index of the first position where a and b differ.

    Parameters
    ----------
    a, b : np.ndarray
        Sequences to compare.

    Returns
    -------
    int or None
        First differing index. If one is a prefix of the other, the
        length of the shorter one; None if they are identical.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    m = min(len(a), len(b))
    mismatches = np.nonzero(a[:m] != b[:m])[0]
    if len(mismatches) > 0:
        return int(mismatches[0])
    if len(a) != len(b):
        return m
    return None


def count_composites(values: np.ndarray) -> int:
    """Number of entries that fail the trial-division oracle."""
    return sum(1 for v in values if not is_prime(v))
