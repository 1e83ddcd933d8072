"""
Baselines the correct sieve is compared against.

Responsibility: skeptic-proofing. Each baseline breaks the sieve in one
controlled way so tests and experiments can show the difference.

shared_divisor_primes is the capture hazard kept on purpose: every
filter closes over the same local variable `prime`, which is reassigned
after each discovery. By the time a filter runs, it tests against the
latest prime instead of its own, and the output degenerates to
[2, 3, 5, 6, 7, 8, 9, 10, 11, 12] for n = 10. Do not use it to
generate primes.
"""

import numpy as np

from .errors import check_count
from .lazy_sequence import LazySequence
from .naturals import natural_at


def shared_divisor_primes(n: int, generator=natural_at) -> np.ndarray:
    """
    Faulty sieve: all stages share one mutable divisor.

    Each step pulls the head of the composed recipe from a fresh cursor
    (drop(0) restarts from the generator), then wraps the recipe in
    drop(1) and a filter whose lambda reads `prime` when it runs.

    Parameters
    ----------
    n : int
        Number of outputs.
    generator : callable
        Index function for the raw naturals.

    Returns
    -------
    np.ndarray
        Strictly increasing int64 array of length n; not all primes.
    """
    n = check_count(n)
    sequence = LazySequence.from_function(generator)
    found = []
    prime = None
    while len(found) < n:
        prime = sequence.drop(0).produce_next()
        found.append(prime)
        sequence = sequence.drop(1).filter(lambda x: x % prime != 0)
    return np.array(found, dtype=np.int64)


def frozen_divisor_primes(n: int, generator=natural_at) -> np.ndarray:
    """
    Same recomposition as shared_divisor_primes, divisor passed by value.

    Differs only in handing `prime` to filter as an argument, which
    freezes it per stage. Recursion depth grows with n; keep n small.
    """
    n = check_count(n)
    sequence = LazySequence.from_function(generator)
    found = []
    while len(found) < n:
        prime = sequence.drop(0).produce_next()
        found.append(prime)
        sequence = sequence.drop(1).filter(_not_multiple, prime)
    return np.array(found, dtype=np.int64)


def naturals_baseline(n: int, generator=natural_at) -> np.ndarray:
    """No stages at all: the first n raw naturals."""
    return LazySequence.from_function(generator).take(n)


def _not_multiple(x: int, divisor: int) -> bool:
    return x % divisor != 0
