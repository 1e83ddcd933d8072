"""
The natural-number generator feeding the sieve.

Responsibility: f(i) = 2 + i, bounded by the int64 range. No filtering.

The generator is a pure function of the index, so any number of
independent cursors can be opened over it.
"""

import numpy as np

from .errors import InvalidArgument, NumericOverflow, check_count
from .lazy_sequence import LazySequence

FIRST_NATURAL = 2
INT64_MAX = int(np.iinfo(np.int64).max)


def natural_at(i: int, bound: int = INT64_MAX) -> int:
    """
    Return the i-th natural of the stream, 2 + i.

    Parameters
    ----------
    i : int
        Zero-based index.
    bound : int
        Largest value that may be produced (inclusive).

    Returns
    -------
    int
        2 + i.

    Raises
    ------
    NumericOverflow
        If 2 + i exceeds bound.
    """
    value = FIRST_NATURAL + i
    if value > bound:
        raise NumericOverflow(f"natural {value} exceeds bound {bound}")
    return value


def bounded_naturals(bound: int):
    """Return an index function like natural_at with a custom bound."""
    bound = check_count(bound, 'bound')
    if bound > INT64_MAX:
        raise InvalidArgument(f"bound must be <= {INT64_MAX}, got {bound}")

    def at(i: int) -> int:
        return natural_at(i, bound)

    return at


def naturals(bound: int = INT64_MAX) -> LazySequence:
    """Fresh sequence 2, 3, 4, ... positioned at its start."""
    return LazySequence.from_function(bounded_naturals(bound))


class CountingNaturals:
    """
    Instrumented generator: behaves like natural_at and counts calls.

    `inspected` is the number of raw naturals handed out so far, across
    every cursor opened on this instance.
    """

    def __init__(self, bound: int = INT64_MAX):
        self._at = bounded_naturals(bound)
        self.inspected = 0

    def __call__(self, i: int) -> int:
        value = self._at(i)
        self.inspected += 1
        return value

    def sequence(self) -> LazySequence:
        return LazySequence.from_function(self)
