"""
Pull-based, possibly infinite integer sequences.

Responsibility: lazy composition (drop, filter) and materialization
(take). No knowledge of primes.

A LazySequence is a recipe plus a cursor. The recipe is a zero-argument
callable returning a fresh iterator; the cursor is opened on the first
pull and only ever moves forward. Composing with drop or filter builds a
new recipe on top of the old one and never touches either cursor, so a
composed sequence starts from the underlying generator when it is first
pulled.

Everything a composed recipe depends on (the drop count, the predicate,
the predicate's extra arguments) is bound when the recipe is built.
Predicates that need a parameter should receive it through filter's
*args rather than close over a variable that is later reassigned.
"""

import itertools
from functools import partial
from typing import Callable, Iterable, Iterator

import numpy as np

from .errors import NumericOverflow, check_count


class _End:
    """Singleton returned by produce_next once a finite sequence runs out."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'END'

    def __bool__(self) -> bool:
        return False


END = _End()


def _counted(f: Callable[[int], int], start: int) -> Iterator[int]:
    for i in itertools.count(start):
        yield f(i)


def _dropped(source: Callable[[], Iterator[int]], n: int) -> Iterator[int]:
    it = source()
    for _ in range(n):
        if next(it, END) is END:
            return
    yield from it


def _filtered(source: Callable[[], Iterator[int]], predicate: Callable[..., bool],
              args: tuple) -> Iterator[int]:
    for x in source():
        if predicate(x, *args):
            yield x


class LazySequence:
    """
    Ordered, pull-based sequence of integers.

    Parameters
    ----------
    source : callable
        Zero-argument callable returning a new iterator over the elements.
    """

    def __init__(self, source: Callable[[], Iterator[int]]):
        self._source = source
        self._cursor = None

    @classmethod
    def from_function(cls, f: Callable[[int], int], start: int = 0) -> 'LazySequence':
        """
        Sequence f(start), f(start + 1), ... with no backing storage.

        Parameters
        ----------
        f : callable
            Pure function from index to value.
        start : int
            First index.

        Returns
        -------
        LazySequence
            Infinite sequence positioned at its start.
        """
        return cls(partial(_counted, f, check_count(start, 'start')))

    @classmethod
    def from_iterable(cls, items: Iterable[int]) -> 'LazySequence':
        """Finite sequence over a snapshot of items."""
        snapshot = tuple(items)
        return cls(partial(iter, snapshot))

    def produce_next(self):
        """
        Advance by exactly one element.

        Returns
        -------
        int or END
            The next element, or END if the sequence is finite and spent.
        """
        if self._cursor is None:
            self._cursor = self._source()
        return next(self._cursor, END)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        value = self.produce_next()
        if value is END:
            raise StopIteration
        return value

    def drop(self, n: int) -> 'LazySequence':
        """
        Sequence that skips the first n elements of this recipe.

        Nothing is discarded until the returned sequence is pulled.

        Raises
        ------
        InvalidArgument
            If n is negative or not an integer.
        """
        n = check_count(n, 'n')
        return LazySequence(partial(_dropped, self._source, n))

    def filter(self, predicate: Callable[..., bool], *args) -> 'LazySequence':
        """
        Sequence of the elements x for which predicate(x, *args) holds.

        The predicate is called lazily, once per candidate, in order.
        args are stored as a tuple when the sequence is composed.
        """
        return LazySequence(partial(_filtered, self._source, predicate, tuple(args)))

    def take(self, n: int) -> np.ndarray:
        """
        Pull up to n elements and return them.

        Stops after the n-th element without pulling another one.

        Parameters
        ----------
        n : int
            Number of elements (n >= 0).

        Returns
        -------
        np.ndarray
            int64 array of length n, shorter only if the sequence ended.

        Raises
        ------
        InvalidArgument
            If n is negative or not an integer.
        NumericOverflow
            If an element does not fit in int64.
        """
        n = check_count(n, 'n')
        values = []
        while len(values) < n:
            value = self.produce_next()
            if value is END:
                break
            values.append(value)
        try:
            return np.array(values, dtype=np.int64)
        except OverflowError as e:
            raise NumericOverflow("element outside the int64 range") from e


def take(sequence: LazySequence, n: int) -> np.ndarray:
    """Materialize the first n elements of sequence (see LazySequence.take)."""
    return sequence.take(n)
