"""
Incremental, lazily evaluated Sieve of Eratosthenes.

Responsibility: the pull loop. Each pull finds the next candidate that
every stage admits, emits it as prime and appends a new Stage for it.

Two equivalent views of the pipeline are maintained:

- the explicit, ordered list of stages, scanned iteratively per
  candidate (this is what produce_next uses, so stack depth stays flat
  however many primes have been found);
- the composed LazySequence `upstream`: the generator filtered once by
  a frozen prefix of the stage list. Pulling it also scans that prefix
  in a loop, so it is safe at any depth. The engine never pulls it.
"""

from enum import Enum
from functools import partial
from typing import Callable, Iterator, Tuple

import numpy as np

from .errors import NumericOverflow
from .lazy_sequence import END, LazySequence
from .naturals import natural_at
from .stage import Stage, admitted_by_prefix


class SieveState(Enum):
    INIT = 'init'
    RUNNING = 'running'
    EXHAUSTED = 'exhausted'


def _fresh_primes(generator: Callable[[int], int]) -> Iterator[int]:
    return iter(SieveEngine(generator))


class SieveEngine(LazySequence):
    """
    Infinite sequence of primes 2, 3, 5, 7, ...

    Parameters
    ----------
    generator : callable
        Index function for the raw naturals, f(i) = 2 + i by default.
        Must be pure so that composed views can restart from it.
    """

    def __init__(self, generator: Callable[[int], int] = natural_at):
        super().__init__(partial(_fresh_primes, generator))
        self._generator = generator
        self._candidates = LazySequence.from_function(generator)
        self._stages = []
        self._upstream = self._view(0)
        self._discovered = []
        self.naturals_inspected = 0
        self.state = SieveState.INIT

    @property
    def discovered(self) -> Tuple[int, ...]:
        """Primes emitted so far, in increasing order."""
        return tuple(self._discovered)

    @property
    def stages(self) -> Tuple[Stage, ...]:
        return tuple(self._stages)

    @property
    def upstream(self) -> LazySequence:
        """Composed view whose first element is the next prime."""
        return self._upstream

    def _view(self, count: int) -> LazySequence:
        return LazySequence.from_function(self._generator).filter(
            admitted_by_prefix, self._stages, count)

    def _next_candidate(self) -> int:
        while True:
            x = self._candidates.produce_next()
            if x is END:
                # cursor died on an earlier NumericOverflow
                raise NumericOverflow("generator bound already reached")
            self.naturals_inspected += 1
            if admitted_by_prefix(x, self._stages, len(self._stages)):
                return x

    def produce_next(self) -> int:
        """Pull the next prime and extend the pipeline with its stage."""
        self.state = SieveState.RUNNING
        candidate = self._next_candidate()
        stage = Stage(divisor=candidate, upstream=self._upstream)
        self._stages.append(stage)
        self._discovered.append(candidate)
        self._upstream = self._view(len(self._stages))
        return candidate

    def take(self, n: int) -> np.ndarray:
        """
        Emit the next n primes, then stop pulling.

        The engine is left EXHAUSTED; a later pull resumes where it stopped.
        """
        primes = super().take(n)
        self.state = SieveState.EXHAUSTED
        return primes


def create_prime_sequence() -> SieveEngine:
    """Fresh, infinite prime sequence positioned at its start."""
    return SieveEngine()
