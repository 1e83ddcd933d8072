"""
One filtering stage of the sieve.

Responsibility: bind a discovered prime to the predicate that removes
its multiples. Stages are frozen: the divisor is set once in the
constructor and cannot be reassigned afterwards.
"""

from dataclasses import dataclass

from .errors import InvalidArgument
from .lazy_sequence import LazySequence


@dataclass(frozen=True)
class Stage:
    """
    Filter unit for a single prime.

    Attributes
    ----------
    divisor : int
        The prime this stage removes multiples of.
    upstream : LazySequence
        Sequence whose first element is `divisor`. Owned by this stage.
        Built by the engine as the raw naturals filtered by the earlier
        stages in one pass, so `output` stays shallow at any depth.
    """

    divisor: int
    upstream: LazySequence

    def __post_init__(self):
        if self.divisor < 2:
            raise InvalidArgument(f"stage divisor must be >= 2, got {self.divisor}")

    def admits(self, x: int) -> bool:
        """True iff x is not a multiple of this stage's divisor."""
        return x % self.divisor != 0

    @property
    def output(self) -> LazySequence:
        """upstream.drop(1).filter(admits), composed without pulling."""
        return self.upstream.drop(1).filter(self.admits)


def admitted_by_prefix(x: int, stages, count: int) -> bool:
    """
    True iff the first `count` stages all admit x.

    `stages` is the engine's append-only stage list; `count` is fixed
    when the filter is composed, so later appends are never seen.
    Scanned in a loop, not through nested filters.
    """
    for i in range(count):
        if x % stages[i].divisor == 0:
            return False
    return True
