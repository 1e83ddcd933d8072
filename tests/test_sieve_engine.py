"""
Tests for the incremental sieve engine.

Output is checked against the eager oracle in lazysieve.primes, which
shares no code with the engine.
"""

import dataclasses
import itertools

import pytest

from lazysieve.errors import InvalidArgument, NumericOverflow
from lazysieve.lazy_sequence import LazySequence, take
from lazysieve.metrics import is_strictly_increasing
from lazysieve.naturals import CountingNaturals, INT64_MAX, bounded_naturals, natural_at
from lazysieve.primes import is_prime, primes_upto
from lazysieve.sieve_engine import SieveEngine, SieveState, create_prime_sequence
from lazysieve.stage import Stage

FIRST_TEN = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


class TestPrimeSequence:
    """Externally observable properties of create_prime_sequence."""

    def test_take_zero_is_empty(self):
        assert len(take(create_prime_sequence(), 0)) == 0

    def test_first_ten(self):
        assert take(create_prime_sequence(), 10).tolist() == FIRST_TEN

    @pytest.mark.parametrize("n", [0, 1, 2, 10, 100, 500])
    def test_length_order_and_primality(self, n):
        primes = take(create_prime_sequence(), n)
        assert len(primes) == n
        assert is_strictly_increasing(primes)
        for p in primes:
            assert is_prime(p), f"{p} is not prime"

    def test_matches_eager_sieve(self):
        primes = take(create_prime_sequence(), 500)
        assert primes.tolist() == primes_upto(4000)[:500].tolist()

    def test_deterministic(self):
        a = take(create_prime_sequence(), 200)
        b = take(create_prime_sequence(), 200)
        assert a.tolist() == b.tolist()

    def test_consecutive_takes_continue(self):
        seq = create_prime_sequence()
        assert seq.take(4).tolist() == [2, 3, 5, 7]
        assert seq.take(3).tolist() == [11, 13, 17]

    def test_iteration(self):
        assert list(itertools.islice(create_prime_sequence(), 5)) == FIRST_TEN[:5]

    def test_drop_and_filter_on_primes(self):
        assert create_prime_sequence().drop(2).take(3).tolist() == [5, 7, 11]
        assert create_prime_sequence().filter(lambda p: p % 4 == 1).take(3).tolist() == [5, 13, 17]

    def test_negative_take(self):
        with pytest.raises(InvalidArgument):
            take(create_prime_sequence(), -1)

    def test_deep_pipeline_has_flat_stack(self):
        primes = take(create_prime_sequence(), 2000)
        assert primes.tolist() == primes_upto(17389)[:2000].tolist()


class TestLaziness:
    """The engine inspects only the naturals it needs."""

    def test_take_five_inspects_two_through_eleven(self):
        counter = CountingNaturals()
        SieveEngine(counter).take(5)
        assert counter.inspected == 10, f"inspected {counter.inspected}, expected 10"

    def test_count_independent_of_engine_history(self):
        first = CountingNaturals()
        second = CountingNaturals()
        SieveEngine(first).take(5)
        SieveEngine(second).take(5)
        assert first.inspected == second.inspected

    def test_resuming_inspects_only_new_naturals(self):
        counter = CountingNaturals()
        engine = SieveEngine(counter)
        engine.take(5)
        engine.take(5)
        assert counter.inspected == 28
        assert engine.naturals_inspected == 28

    def test_no_stage_built_beyond_request(self):
        engine = create_prime_sequence()
        engine.take(5)
        assert len(engine.stages) == 5


class TestEngineState:
    """INIT -> RUNNING -> EXHAUSTED transitions."""

    def test_initial_state(self):
        engine = create_prime_sequence()
        assert engine.state is SieveState.INIT
        assert engine.discovered == ()
        assert engine.stages == ()

    def test_running_after_pull(self):
        engine = create_prime_sequence()
        assert engine.produce_next() == 2
        assert engine.state is SieveState.RUNNING

    def test_exhausted_after_bounded_take(self):
        engine = create_prime_sequence()
        engine.take(3)
        assert engine.state is SieveState.EXHAUSTED
        assert engine.produce_next() == 7
        assert engine.state is SieveState.RUNNING

    def test_discovered_is_append_only_snapshot(self):
        engine = create_prime_sequence()
        engine.take(3)
        snapshot = engine.discovered
        engine.take(2)
        assert snapshot == (2, 3, 5)
        assert engine.discovered == (2, 3, 5, 7, 11)

    def test_composed_upstream_yields_next_primes(self):
        engine = create_prime_sequence()
        engine.take(6)
        assert engine.upstream.take(4).tolist() == [17, 19, 23, 29]
        assert engine.produce_next() == 17


class TestStage:
    """Each stage owns one immutable divisor."""

    def test_divisors_match_discovery_order(self):
        engine = create_prime_sequence()
        engine.take(10)
        assert [s.divisor for s in engine.stages] == FIRST_TEN

    def test_divisor_cannot_be_reassigned(self):
        stage = Stage(divisor=3, upstream=LazySequence.from_iterable([3, 4]))
        with pytest.raises(dataclasses.FrozenInstanceError):
            stage.divisor = 5

    def test_output_drops_head_and_multiples(self):
        upstream = LazySequence.from_iterable([3, 4, 5, 6, 7, 9, 10])
        stage = Stage(divisor=3, upstream=upstream)
        assert stage.output.take(10).tolist() == [4, 5, 7, 10]

    def test_admits(self):
        stage = Stage(divisor=5, upstream=LazySequence.from_iterable([5]))
        assert stage.admits(7)
        assert not stage.admits(25)

    @pytest.mark.parametrize("divisor", [0, 1, -3])
    def test_rejects_small_divisor(self, divisor):
        with pytest.raises(InvalidArgument):
            Stage(divisor=divisor, upstream=LazySequence.from_iterable([]))


class TestOverflow:
    """Candidates beyond the generator bound surface as NumericOverflow."""

    def test_natural_at_bound(self):
        assert natural_at(INT64_MAX - 2) == INT64_MAX
        with pytest.raises(NumericOverflow):
            natural_at(INT64_MAX - 1)

    def test_engine_raises_past_bound(self):
        engine = SieveEngine(bounded_naturals(10))
        assert engine.take(4).tolist() == [2, 3, 5, 7]
        with pytest.raises(NumericOverflow):
            engine.produce_next()

    def test_overflow_is_overflow_error(self):
        with pytest.raises(OverflowError):
            SieveEngine(bounded_naturals(3)).take(3)

    def test_overflow_repeats_on_later_pulls(self):
        engine = SieveEngine(bounded_naturals(10))
        engine.take(4)
        for _ in range(2):
            with pytest.raises(NumericOverflow):
                engine.produce_next()


class TestComposedView:
    """The exposed pipeline view stays shallow however deep the sieve is."""

    def test_upstream_after_two_thousand_stages(self):
        engine = create_prime_sequence()
        engine.take(2000)
        expected = int(primes_upto(17500)[2000])
        assert engine.upstream.produce_next() == expected
        assert engine.produce_next() == expected

    def test_stage_output_after_two_thousand_stages(self):
        engine = create_prime_sequence()
        engine.take(2000)
        last = engine.stages[-1]
        assert last.upstream.produce_next() == 17389
        assert last.output.take(1).tolist() == [int(primes_upto(17500)[2000])]

    def test_view_ignores_later_stages(self):
        engine = create_prime_sequence()
        engine.take(3)
        view = engine.upstream
        engine.take(5)
        assert view.take(3).tolist() == [7, 11, 13]

    def test_each_stage_upstream_starts_at_its_divisor(self):
        engine = create_prime_sequence()
        engine.take(10)
        assert [s.upstream.produce_next() for s in engine.stages] == FIRST_TEN
