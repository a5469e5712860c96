import pytest

from lazyseq import (
    Seq2,
    indexed,
    ints_from,
    ints_from_to,
    limit,
    limit2,
    numbers,
    pull,
    reduce_to_list,
    tap,
    tap2,
    values,
)


class TestLimitExactness:
    """limit yields exactly min(N, len(P)) values in source order"""

    @pytest.mark.parametrize("count", [0, 1, 3, 5, 8, 100])
    def test_finite_source(self, count):
        got = reduce_to_list(limit(ints_from_to(0, 5), count))
        assert got == list(range(min(count, 5)))

    @pytest.mark.parametrize("count", [0, 1, 7, 250])
    def test_infinite_source(self, count):
        assert reduce_to_list(limit(numbers(), count)) == list(range(count))

    def test_negative_count_yields_nothing(self):
        assert reduce_to_list(limit(numbers(), -3)) == []

    def test_nested_limits_take_the_smaller(self):
        assert reduce_to_list(limit(limit(numbers(), 10), 4)) == [0, 1, 2, 3]
        assert reduce_to_list(limit(limit(numbers(), 2), 4)) == [0, 1]

    def test_limit_is_restartable(self):
        seq = limit(values("abcdef"), 2)
        assert list(seq) == ["a", "b"]
        assert list(seq) == ["a", "b"]


class TestLimitUpstream:
    """limit stops and releases the upstream run promptly"""

    def test_infinite_source_is_released(self, tracker):
        assert reduce_to_list(limit(tracker.counting(), 5)) == [0, 1, 2, 3, 4]
        assert tracker.produced == 5
        assert tracker.released == 1

    def test_zero_count_never_starts_source(self, tracker):
        assert reduce_to_list(limit(tracker.counting(), 0)) == []
        assert tracker.started == 0
        assert tracker.released == 0

    def test_upstream_released_before_last_value_is_handed_out(self, tracker):
        cursor = pull(limit(tracker.counting(), 2))
        assert next(cursor) == 0
        assert tracker.released == 0
        assert next(cursor) == 1
        assert tracker.released == 1
        assert tracker.produced == 2
        cursor.close()

    def test_downstream_stop_is_propagated(self, tracker):
        seen = []

        def step(v: int) -> bool:
            seen.append(v)
            return v < 2

        assert limit(tracker.counting(), 100).for_each(step) is False
        assert seen == [0, 1, 2]
        assert tracker.produced == 3
        assert tracker.released == 1

    def test_source_shorter_than_count(self, tracker):
        assert reduce_to_list(limit(tracker.finite("ab"), 10)) == ["a", "b"]
        assert tracker.released == 1

    def test_closing_cursor_releases_upstream(self, tracker):
        cursor = pull(limit(tracker.counting(), 100))
        next(cursor)
        cursor.close()
        assert tracker.released == 1

    def test_stateful_source_is_not_overdrawn(self):
        seq = ints_from(1)
        assert reduce_to_list(limit(seq, 3)) == [1, 2, 3]
        assert reduce_to_list(limit(seq, 3)) == [4, 5, 6]


class TestLimit2:
    """limit over key/value producers"""

    def test_pairs(self):
        got = list(limit2(indexed(["a", "b", "c", "d"]), 3))
        assert got == [(0, "a"), (1, "b"), (2, "c")]

    def test_returns_seq2(self):
        seen = []
        seq = limit2(indexed("abc"), 2)
        assert isinstance(seq, Seq2)
        seq.for_each(lambda k, v: seen.append(k) or True)
        assert seen == [0, 1]

    def test_zero_count(self):
        assert list(limit2(indexed("abc"), 0)) == []


class TestTap:
    """Observation-only effects"""

    def test_effect_sees_every_value(self):
        seen = []
        got = reduce_to_list(tap(values([1, 2, 3]), seen.append))
        assert got == [1, 2, 3]
        assert seen == [1, 2, 3]

    def test_effect_is_lazy_under_limit(self):
        seen = []
        seq = limit(tap(numbers(), seen.append), 4)
        assert seen == []
        reduce_to_list(seq)
        assert seen == [0, 1, 2, 3]

    def test_tap2(self):
        seen = []
        got = list(tap2(indexed("ab"), lambda k, v: seen.append(f"{k}:{v}")))
        assert got == [(0, "a"), (1, "b")]
        assert seen == ["0:a", "1:b"]
