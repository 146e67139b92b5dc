"""
Tests for terminal consumers
"""

from __future__ import annotations

import pytest

from lazyseq import Seq, to


def is_even(i: int) -> bool:
    return i % 2 == 0


class TestFirst:
    """Test first and contains"""

    @pytest.mark.parametrize(
        ("items", "expected"),
        [
            ([1, 2, 3, 4], (2, True)),
            ([1, 3, 5], (None, False)),
            ([], (None, False)),
        ],
    )
    def test_first(self, items, expected):
        assert to.first(Seq.from_iterable(items), is_even) == expected

    def test_first_stops_source(self, probe):
        src = probe(1, 2, 3, 4)

        to.first(src, is_even)

        assert src.produced == 2
        assert src.finished == 1

    def test_contains(self):
        assert to.contains(Seq.of(1, 2, 3, 4, 5), lambda i: i == 3)
        assert not to.contains(Seq.of(1, 2, 4, 5), lambda i: i == 3)
        assert not to.contains(Seq.empty(), lambda i: True)


class TestExtremes:
    """Test min and max"""

    def test_min(self):
        assert to.min(Seq.of(8, 2, 3, 10)) == (2, True)
        assert to.min(Seq.empty()) == (None, False)

    def test_max(self):
        assert to.max(Seq.of(8, 2, 3, 10, 7)) == (10, True)
        assert to.max(Seq.empty()) == (None, False)

    def test_ties_keep_earliest(self):
        a, b = (1,), (1,)
        smallest, _ = to.min(Seq.of(a, b))
        largest, _ = to.max(Seq.of(a, b))
        assert smallest is a
        assert largest is a

    def test_strings(self):
        assert to.min(Seq.of("pear", "apple", "fig")) == ("apple", True)


class TestCount:
    """Test count"""

    @pytest.mark.parametrize(("items", "expected"), [([8, 2, 3, 10, 7], 5), ([], 0)])
    def test_count(self, items, expected):
        assert to.count(Seq.from_iterable(items)) == expected


class TestReduce:
    """Test reduce"""

    @staticmethod
    def sum_all(acc: int, cur: int) -> tuple[int, bool]:
        return acc + cur, True

    @pytest.mark.parametrize(
        ("items", "initial", "expected"),
        [
            ([1, 2, 3, 4], 0, 10),
            ([1, 2, 3, 4], 7, 17),
            ([], 10, 10),
        ],
    )
    def test_reduce(self, items, initial, expected):
        assert to.reduce(Seq.from_iterable(items), initial, self.sum_all) == expected

    def test_stop_keeps_last_accumulator(self, probe):
        """Test the accumulator returned with keep_going=False is the result"""
        src = probe(1, 2, 3, 4, 5)

        def until_over_five(acc: int, cur: int) -> tuple[int, bool]:
            acc += cur
            return acc, acc <= 5

        assert to.reduce(src, 0, until_over_five) == 6
        assert src.produced == 3


class TestCollect:
    """Test collect and collect2"""

    def test_collect(self):
        assert to.collect(Seq.of(1, 2, 3)) == [1, 2, 3]
        assert to.collect(Seq.empty()) == []

    def test_collect2(self):
        pairs = Seq.of("a", "bb").map12(lambda s: (s, len(s)))
        assert to.collect2(pairs) == [("a", 1), ("bb", 2)]
