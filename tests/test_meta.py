"""
Tests for transformation constructors
"""

from __future__ import annotations

from lazyseq import Seq, meta, to


def is_even(i: int) -> bool:
    return i % 2 == 0


def double(i: int) -> int:
    return i * 2


class TestMeta:
    """Test meta constructors"""

    def test_map(self):
        assert to.collect(meta.map(double)(Seq.of(1, 2, 3))) == [2, 4, 6]

    def test_filter(self):
        assert to.collect(meta.filter(is_even)(Seq.of(1, 2, 3, 4))) == [2, 4]

    def test_combine(self):
        evens_doubled = meta.combine(meta.filter(is_even), meta.map(double))
        assert to.collect(evens_doubled(Seq.from_iterable(range(7)))) == [0, 4, 8, 12]

    def test_combine_order(self):
        doubled_evens = meta.combine(meta.map(double), meta.filter(is_even))
        assert to.collect(doubled_evens(Seq.of(1, 2, 3))) == [2, 4, 6]

    def test_compose(self):
        stages = meta.compose(meta.map(lambda i: i + 1), meta.filter(is_even), meta.map(str))
        assert to.collect(stages(Seq.of(1, 2, 3, 4))) == ["2", "4"]

    def test_compose_nothing_is_identity(self):
        src = Seq.of(1)
        assert meta.compose()(src) is src

    def test_pipe(self):
        got = meta.pipe(Seq.of(1, 2, 3, 4), meta.filter(is_even), meta.map(double))
        assert to.collect(got) == [4, 8]

    def test_reuse(self):
        evens = meta.filter(is_even)
        assert to.collect(evens(Seq.of(1, 2))) == [2]
        assert to.collect(evens(Seq.of(3, 4, 6))) == [4, 6]
