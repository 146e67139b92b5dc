"""
Tests for pull cursors
"""

from __future__ import annotations

import contextvars
import threading

import pytest

from lazyseq import ContinuedIterationError, Seq, pairwise, pull, pull2, take_n, to
from lazyseq.source import from_pairs


class TestCursor:
    """Test the push -> pull adapter"""

    def test_next_until_exhausted(self, probe):
        """Test values arrive in order, then exhaustion is sticky"""
        src = probe(1, 2, 3)

        with pull(src) as cursor:
            assert cursor.next() == (1, True)
            assert cursor.next() == (2, True)
            assert cursor.next() == (3, True)
            assert cursor.next() == (None, False)
            assert cursor.next() == (None, False)

        assert src.finished == 1

    def test_lazy_start(self, probe):
        """Test the source is not started until the first next()"""
        src = probe(1, 2, 3)

        cursor = pull(src)
        assert src.runs == 0

        cursor.close()
        assert src.runs == 0
        assert cursor.next() == (None, False)

    def test_single_element_lookahead(self, probe):
        """Test the producer is suspended right after each hand-off"""
        src = probe(*range(10))

        with pull(src) as cursor:
            cursor.next()
            cursor.next()
            assert src.produced == 2
            assert src.reads == 1

    def test_close_early_unwinds_source(self, probe):
        """Test close() makes the pending yield return False"""
        src = probe(*range(10))

        cursor = pull(src)
        cursor.next()
        cursor.next()
        cursor.close()

        assert src.finished == 1
        assert src.produced == 2
        assert src.reads == 1
        assert cursor.closed

    def test_close_is_idempotent(self, probe):
        """Test closing twice is harmless"""
        cursor = pull(probe(1, 2))
        cursor.next()
        cursor.close()
        cursor.close()

        assert cursor.next() == (None, False)

    def test_python_iteration(self, probe):
        """Test the iterator protocol"""
        with pull(probe(4, 5, 6)) as cursor:
            assert list(cursor) == [4, 5, 6]

    def test_source_exception_surfaces_on_next(self):
        """Test errors raised by the source reach the caller"""

        def broken(yield_):
            yield_(1)
            raise KeyError("boom")

        cursor = pull(broken)
        assert cursor.next() == (1, True)
        with pytest.raises(KeyError):
            cursor.next()
        assert cursor.next() == (None, False)

    def test_source_exception_on_close(self):
        """Test errors raised while the source unwinds surface from close()"""

        def fails_on_stop(yield_):
            if not yield_(1):
                raise ValueError("cleanup failed")

        cursor = pull(fails_on_stop)
        cursor.next()
        with pytest.raises(ValueError, match="cleanup failed"):
            cursor.close()

    def test_yield_after_stop_is_an_error(self):
        """Test a source ignoring the stop signal is reported"""

        def stubborn(yield_):
            yield_(1)
            yield_(2)

        cursor = pull(stubborn)
        cursor.next()
        with pytest.raises(ContinuedIterationError):
            cursor.close()

    def test_consumer_error_still_closes(self, probe):
        """Test the context manager closes on exceptions"""
        src = probe(*range(10))

        with pytest.raises(RuntimeError):
            with pull(src) as cursor:
                cursor.next()
                raise RuntimeError("consumer failed")

        assert src.finished == 1

    def test_no_threads_leak(self, probe):
        """Test every producer thread is joined"""
        before = threading.active_count()

        for _ in range(20):
            with pull(probe(*range(5))) as cursor:
                cursor.next()

        assert threading.active_count() <= before

    def test_seq_iteration_uses_cursor(self, probe):
        """Test breaking out of a for loop over a Seq stops the source"""
        src = probe(*range(100))

        for value in Seq(src):
            if value == 3:
                break

        assert src.produced == 4
        assert src.finished == 1


request_id: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="unset")


class TestCursorContext:
    """Test the producer sees the caller's context variables"""

    @staticmethod
    def tagged(seen: list[str]):
        def push(yield_):
            for i in range(5):
                seen.append(request_id.get())
                if not yield_(i):
                    return

        return push

    def test_take_n(self):
        seen: list[str] = []
        token = request_id.set("req-42")
        try:
            assert to.collect(take_n(self.tagged(seen), 3)) == [0, 1, 2]
        finally:
            request_id.reset(token)

        assert seen == ["req-42"] * 3

    def test_pairwise(self):
        seen: list[str] = []
        token = request_id.set("req-7")
        try:
            assert len(to.collect2(pairwise(self.tagged(seen)))) == 4
        finally:
            request_id.reset(token)

        assert seen == ["req-7"] * 5

    def test_for_loop(self):
        seen: list[str] = []
        token = request_id.set("req-9")
        try:
            assert list(Seq(self.tagged(seen))) == [0, 1, 2, 3, 4]
        finally:
            request_id.reset(token)

        assert set(seen) == {"req-9"}

    def test_source_changes_stay_local(self):
        def push(yield_):
            request_id.set("inside")
            yield_(request_id.get())

        assert to.collect(take_n(push, 1)) == ["inside"]
        assert request_id.get() == "unset"


class TestCursor2:
    """Test the paired cursor"""

    def test_pairs(self):
        with pull2(from_pairs([("a", 1), ("b", 2)])) as cursor:
            assert cursor.next() == ("a", 1, True)
            assert cursor.next() == ("b", 2, True)
            assert cursor.next() == (None, None, False)

    def test_iteration(self):
        with pull2(from_pairs([("a", 1), ("b", 2)])) as cursor:
            assert list(cursor) == [("a", 1), ("b", 2)]
        assert cursor.closed
