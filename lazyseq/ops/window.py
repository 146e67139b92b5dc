"""
Window operators
================

Операторы с заглядыванием вперёд: pairwise / zip / deduplicate.

All of them hold at least one element while deciding what to forward, so
they pull from the source through a cursor. Cursors are closed on every
exit path, including when the consumer stops early or raises.
"""

from __future__ import annotations

import builtins

from .._types import PushFn, Yield, Yield2
from ..pull import pull
from ..seq import Seq, Seq2


def pairwise[T](src: PushFn[T]) -> Seq2[T, T]:
    """
    Emit every value together with the one that preceded it.

    Pairs form a sliding window of width two: [1, 2, 3] -> (1, 2), (2, 3).
    Sources shorter than two items emit nothing.

    Note: the window reads one item ahead. A consumer that stops after
    pair k has made the source produce item k + 2.
    """

    def push(yield_: Yield2[T, T]) -> None:
        with pull(src) as cursor:
            for prev in cursor:
                break
            else:
                return
            for cur in cursor:
                if not yield_(prev, cur):
                    return
                prev = cur

    return Seq2(push)


def zip[T, V](src1: PushFn[T], src2: PushFn[V]) -> Seq2[T, V]:
    """
    Emit a pair every time both sources have produced a value.

    No value is used twice; trailing values of the longer source are
    dropped. Output length is min(len(src1), len(src2)). When src2 runs
    out first, one extra value has already been drawn from src1.
    """

    def push(yield_: Yield2[T, V]) -> None:
        with pull(src1) as cursor1, pull(src2) as cursor2:
            for t, v in builtins.zip(cursor1, cursor2):
                if not yield_(t, v):
                    return

    return Seq2(push)


def deduplicate[T](src: PushFn[T]) -> Seq[T]:
    """
    Drop values equal to the one emitted right before them.

    Only consecutive runs collapse: [1, 1, 2, 1] -> [1, 2, 1].
    """

    def push(yield_: Yield[T]) -> None:
        with pull(src) as cursor:
            for prev in cursor:
                break
            else:
                return
            if not yield_(prev):
                return
            for cur in cursor:
                if cur == prev:
                    continue
                prev = cur
                if not yield_(cur):
                    return

    return Seq(push)


__all__ = ("pairwise", "zip", "deduplicate")
