"""
Cropping operators
==================

Обрезка последовательностей: take / skip.

take_n, skip_n and skip_until pull from the source through a cursor so
they can stop it the moment they are done. take_while needs no lookahead
and runs the source's push loop directly.
"""

from __future__ import annotations

from .._types import Predicate, PushFn, Yield
from ..pull import pull
from ..seq import Seq


def take_n[T](src: PushFn[T], n: int) -> Seq[T]:
    """
    Emit the first n items of src, like src[:n].

    For n <= 0 the source is never started.
    """

    def push(yield_: Yield[T]) -> None:
        if n <= 0:
            return
        with pull(src) as cursor:
            for taken, value in enumerate(cursor, start=1):
                if not yield_(value) or taken >= n:
                    return

    return Seq(push)


def take_while[T](src: PushFn[T], predicate: Predicate[T]) -> Seq[T]:
    """Mirror src while predicate holds; stop at the first False."""

    def push(yield_: Yield[T]) -> None:
        def accept(value: T) -> bool:
            if not predicate(value):
                return False
            return yield_(value)

        src(accept)

    return Seq(push)


def skip_n[T](src: PushFn[T], n: int) -> Seq[T]:
    """Discard the first n items of src and forward the rest, like src[n:]."""

    def push(yield_: Yield[T]) -> None:
        with pull(src) as cursor:
            for _ in range(n):
                _, ok = cursor.next()
                if not ok:
                    return
            for value in cursor:
                if not yield_(value):
                    return

    return Seq(push)


def skip_until[T](src: PushFn[T], predicate: Predicate[T]) -> Seq[T]:
    """
    Discard values until predicate returns True for the first time.

    The first accepted value and everything after it are forwarded;
    predicate is not called again once it has matched.
    """

    def push(yield_: Yield[T]) -> None:
        with pull(src) as cursor:
            for value in cursor:
                if predicate(value):
                    if not yield_(value):
                        return
                    break
            for value in cursor:
                if not yield_(value):
                    return

    return Seq(push)


__all__ = ("take_n", "take_while", "skip_n", "skip_until")
