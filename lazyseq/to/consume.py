"""
Terminal consumers
==================

Сворачивание последовательности в значение.

All consumers drive the source's push loop directly; none of them needs a
cursor. Absence of a value is reported with a flag, never an exception:

    value, found = first(src, is_even)
    if found:
        ...
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Predicate, PushFn, PushFn2, SupportsLessThan


def first[T](src: PushFn[T], predicate: Predicate[T]) -> tuple[T | None, bool]:
    """Return the first value predicate accepts and stop consuming src."""
    found: list[T] = []

    def accept(value: T) -> bool:
        if predicate(value):
            found.append(value)
            return False
        return True

    src(accept)
    if found:
        return found[0], True
    return None, False


def contains[T](src: PushFn[T], predicate: Predicate[T]) -> bool:
    """Report whether any value satisfies predicate. Stops at the first match."""
    _, found = first(src, predicate)
    return found


def _extreme[O: SupportsLessThan](
    src: PushFn[O],
    better: Callable[[O, O], bool],
) -> tuple[O | None, bool]:
    best: O | None = None
    seen = False

    def accept(value: O) -> bool:
        nonlocal best, seen
        if not seen:
            best, seen = value, True
        elif better(value, best):  # type: ignore[arg-type]
            best = value
        return True

    src(accept)
    return best, seen


def min[O: SupportsLessThan](src: PushFn[O]) -> tuple[O | None, bool]:
    """
    Return the smallest value and whether src emitted anything.

    For an empty source the value is None; check the flag first.
    Ties keep the earliest value.
    """
    return _extreme(src, lambda value, best: value < best)


def max[O: SupportsLessThan](src: PushFn[O]) -> tuple[O | None, bool]:
    """Like min, for the largest value."""
    return _extreme(src, lambda value, best: best < value)


def count[T](src: PushFn[T]) -> int:
    """Consume the entire source and report how many values it emitted."""
    n = 0

    def accept(_: T) -> bool:
        nonlocal n
        n += 1
        return True

    src(accept)
    return n


def reduce[T, A](
    src: PushFn[T],
    initial: A,
    step: Callable[[A, T], tuple[A, bool]],
) -> A:
    """
    Fold src from the left.

    step(acc, current) returns (new_acc, keep_going). Folding stops when
    keep_going is False, and the accumulator returned by that same call is
    the result. An exhausted source returns the last accumulator.
    """
    acc = initial

    def accept(value: T) -> bool:
        nonlocal acc
        acc, keep_going = step(acc, value)
        return keep_going

    src(accept)
    return acc


def collect[T](src: PushFn[T]) -> list[T]:
    """Drain src into a list."""
    out: list[T] = []

    def accept(value: T) -> bool:
        out.append(value)
        return True

    src(accept)
    return out


def collect2[K, V](src: PushFn2[K, V]) -> list[tuple[K, V]]:
    """Drain a paired source into a list of 2-tuples."""
    out: list[tuple[K, V]] = []

    def accept(k: K, v: V) -> bool:
        out.append((k, v))
        return True

    src(accept)
    return out


__all__ = (
    "first",
    "contains",
    "min",
    "max",
    "count",
    "reduce",
    "collect",
    "collect2",
)
