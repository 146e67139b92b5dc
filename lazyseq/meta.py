"""
Transformation constructors
===========================

Экспериментальный API для композиции преобразований.

Each constructor returns a function from sequence to sequence, so
pipelines can be named and reused:

    evens_doubled = meta.combine(meta.filter(is_even), meta.map(double))
    result = evens_doubled(numbers)

Prefer naming intermediate sequences over long anonymous chains; reach for
these helpers when the same combination shows up more than twice.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable

from ._helpers import identity
from ._types import Predicate, PushFn, Transformer
from .ops import transform
from .seq import Seq


def map[T, V](fn: Callable[[T], V]) -> Transformer[PushFn[T], Seq[V]]:
    """Return a transformer that applies ops.map with fn."""

    def apply(src: PushFn[T]) -> Seq[V]:
        return transform.map(src, fn)

    return apply


def filter[T](predicate: Predicate[T]) -> Transformer[PushFn[T], Seq[T]]:
    """Return a transformer that applies ops.filter with predicate."""

    def apply(src: PushFn[T]) -> Seq[T]:
        return transform.filter(src, predicate)

    return apply


def combine[A, B, C](
    first: Transformer[A, B],
    second: Transformer[B, C],
) -> Transformer[A, C]:
    """Compose two transformers: first, then second."""

    def apply(src: A) -> C:
        return second(first(src))

    return apply


def compose(*stages: Transformer[typing.Any, typing.Any]) -> Transformer[typing.Any, typing.Any]:
    """Compose any number of transformers left to right. No stages = identity."""
    return functools.reduce(combine, stages, identity)


def pipe(src: typing.Any, *stages: Transformer[typing.Any, typing.Any]) -> typing.Any:
    """Feed src through stages, left to right."""
    return compose(*stages)(src)


__all__ = ("map", "filter", "combine", "compose", "pipe")
