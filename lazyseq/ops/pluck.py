"""Plucking and packing

Project halves of a Seq2, or pack both halves into an Entry."""

from __future__ import annotations

from dataclasses import dataclass

from .._types import PushFn2, Yield
from ..seq import Seq

@dataclass(frozen=True, slots=True)
class Entry[K, V]:
    """A key/value pair emitted by entries()."""

    key: K
    value: V

def keys[K, V](src: PushFn2[K, V]) -> Seq[K]:
    """Emit the keys, or first items, of every pair."""

    def push(yield_: Yield[K]) -> None:
        src(lambda k, _: yield_(k))

    return Seq(push)

def values[K, V](src: PushFn2[K, V]) -> Seq[V]:
    """Emit the values, or second items, of every pair."""

    def push(yield_: Yield[V]) -> None:
        src(lambda _, v: yield_(v))

    return Seq(push)

def entries[K, V](src: PushFn2[K, V]) -> Seq[Entry[K, V]]:
    def push(yield_: Yield[Entry[K, V]]) -> None:
        src(lambda k, v: yield_(Entry(k, v)))

    return Seq(push)

__all__ = ("Entry", "keys", "values", "entries")
