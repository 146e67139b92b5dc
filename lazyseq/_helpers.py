"""Internal helpers for lazyseq.

Small adapters shared by several operator modules.
These are not part of the public API."""

from __future__ import annotations

from ._types import PushFn, PushFn2, Yield

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Shape adapters (PushFn2 <-> PushFn of tuples)
def tupled[K, V](src: PushFn2[K, V]) -> PushFn[tuple[K, V]]:
    """
    View a paired push function as a push function of 2-tuples.

    Used to pull paired sequences through a single-element cursor.
    """
    def push(yield_: Yield[tuple[K, V]]) -> None:
        src(lambda k, v: yield_((k, v)))
    return push

# Draining
def forward[T](src: PushFn[T], yield_: Yield[T]) -> bool:
    """
    Run src, handing every element to yield_.

    Returns False if yield_ asked to stop, so callers iterating several
    sources know to stop as well:

        for src in sources:
            if not forward(src, yield_):
                return
    """
    wants_more = True

    def accept(value: T) -> bool:
        nonlocal wants_more
        wants_more = yield_(value)
        return wants_more

    src(accept)
    return wants_more

__all__ = (
    "identity",
    "tupled",
    "forward",
)
