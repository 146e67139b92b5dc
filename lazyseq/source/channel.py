"""Channel → sequence"""

from __future__ import annotations

from .._types import Yield
from ..cancel import CancelToken
from ..channel import Channel
from ..seq import Seq

def chan[T](token: CancelToken, ch: Channel[T]) -> Seq[T]:
    """
    Emit values received on ch.

    Stops when ch is closed and drained or when token fires, whichever
    comes first. A blocked receive wakes up for either.
    """

    def push(yield_: Yield[T]) -> None:
        while True:
            value, ok = ch.recv(token)
            if not ok:
                return
            if not yield_(value):  # type: ignore[arg-type]
                return

    return Seq(push)

__all__ = ("chan",)
