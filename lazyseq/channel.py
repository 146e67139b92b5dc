"""
Channel
=======

Канал между потоками: буферизованный, небуферизованный или безграничный.

capacity:
- 0     unbuffered: a send completes only when a receiver is waiting for it
- N > 0 bounded buffer of N values
- None  unbounded buffer

Blocking sends and receives accept a CancelToken and give up as soon as it
fires. Cancellation wins when both the token and the channel are ready,
except on an unbuffered channel: a value whose send already returned True
was handed to a waiting receiver and is always delivered.
"""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator

from ._errors import ChannelClosedError
from .cancel import CancelToken


class Channel[T]:
    """Closable FIFO channel for handing values between threads."""

    __slots__ = ("_capacity", "_items", "_closed", "_cond", "_receivers")

    def __init__(self, capacity: int | None = 0) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("Channel capacity must be >= 0 or None")
        self._capacity = capacity
        self._items: deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition(threading.Lock())
        # receivers currently blocked in recv(); lets unbuffered sends complete
        self._receivers = 0

    @property
    def capacity(self) -> int | None:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def _has_room(self) -> bool:
        if self._capacity is None:
            return True
        if self._capacity == 0:
            return self._receivers > len(self._items)
        return len(self._items) < self._capacity

    def _wake(self) -> None:
        with self._cond:
            self._cond.notify_all()

    def send(self, value: T, token: CancelToken | None = None) -> bool:
        """
        Put value on the channel, blocking while there is no room.

        Returns False if token fired before the value could be sent.
        Raises ChannelClosedError if the channel is (or gets) closed.
        """
        unregister = token.on_cancel(self._wake) if token is not None else None
        try:
            with self._cond:
                while True:
                    if self._closed:
                        raise ChannelClosedError()
                    if token is not None and token.cancelled:
                        return False
                    if self._has_room():
                        break
                    self._cond.wait()
                self._items.append(value)
                self._cond.notify_all()
                return True
        finally:
            if unregister is not None:
                unregister()

    def recv(self, token: CancelToken | None = None) -> tuple[T | None, bool]:
        """
        Take the next value, blocking until one is available.

        Returns (None, False) once the channel is closed and drained, or
        as soon as token fires. On an unbuffered channel a value that a
        sender already handed over is returned even if token has fired.
        """
        unregister = token.on_cancel(self._wake) if token is not None else None
        try:
            with self._cond:
                self._receivers += 1
                # A receiver arriving unblocks unbuffered senders.
                self._cond.notify_all()
                try:
                    while True:
                        # Unbuffered: items are already handed off to waiting receivers.
                        handed_off = self._capacity == 0 and bool(self._items)
                        if token is not None and token.cancelled and not handed_off:
                            return None, False
                        if self._items:
                            value = self._items.popleft()
                            self._cond.notify_all()
                            return value, True
                        if self._closed:
                            return None, False
                        self._cond.wait()
                finally:
                    self._receivers -= 1
        finally:
            if unregister is not None:
                unregister()

    def close(self) -> None:
        """Close the channel. Buffered values can still be received. Idempotent."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        """Receive until the channel is closed and drained."""
        while True:
            value, ok = self.recv()
            if not ok:
                return
            yield value  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"Channel(capacity={self._capacity!r}, closed={self._closed})"


__all__ = ("Channel",)
