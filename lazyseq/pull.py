"""
Pull cursors
============

Адаптер push → pull: превращает Seq в явный курсор next/close.

The source's push loop runs on a helper thread, but the two sides never run
at the same time: the producer is parked inside yield until the caller asks
for the next element, and the caller is parked inside next() until the
producer hands one over or returns. At most one element is in flight.

The producer runs inside a copy of the contextvars context taken when the
cursor is created, so ContextVar values set by the caller are visible to the
source. Thread affinity is not carried over: objects bound to the calling
thread (an sqlite3 connection with check_same_thread=True, threading.local
data) cannot be used from a source pulled through a cursor. Drain such
sources with the single-pass operators or by calling them directly.

A cursor must be closed on every path. Use it as a context manager:

    with pull(src) as cursor:
        for value in cursor:
            ...
"""

from __future__ import annotations

import contextvars
import itertools
import logging
import threading

from ._errors import ContinuedIterationError
from ._helpers import tupled
from ._types import PushFn, PushFn2

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


class Cursor[T]:
    """
    Pull view over a push function.

    - next() returns (value, True), or (None, False) once exhausted
    - close() stops the producer and waits for it to unwind
    - exceptions raised by the producer surface from next() or close()

    Not safe for use from several threads at once.
    """

    __slots__ = (
        "_src",
        "_ctx",
        "_resume",
        "_handoff",
        "_thread",
        "_value",
        "_exited",
        "_stopping",
        "_done",
        "_error",
    )

    def __init__(self, src: PushFn[T], /) -> None:
        self._src = src
        self._ctx = contextvars.copy_context()
        self._resume = threading.Semaphore(0)
        self._handoff = threading.Semaphore(0)
        self._thread: threading.Thread | None = None
        self._value: T | None = None
        # producer returned or raised
        self._exited = False
        # close() asked the producer to stop
        self._stopping = False
        # exhausted or closed, as seen by the caller
        self._done = False
        self._error: BaseException | None = None

    # Producer side (helper thread)

    def _produce(self) -> None:
        try:
            self._ctx.run(self._src, self._yield)
        except BaseException as exc:
            # Re-raised on the caller's side by _finish().
            self._error = exc
        finally:
            self._exited = True
            self._handoff.release()

    def _yield(self, value: T) -> bool:
        if self._stopping:
            raise ContinuedIterationError()
        self._value = value
        self._handoff.release()
        self._resume.acquire()
        return not self._stopping

    # Caller side

    def next(self) -> tuple[T | None, bool]:
        """Fetch the next element, starting the producer on first use."""
        if self._done:
            return None, False

        if self._thread is None:
            self._thread = threading.Thread(
                target=self._produce,
                name=f"lazyseq-pull-{next(_ids)}",
                daemon=True,
            )
            logger.debug("starting cursor producer %s", self._thread.name)
            self._thread.start()
        else:
            self._resume.release()

        self._handoff.acquire()
        if self._exited:
            self._finish()
            return None, False

        value, self._value = self._value, None
        return value, True

    def close(self) -> None:
        """Release the producer. Idempotent."""
        if self._done:
            return
        if self._thread is None:
            # Never started: the source was not touched at all.
            self._done = True
            return

        logger.debug("closing cursor producer %s early", self._thread.name)
        self._stopping = True
        self._resume.release()
        self._handoff.acquire()
        self._finish()

    def _finish(self) -> None:
        self._done = True
        if self._thread is not None:
            self._thread.join()
        error, self._error = self._error, None
        if error is not None:
            raise error

    @property
    def closed(self) -> bool:
        return self._done

    def __enter__(self) -> Cursor[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        value, ok = self.next()
        if not ok:
            raise StopIteration
        return value  # type: ignore[return-value]


class Cursor2[K, V]:
    """Pull view over a paired push function. next() returns (k, v, ok)."""

    __slots__ = ("_cursor",)

    def __init__(self, src: PushFn2[K, V], /) -> None:
        self._cursor: Cursor[tuple[K, V]] = Cursor(tupled(src))

    def next(self) -> tuple[K | None, V | None, bool]:
        pair, ok = self._cursor.next()
        if not ok or pair is None:
            return None, None, False
        return pair[0], pair[1], True

    def close(self) -> None:
        self._cursor.close()

    @property
    def closed(self) -> bool:
        return self._cursor.closed

    def __enter__(self) -> Cursor2[K, V]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Cursor2[K, V]:
        return self

    def __next__(self) -> tuple[K, V]:
        return next(self._cursor)


def pull[T](src: PushFn[T], /) -> Cursor[T]:
    """Adapt a push sequence into a cursor. The source starts on first next()."""
    return Cursor(src)


def pull2[K, V](src: PushFn2[K, V], /) -> Cursor2[K, V]:
    """Adapt a paired push sequence into a cursor."""
    return Cursor2(src)


__all__ = ("Cursor", "Cursor2", "pull", "pull2")
