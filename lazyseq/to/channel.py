"""
Sequence → channel
==================

Перекачка последовательности в канал из фонового потока.
"""

from __future__ import annotations

import itertools
import logging
import threading

from .._types import PushFn
from ..cancel import CancelToken
from ..channel import Channel

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


def chan[T](src: PushFn[T], token: CancelToken, capacity: int | None = 0) -> Channel[T]:
    """
    Start a daemon thread that drains src into a new channel.

    The thread stops when src is exhausted or token fires, and always
    closes the channel. A send blocked on a full channel is abandoned as
    soon as token fires.

    Important: a push loop cannot be interrupted mid-element. The thread
    only notices cancellation when src calls yield, so a source that
    stalls keeps it alive. Make such sources watch the same token.

    An exception raised by src ends the stream early and is reported once,
    through threading.excepthook on the worker.
    """
    out: Channel[T] = Channel(capacity)

    def accept(value: T) -> bool:
        if token.cancelled:
            return False
        if not out.send(value, token):
            logger.debug("send abandoned: token cancelled")
            return False
        return True

    def run() -> None:
        try:
            src(accept)
        finally:
            out.close()
            logger.debug("worker for %r finished (cancelled=%s)", out, token.cancelled)

    worker = threading.Thread(target=run, name=f"lazyseq-chan-{next(_ids)}", daemon=True)
    logger.debug("starting worker %s for %r", worker.name, out)
    worker.start()
    return out


__all__ = ("chan",)
