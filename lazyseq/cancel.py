"""
Cancel token
============

Одноразовый потокобезопасный сигнал отмены.

The channel bridges race blocking sends and receives against a token.
Timeouts are derived from a token, never built into the bridges.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CancelToken:
    """
    One-shot cancellation signal shared between threads.

    - cancel(): fire the signal (idempotent)
    - cancelled: whether it has fired
    - on_cancel(cb): run cb once when it fires; returns an unregister function
    """

    __slots__ = ("_lock", "_event", "_callbacks")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._callbacks: list[Callable[[], None]] = []

    @classmethod
    def with_timeout(cls, seconds: float) -> CancelToken:
        """Token that fires by itself after `seconds`."""
        token = cls()
        token.cancel_after(seconds)
        return token

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []
        # Outside the lock: callbacks may take other locks (see Channel).
        for callback in callbacks:
            callback()

    def cancel_after(self, seconds: float) -> threading.Timer:
        """Schedule cancel() on a daemon timer. The timer can be cancelled."""
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        timer = threading.Timer(seconds, self.cancel)
        timer.daemon = True
        timer.start()
        logger.debug("token %#x cancels in %.3fs", id(self), seconds)
        return timer

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or timeout elapses. Returns cancelled."""
        return self._event.wait(timeout)

    def on_cancel(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register callback to run when the token fires.

        If the token has already fired the callback runs immediately.
        The returned function unregisters it; calling it late is harmless.
        """
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                registered = True
            else:
                registered = False
        if not registered:
            callback()

        def unregister() -> None:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)

        return unregister

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self.cancelled})"


__all__ = ("CancelToken",)
