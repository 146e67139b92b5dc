"""
Line scanner
============

Построчное чтение текстового потока.

LineScanner reads lines from a text stream and remembers the first error
instead of raising it. scanner_text() turns a scanner into a Seq[str].
After draining, the caller must check scanner.err(): the sequence simply
ends early on a read error, which is indistinguishable from end of input.

    scanner = LineScanner(stream)
    for line in scanner_text(scanner):
        ...
    match scanner.err():
        case Error(exc):
            ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from kungfu import Error, Ok, Result

from .._errors import LineTooLongError
from .._types import Yield
from ..seq import Seq

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanPolicy:
    """Limits for LineScanner."""

    max_token_size: int = 64 * 1024

    def __post_init__(self) -> None:
        if self.max_token_size < 1:
            raise ValueError("ScanPolicy.max_token_size must be >= 1")


class LineScanner:
    """
    Line-by-line reader over a text stream.

    Trailing "\\n" or "\\r\\n" is stripped. A final line without a newline
    is still emitted; a trailing newline does not produce an empty line.
    Cancellation is done by closing the stream.
    """

    __slots__ = ("_reader", "_policy", "_text", "_error", "_done")

    def __init__(self, reader: TextIO, policy: ScanPolicy = ScanPolicy()) -> None:
        self._reader = reader
        self._policy = policy
        self._text = ""
        self._error: Exception | None = None
        self._done = False

    def scan(self) -> bool:
        """Advance to the next line. False at end of input or after an error."""
        if self._done:
            return False

        limit = self._policy.max_token_size
        try:
            # +2 leaves room for "\r\n" after a line of exactly `limit` chars.
            line = self._reader.readline(limit + 2)
        except (OSError, ValueError) as exc:
            # ValueError covers decode errors and reads from a closed stream.
            return self._fail(exc)

        if not line:
            self._done = True
            return False

        text = line.removesuffix("\n").removesuffix("\r")
        if len(text) > limit:
            return self._fail(LineTooLongError(limit))

        self._text = text
        return True

    def _fail(self, exc: Exception) -> bool:
        logger.debug("scan stopped: %r", exc)
        self._error = exc
        self._done = True
        self._text = ""
        return False

    @property
    def text(self) -> str:
        """The line produced by the last successful scan()."""
        return self._text

    def err(self) -> Result[None, Exception]:
        """Ok(None) at a clean end of input, Error(exc) if reading failed."""
        if self._error is not None:
            return Error(self._error)
        return Ok(None)


def scanner_text(scanner: LineScanner) -> Seq[str]:
    """
    Emit every line scanner reads.

    The sequence never raises for read errors; check scanner.err()
    once it is drained.
    """

    def push(yield_: Yield[str]) -> None:
        while scanner.scan():
            if not yield_(scanner.text):
                return

    return Seq(push)


__all__ = ("LineScanner", "ScanPolicy", "scanner_text")
