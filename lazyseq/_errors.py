from __future__ import annotations

class ContinuedIterationError(RuntimeError):
    """A push loop called yield after it was told to stop."""

    def __init__(self) -> None:
        super().__init__("continued iteration after yield returned False")

class ChannelClosedError(Exception):
    """send() on a closed channel."""

    def __init__(self) -> None:
        super().__init__("send on closed channel")

class LineTooLongError(Exception):
    """A scanned line exceeded ScanPolicy.max_token_size."""

    limit: int

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"line longer than {limit} characters")

__all__ = ("ChannelClosedError", "ContinuedIterationError", "LineTooLongError")
