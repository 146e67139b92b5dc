"""
Pytest configuration and shared fixtures
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from lazyseq import Seq


@dataclass
class Probe:
    """
    Push source over fixed items that records how it was driven.

    - produced: items handed to yield (counted before the call)
    - reads: yields that returned True
    - runs: how many times the push loop started
    - finished: push loop returned (normally or after a stop)
    """

    items: list[int]
    produced: int = 0
    reads: int = 0
    runs: int = 0
    finished: int = 0
    seen: list[int] = field(default_factory=list)

    def __call__(self, yield_: Callable[[int], bool]) -> None:
        self.runs += 1
        try:
            for item in self.items:
                self.produced += 1
                self.seen.append(item)
                if not yield_(item):
                    return
                self.reads += 1
        finally:
            self.finished += 1

    @property
    def seq(self) -> Seq[int]:
        return Seq(self)


@pytest.fixture
def probe() -> Callable[..., Probe]:
    """Factory: probe(1, 2, 3) or probe(*range(20))."""

    def make(*items: int) -> Probe:
        return Probe(list(items))

    return make


@pytest.fixture
def stop_after() -> Callable[..., Callable[..., bool]]:
    """Factory for a consumer that accepts n - 1 values and stops on the n-th."""

    def make(n: int, sink: list | None = None) -> Callable[..., bool]:
        calls = 0

        def accept(*value: object) -> bool:
            nonlocal calls
            calls += 1
            if sink is not None:
                sink.append(value[0] if len(value) == 1 else value)
            return calls < n

        return accept

    return make
