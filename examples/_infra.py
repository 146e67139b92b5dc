from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from lazyseq import Seq


@dataclass(slots=True)
class CountingSource:
    """Numbers 0..limit-1 that remember how many were actually produced."""

    limit: int
    produced: int = 0

    def seq(self) -> Seq[int]:
        def push(yield_: Callable[[int], bool]) -> None:
            for i in range(self.limit):
                self.produced += 1
                if not yield_(i):
                    return

        return Seq(push)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
