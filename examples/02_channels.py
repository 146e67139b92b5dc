from __future__ import annotations

import time

from _infra import CountingSource, banner, run

from lazyseq import CancelToken, map, source, to


def main() -> None:
    banner("02_channels: sequence -> channel -> sequence")

    token = CancelToken.with_timeout(5.0)
    numbers = CountingSource(limit=10).seq()
    labelled = map(numbers, lambda i: f"item-{i}")

    ch = to.chan(labelled, token, capacity=2)
    for value in source.chan(token, ch):
        print(value)

    banner("cancellation")
    slow = CountingSource(limit=1_000)
    token = CancelToken()

    def throttled(i: int) -> int:
        time.sleep(0.01)
        return i

    ch = to.chan(map(slow.seq(), throttled), token)
    received = []
    for value in source.chan(token, ch):
        received.append(value)
        if len(received) == 3:
            token.cancel()
    print(f"received {received}, source produced {slow.produced}")


if __name__ == "__main__":
    run(main)
