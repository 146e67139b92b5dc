from __future__ import annotations

from _infra import CountingSource, banner, run

from lazyseq import Seq, deduplicate, filter, map, pairwise, take_n, to


def main() -> None:
    banner("01_quickstart: map + filter + take_n")

    source = CountingSource(limit=1_000_000)
    numbers = source.seq()
    evens = filter(numbers, lambda i: i % 2 == 0)
    squares = map(evens, lambda i: i * i)
    first_five = take_n(squares, 5)

    print(to.collect(first_five))
    print(f"produced only {source.produced} of {source.limit}")

    banner("fluent style")
    readings = Seq.of(3, 3, 4, 4, 4, 9, 2, 2)
    steps = deduplicate(readings).pairwise().map21(lambda a, b: b - a)
    print(steps.to_list())

    banner("terminal consumers")
    low, found = Seq.of(8, 2, 3, 10).min()
    print(f"min={low} found={found}")
    total = to.reduce(Seq.of(1, 2, 3, 4), 0, lambda acc, cur: (acc + cur, True))
    print(f"sum={total}")

    banner("python iteration")
    for a, b in pairwise(Seq.of("a", "b", "c")):
        print(a, "->", b)


if __name__ == "__main__":
    run(main)
