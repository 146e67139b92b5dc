from __future__ import annotations

import io
import sys

from _infra import banner, run
from kungfu import Error, Ok

from lazyseq import filter, source, take_n


def main() -> None:
    banner("03_files: directory walk")

    root = sys.argv[1] if len(sys.argv) > 1 else "."
    files = filter(source.dir_walk_results(root), lambda r: isinstance(r, Error) or not r.unwrap().entry.is_dir)
    for result in take_n(files, 10):
        match result:
            case Ok(step):
                print(step.full_path)
            case Error(err):
                print(f"error: {err!r}")

    banner("line scanner")
    scanner = source.LineScanner(io.StringIO("first\nsecond\r\nthird"))
    for line in source.scanner_text(scanner):
        print(repr(line))
    match scanner.err():
        case Ok(_):
            print("clean end of input")
        case Error(err):
            print(f"read failed: {err!r}")


if __name__ == "__main__":
    run(main)
