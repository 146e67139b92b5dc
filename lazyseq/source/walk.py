"""
Directory walk
==============

Обход дерева каталогов как Seq2[DirStep, OSError | None].

Order matches a depth-first, pre-order walk with entries of each directory
visited in lexical order; the root itself comes first. Errors are emitted
alongside the step they belong to and the consumer decides whether to
stop or keep going:

    for step, err in dir_walk("data"):
        if err is not None:
            log(err)
            continue
        ...
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._types import Yield2
from ..cancel import CancelToken
from ..ops.transform import map21
from ..seq import Seq, Seq2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkPolicy:
    """
    Traversal options.

    follow_symlinks descends into symlinked directories. There is no cycle
    detection, so only enable it on trees known to be acyclic.
    """

    follow_symlinks: bool = False


@dataclass(frozen=True, slots=True)
class DirEntry:
    """What the walk knows about a visited path."""

    name: str
    is_dir: bool
    is_symlink: bool = False


@dataclass(frozen=True, slots=True)
class DirStep:
    """
    One step of a walk.

    full_path is anchored at the walk root: walking "root" yields
    "root", "root/a.txt", ...
    entry is None only when the root itself could not be stat'ed.
    """

    full_path: str
    entry: DirEntry | None


def _entry_of(child: os.DirEntry[str], policy: WalkPolicy) -> DirEntry:
    try:
        is_dir = child.is_dir(follow_symlinks=policy.follow_symlinks)
    except OSError:
        is_dir = False
    try:
        is_symlink = child.is_symlink()
    except OSError:
        is_symlink = False
    return DirEntry(name=child.name, is_dir=is_dir, is_symlink=is_symlink)


def _walk(
    path: str,
    entry: DirEntry,
    yield_: Yield2[DirStep, OSError | None],
    token: CancelToken | None,
    policy: WalkPolicy,
) -> bool:
    """Visit path and everything below it. False means abort the whole walk."""
    if token is not None and token.cancelled:
        logger.debug("walk cancelled at %s", path)
        return False

    step = DirStep(path, entry)
    if not yield_(step, None):
        return False
    if not entry.is_dir:
        return True

    try:
        with os.scandir(path) as it:
            children = sorted(it, key=lambda child: child.name)
    except OSError as exc:
        logger.debug("cannot list %s: %s", path, exc)
        # Same step again, this time with the error.
        return yield_(step, exc)

    for child in children:
        child_path = os.path.join(path, child.name)
        if not _walk(child_path, _entry_of(child, policy), yield_, token, policy):
            return False
    return True


def dir_walk(
    root: str | os.PathLike[str],
    *,
    token: CancelToken | None = None,
    policy: WalkPolicy = WalkPolicy(),
) -> Seq2[DirStep, OSError | None]:
    """
    Emit every entry of root and its subdirectories.

    - a root that cannot be stat'ed yields (DirStep(root, None), err) and ends
    - a directory that cannot be listed is emitted a second time with its error
    - stopping the consumer aborts the traversal
    - a fired token stops it between steps
    """
    top = os.fspath(root)

    def push(yield_: Yield2[DirStep, OSError | None]) -> None:
        try:
            info = os.stat(top)
        except OSError as exc:
            logger.debug("cannot stat walk root %s: %s", top, exc)
            yield_(DirStep(top, None), exc)
            return

        entry = DirEntry(
            name=os.path.basename(os.path.normpath(top)),
            is_dir=stat.S_ISDIR(info.st_mode),
            is_symlink=os.path.islink(top),
        )
        if not _walk(top, entry, yield_, token, policy):
            logger.debug("walk of %s stopped early", top)

    return Seq2(push)


def _as_result(step: DirStep, err: OSError | None) -> Result[DirStep, OSError]:
    if err is not None:
        return Error(err)
    return Ok(step)


def dir_walk_results(
    root: str | os.PathLike[str],
    *,
    token: CancelToken | None = None,
    policy: WalkPolicy = WalkPolicy(),
) -> Seq[Result[DirStep, OSError]]:
    """Same walk as dir_walk, each step folded into a Result."""
    return map21(dir_walk(root, token=token, policy=policy), _as_result)


__all__ = ("DirEntry", "DirStep", "WalkPolicy", "dir_walk", "dir_walk_results")
