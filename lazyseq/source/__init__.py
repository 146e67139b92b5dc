"""
Sources: build sequences from collections, channels, text streams and
directory trees.
"""

from .channel import chan
from .collection import from_iterable, from_mapping, from_pairs, indexed
from .scanner import LineScanner, ScanPolicy, scanner_text
from .walk import DirEntry, DirStep, WalkPolicy, dir_walk, dir_walk_results

__all__ = (
    # Collections
    "from_iterable",
    "from_pairs",
    "from_mapping",
    "indexed",
    # Channels
    "chan",
    # Text streams
    "LineScanner",
    "ScanPolicy",
    "scanner_text",
    # Directory trees
    "DirEntry",
    "DirStep",
    "WalkPolicy",
    "dir_walk",
    "dir_walk_results",
)
