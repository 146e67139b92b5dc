"""
Consumers: drain sequences into values, collections or channels.
"""

from .channel import chan
from .consume import collect, collect2, contains, count, first, max, min, reduce

__all__ = (
    "chan",
    "collect",
    "collect2",
    "contains",
    "count",
    "first",
    "max",
    "min",
    "reduce",
)
