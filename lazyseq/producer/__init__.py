from .seq import Seq, Seq2, producer, producer2
from .sources import (
    IntsFrom,
    fibs,
    indexed,
    ints_from,
    ints_from_to,
    numbers,
    numbers_from,
    values,
)

__all__ = (
    # Core types
    "Seq",
    "Seq2",
    "producer",
    "producer2",
    # Sources
    "IntsFrom",
    "fibs",
    "indexed",
    "ints_from",
    "ints_from_to",
    "numbers",
    "numbers_from",
    "values",
)
