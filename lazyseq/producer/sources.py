"""
Sources
=======

Concrete producers: counters, ranges, Fibonacci numbers and adapters over
plain collections.

All sources except ints_from keep their state inside the run, so every
run starts from the beginning. ints_from is the deliberate exception: its
counter lives in an IntsFrom object shared by all runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .seq import Seq, Seq2, producer


@producer
def numbers_from(start: int) -> Iterator[int]:
    """Infinite start, start + 1, ... Needs limit() (or a stopping consumer)."""
    i = start
    while True:
        yield i
        i += 1


def numbers() -> Seq[int]:
    """Infinite 0, 1, 2, ..."""
    return numbers_from(0)


@producer
def ints_from_to(lo: int, hi: int) -> Iterator[int]:
    """Finite lo, lo + 1, ..., hi - 1. Empty when lo >= hi."""
    i = lo
    while i < hi:
        yield i
        i += 1


class IntsFrom:
    """
    Counter state behind ints_from().

    next is the value the following advance() hands out. It only moves
    when a value is actually delivered, so a run closed between values
    loses nothing.
    """

    __slots__ = ("next",)

    def __init__(self, start: int) -> None:
        self.next = start

    def advance(self) -> int:
        value = self.next
        self.next += 1
        return value

    def __repr__(self) -> str:
        return f"IntsFrom(next={self.next})"


def ints_from(start: int, *, state: IntsFrom | None = None) -> Seq[int]:
    """
    Infinite counter whose position survives between runs.

    Unlike numbers_from, a second run continues after the last value the
    first run delivered:

        seq = ints_from(1)
        reduce_to_list(limit(seq, 3))  # [1, 2, 3]
        reduce_to_list(limit(seq, 3))  # [4, 5, 6]

    Pass state to observe or share the counter explicitly.
    """
    counter = state if state is not None else IntsFrom(start)

    def run() -> Iterator[int]:
        while True:
            yield counter.advance()

    return Seq(run, name=f"ints_from({start!r})")


@producer
def fibs[N](one: N = 1) -> Iterator[N]:  # type: ignore[assignment]
    """
    Infinite Fibonacci sequence 1, 1, 2, 3, 5, 8, ...

    one picks the numeric type: anything with + works (int, Fraction,
    Decimal). Every successor is a new object produced by a + b, so values
    handed out earlier never change afterwards.
    """
    a, b = one, one
    yield a
    while True:
        yield b
        a, b = b, a + b  # type: ignore[operator]


def values[T](items: Iterable[T]) -> Seq[T]:
    """
    Producer over a finite collection, restarted from its first item on
    every run.

    items must be re-iterable (list, tuple, range, dict keys...). One-shot
    iterators are rejected because a second run would silently be empty.
    """
    if iter(items) is items:
        raise TypeError(f"values(): expected a re-iterable collection, got iterator {type(items).__name__}")

    def run() -> Iterator[T]:
        yield from items

    return Seq(run, name=f"values({type(items).__name__})")


def indexed[T](items: Iterable[T]) -> Seq2[int, T]:
    """Pairs (index, item) over a finite re-iterable collection."""
    if iter(items) is items:
        raise TypeError(f"indexed(): expected a re-iterable collection, got iterator {type(items).__name__}")

    def run() -> Iterator[tuple[int, T]]:
        yield from enumerate(items)

    return Seq2(run, name=f"indexed({type(items).__name__})")


__all__ = (
    "IntsFrom",
    "fibs",
    "indexed",
    "ints_from",
    "ints_from_to",
    "numbers",
    "numbers_from",
    "values",
)
