"""
Producers
=========

Seq[T] and Seq2[K, V]: restartable descriptions of a lazy sequence.

A producer holds a zero-arg factory that starts one *run* (a fresh
iterator, in practice a generator). Nothing is computed until a run is
started, and every run is independent of the others.

Two ways to drive a producer:
- push: seq.for_each(step), where step returns False to stop
- pull: iter(seq) / for-loops, or lazyseq.pull(seq) for an explicit cursor
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import wraps

from .._helpers import close_run
from .._types import Source, Step, Step2


class Seq[T]:
    """
    Lazy, possibly infinite sequence of T.

    Example:
        def count_up() -> Iterator[int]:
            n = 0
            while True:
                yield n
                n += 1

        seq = Seq(count_up)
        seq.for_each(lambda v: v < 3)  # sees 0, 1, 2, 3 then stops
    """

    __slots__ = ("_source", "_name")

    def __init__(self, source: Source[T], /, *, name: str | None = None) -> None:
        self._source = source
        self._name = name

    def __iter__(self) -> Iterator[T]:
        """Start a new run."""
        return self._source()

    def for_each(self, step: Step[T], /) -> bool:
        """
        Drive one run push-style.

        Calls step for every value until step returns False or the run is
        exhausted. Returns True on exhaustion, False if step stopped it.
        The run is closed either way, including when step raises.
        """
        run = self._source()
        try:
            for value in run:
                if not step(value):
                    return False
            return True
        finally:
            close_run(run)

    def __repr__(self) -> str:
        return f"Seq({self._name or getattr(self._source, '__qualname__', '?')})"


class Seq2[K, V]:
    """
    Lazy sequence of key/value pairs.

    Runs yield (k, v) tuples; for_each hands the pair to step as two
    arguments.
    """

    __slots__ = ("_source", "_name")

    def __init__(self, source: Source[tuple[K, V]], /, *, name: str | None = None) -> None:
        self._source = source
        self._name = name

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return self._source()

    def for_each(self, step: Step2[K, V], /) -> bool:
        """Drive one run push-style. Same contract as Seq.for_each."""
        run = self._source()
        try:
            for key, value in run:
                if not step(key, value):
                    return False
            return True
        finally:
            close_run(run)

    def pairs(self) -> Seq[tuple[K, V]]:
        """The same runs viewed as a Seq of tuples (for reduce and friends)."""
        return Seq(self._source, name=f"pairs({self!r})")

    def __repr__(self) -> str:
        return f"Seq2({self._name or getattr(self._source, '__qualname__', '?')})"


def producer[T, **P](func: Callable[P, Iterator[T]]) -> Callable[P, Seq[T]]:
    """
    Decorator turning a generator function into a Seq factory.

    The arguments are captured when the decorated function is called; the
    generator body only runs once the returned Seq is driven, and runs
    again from the top on every new run.

    Example:
        @producer
        def countdown(n: int) -> Iterator[int]:
            while n > 0:
                yield n
                n -= 1

        seq = countdown(3)     # nothing runs yet
        list(seq), list(seq)   # ([3, 2, 1], [3, 2, 1])
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Seq[T]:
        return Seq(lambda: func(*args, **kwargs), name=_call_name(func, args))

    return wrapper


def producer2[K, V, **P](func: Callable[P, Iterator[tuple[K, V]]]) -> Callable[P, Seq2[K, V]]:
    """Decorator turning a generator of pairs into a Seq2 factory."""
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Seq2[K, V]:
        return Seq2(lambda: func(*args, **kwargs), name=_call_name(func, args))

    return wrapper


def _call_name(func: Callable[..., object], args: tuple[object, ...]) -> str:
    return f"{func.__name__}({', '.join(map(repr, args))})"


__all__ = ("Seq", "Seq2", "producer", "producer2")
