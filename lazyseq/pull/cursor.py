"""
Pull adapter
============

Cursor: on-demand access to one run of a producer.

A run is a generator suspended at its last yield. Every request resumes it
until the next yield and suspends it again, so two cursors can be advanced
in lockstep without either producer running ahead of the other.

Lifecycle:

    open --(run finishes)--> exhausted --close()--> closed
    open --close()--------------------------------> closed

close() is idempotent and valid in every state. Once the cursor is not
open, every request reports "no more values".

A cursor is not thread-safe and must not be advanced re-entrantly from
inside its own producer.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from kungfu import Nothing, Option, Some

from .._helpers import close_run
from ..producer import Seq, Seq2

type CursorState = Literal["open", "exhausted", "closed"]


class Cursor[T]:
    """
    Pull handle over one producer run.

    Iterator protocol: next(cursor) returns the next value or raises
    StopIteration. take() is the same request as a kungfu Option.

    Example:
        with pull(numbers()) as cursor:
            cursor.take()  # Some(0)
            cursor.take()  # Some(1)
        cursor.take()      # Nothing()
    """

    __slots__ = ("_run", "_state", "_pulled")

    def __init__(self, run: Iterator[T], /) -> None:
        self._run = run
        self._state: CursorState = "open"
        self._pulled = 0

    # Requests

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        if self._state != "open":
            raise StopIteration
        try:
            value = next(self._run)
        except StopIteration:
            self._state = "exhausted"
            raise
        self._pulled += 1
        return value

    def take(self) -> Option[T]:
        """Some(next value), or Nothing() once there are no more values."""
        try:
            return Some(next(self))
        except StopIteration:
            return Nothing()

    # Release

    def close(self) -> None:
        """
        Abandon the run.

        The suspended generator receives GeneratorExit at its current yield,
        so its finally blocks (and those of any producers it wraps) run now.
        """
        if self._state == "closed":
            return
        self._state = "closed"
        close_run(self._run)

    def __enter__(self) -> Cursor[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Inspection

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state == "closed"

    @property
    def exhausted(self) -> bool:
        """True once the run has no more values, whether or not close() was called."""
        return self._state != "open"

    @property
    def pulled(self) -> int:
        """Number of values handed out so far."""
        return self._pulled

    def __repr__(self) -> str:
        return f"Cursor(state={self._state!r}, pulled={self._pulled})"


def pull[T](seq: Seq[T]) -> Cursor[T]:
    """Start a run of seq and return a cursor over it."""
    return Cursor(iter(seq))


def pull2[K, V](seq: Seq2[K, V]) -> Cursor[tuple[K, V]]:
    """Start a run of a pair producer and return a cursor over its pairs."""
    return Cursor(iter(seq))


__all__ = ("Cursor", "CursorState", "pull", "pull2")
