"""
Zip combinators
===============

Pairwise combination of two producers, built on two cursors.

Each run of a zip opens one cursor per side and advances them in
lockstep: one value from the left, one from the right, then the pair goes
downstream. Neither side is ever more than one value ahead. The run stops
at the shorter side and never drains the longer one.

Both cursors are closed on every way out of the run: exhaustion of
either side, downstream stopping early, or an exception.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from kungfu import Nothing, Some

from ..producer import Seq, Seq2
from ..pull import Cursor, pull


# ============================================================================
# Generic combinator (cursors + wrap pattern)
# ============================================================================


def zipM[M, A, B, Item](
    left: Callable[[], Cursor[A]],
    right: Callable[[], Cursor[B]],
    *,
    combine: Callable[[A, B], Item],
    wrap: Callable[..., M],
    name: str,
) -> M:
    """
    Generic zip combinator.

    left/right open a fresh cursor per run, so the result is restartable
    like any other producer. If the left side is exhausted the right one
    is not advanced for that round.
    """

    def run() -> Iterator[Item]:
        with left() as a, right() as b:
            while True:
                match a.take():
                    case Some(a_value):
                        match b.take():
                            case Some(b_value):
                                yield combine(a_value, b_value)
                            case Nothing():
                                return
                    case Nothing():
                        return

    return wrap(run, name=name)


# ============================================================================
# Sugar for Seq
# ============================================================================


def zip_seq[T, U](a: Seq[T], b: Seq[U]) -> Seq2[T, U]:
    """
    Pairs (a[i], b[i]) up to the shorter of a and b.

    Example:
        zip_seq(numbers(), values(["a", "b", "c"]))  # (0, "a"), (1, "b"), (2, "c")
    """

    def pair(x: T, y: U) -> tuple[T, U]:
        return (x, y)

    return zipM(
        lambda: pull(a),
        lambda: pull(b),
        combine=pair,
        wrap=Seq2,
        name=f"zip_seq({a!r}, {b!r})",
    )


def zip_with[T, U, R](a: Seq[T], b: Seq[U], *, combiner: Callable[[T, U], R]) -> Seq[R]:
    """Lockstep zip, transforming each pair with combiner."""
    return zipM(
        lambda: pull(a),
        lambda: pull(b),
        combine=combiner,
        wrap=Seq,
        name=f"zip_with({a!r}, {b!r})",
    )


__all__ = ("zip_seq", "zip_with", "zipM")
