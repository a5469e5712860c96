"""
Fold combinators
================

Consume a producer into a single value, stopping at the first failure.

    Running --ok--> Running
    Running --exhausted--> Ok(acc)
    Running --combine failed--> Error(ReduceFailure(error, partial, index))

On failure the producer is told to stop right away: the element after
the failing one is never computed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import ReduceFailure
from .._helpers import identity
from .._types import Combine, NoError
from ..producer import Seq
from ..writer import Log, WriterResult


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def reduceM[A, T, E, Raw, Out](
    seq: Seq[A],
    handler: Callable[[T, A], Raw],
    *,
    initial: T,
    extract: Callable[[Raw], Result[T, E]],
    observe: Callable[[Raw], None],
    on_ok: Callable[[T], Out],
    on_err: Callable[[ReduceFailure[T, E]], Out],
) -> Out:
    """
    Generic fold.

    handler produces a Raw step outcome, extract reads its Result, observe
    sees every Raw (including the failing one) before the decision is
    made. partial in the failure is the accumulator before the failing
    element.
    """
    acc = initial
    index = 0
    failure: ReduceFailure[T, E] | None = None

    def step(item: A) -> bool:
        nonlocal acc, index, failure
        raw = handler(acc, item)
        observe(raw)
        match extract(raw):
            case Ok(new_acc):
                acc = new_acc
                index += 1
                return True
            case Error(e):
                failure = ReduceFailure(e, acc, index)
                return False
            case _ as unreachable:
                assert_never(unreachable)

    seq.for_each(step)
    if failure is not None:
        return on_err(failure)
    return on_ok(acc)


# ============================================================================
# Sugar for Result
# ============================================================================


def _ignore(raw: object) -> None:
    _ = raw


def reduce[A, T, E](
    seq: Seq[A],
    combine: Combine[T, A, E],
    *,
    initial: T,
) -> Result[T, ReduceFailure[T, E]]:
    """
    Fold seq with a fallible combine.

    Example:
        def add(acc: int, v: int) -> Result[int, str]:
            return Ok(acc + v)

        reduce(limit(numbers_from(1), 100), add, initial=0)  # Ok(5050)
    """
    return reduceM(
        seq,
        combine,
        initial=initial,
        extract=identity,
        observe=_ignore,
        on_ok=Ok,
        on_err=Error,
    )


def reduce_to_list[T](seq: Seq[T]) -> list[T]:
    """All values of one run, in production order. Never fails."""

    def append(acc: list[T], value: T) -> Result[list[T], NoError]:
        acc.append(value)
        return Ok(acc)

    return reduce(seq, append, initial=[]).unwrap()


# ============================================================================
# Sugar for WriterResult
# ============================================================================


def reduce_w[A, T, E, W](
    seq: Seq[A],
    combine: Callable[[T, A], WriterResult[T, E, Log[W]]],
    *,
    initial: T,
) -> WriterResult[T, ReduceFailure[T, E], Log[W]]:
    """
    Fold with log merging.

    The returned log holds the entries of every processed element in
    order, the failing element's entries included.
    """
    merged = Log[W]()

    def observe(wr: WriterResult[T, E, Log[W]]) -> None:
        merged.extend(wr.log)

    def extract(wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
        return wr.result

    def on_ok(acc: T) -> WriterResult[T, ReduceFailure[T, E], Log[W]]:
        return WriterResult(Ok(acc), merged)

    def on_err(failure: ReduceFailure[T, E]) -> WriterResult[T, ReduceFailure[T, E], Log[W]]:
        return WriterResult(Error(failure), merged)

    return reduceM(
        seq,
        combine,
        initial=initial,
        extract=extract,
        observe=observe,
        on_ok=on_ok,
        on_err=on_err,
    )


__all__ = ("reduce", "reduce_to_list", "reduce_w", "reduceM")
