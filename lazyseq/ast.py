"""
AST for fluent combinator chaining.

Architecture:
- Expr[T] / Expr2[K, V] - immutable nodes that lower into Seq / Seq2
- Flow[T] / Flow2[K, V] - fluent builders appending nodes

Building a chain never starts a run; lower() only assembles producers,
and runs start when the lowered producer is driven (for_each, to_list,
reduce, iteration).

Example:
    total = flow(numbers_from(1)).limit(100).reduce(add, initial=0)

    pairs = flow(numbers()).zip(fibs()).limit(10).to_list()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from kungfu import Result

from ._errors import ReduceFailure
from ._types import Combine, Effect, Step, Step2
from .producer import Seq, Seq2
from .writer import Log, WriterResult


# ============================================================================
# Single-value nodes
# ============================================================================


class Expr[T]:
    """
    AST node that can be lowered into a Seq.
    """

    def lower(self) -> Seq[T]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Base[T](Expr[T]):
    value: Seq[T]

    def lower(self) -> Seq[T]:
        return self.value


@dataclass(frozen=True, slots=True)
class Limit[T](Expr[T]):
    inner: Expr[T]
    count: int

    def lower(self) -> Seq[T]:
        from .transform.limit import limit
        return limit(self.inner.lower(), self.count)


@dataclass(frozen=True, slots=True)
class Tap[T](Expr[T]):
    inner: Expr[T]
    effect: Effect[T]

    def lower(self) -> Seq[T]:
        from .transform.effects import tap
        return tap(self.inner.lower(), self.effect)


@dataclass(frozen=True, slots=True)
class ZipWith[T, U, R](Expr[R]):
    left: Expr[T]
    right: Expr[U]
    combiner: Callable[[T, U], R]

    def lower(self) -> Seq[R]:
        from .pairwise.zip import zip_with
        return zip_with(self.left.lower(), self.right.lower(), combiner=self.combiner)


@dataclass(frozen=True, slots=True)
class Pairs[K, V](Expr[tuple[K, V]]):
    inner: Expr2[K, V]

    def lower(self) -> Seq[tuple[K, V]]:
        return self.inner.lower().pairs()


# ============================================================================
# Pair nodes
# ============================================================================


class Expr2[K, V]:
    """
    AST node that can be lowered into a Seq2.
    """

    def lower(self) -> Seq2[K, V]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Base2[K, V](Expr2[K, V]):
    value: Seq2[K, V]

    def lower(self) -> Seq2[K, V]:
        return self.value


@dataclass(frozen=True, slots=True)
class Zip[K, V](Expr2[K, V]):
    left: Expr[K]
    right: Expr[V]

    def lower(self) -> Seq2[K, V]:
        from .pairwise.zip import zip_seq
        return zip_seq(self.left.lower(), self.right.lower())


@dataclass(frozen=True, slots=True)
class Limit2[K, V](Expr2[K, V]):
    inner: Expr2[K, V]
    count: int

    def lower(self) -> Seq2[K, V]:
        from .transform.limit import limit2
        return limit2(self.inner.lower(), self.count)


@dataclass(frozen=True, slots=True)
class Tap2[K, V](Expr2[K, V]):
    inner: Expr2[K, V]
    effect: Callable[[K, V], None]

    def lower(self) -> Seq2[K, V]:
        from .transform.effects import tap2
        return tap2(self.inner.lower(), self.effect)


# ============================================================================
# Fluent builders
# ============================================================================


def _as_expr[T](other: Seq[T] | Flow[T]) -> Expr[T]:
    if isinstance(other, Flow):
        return other.expr
    return Base(other)


@dataclass(frozen=True, slots=True)
class Flow[T]:
    """
    Fluent builder for chaining combinators over a Seq.
    """

    expr: Expr[T]

    def limit(self, count: int) -> Flow[T]:
        return Flow(Limit(self.expr, count=count))

    def tap(self, effect: Effect[T]) -> Flow[T]:
        return Flow(Tap(self.expr, effect=effect))

    def zip[U](self, other: Seq[U] | Flow[U]) -> Flow2[T, U]:
        return Flow2(Zip(self.expr, _as_expr(other)))

    def zip_with[U, R](self, other: Seq[U] | Flow[U], *, combiner: Callable[[T, U], R]) -> Flow[R]:
        return Flow(ZipWith(self.expr, _as_expr(other), combiner=combiner))

    def lower(self) -> Seq[T]:
        return self.expr.lower()

    # Terminal operations (start a run)

    def __iter__(self) -> Iterator[T]:
        return iter(self.lower())

    def for_each(self, step: Step[T]) -> bool:
        return self.lower().for_each(step)

    def to_list(self) -> list[T]:
        from .collection.fold import reduce_to_list
        return reduce_to_list(self.lower())

    def reduce[U, E](self, combine: Combine[U, T, E], *, initial: U) -> Result[U, ReduceFailure[U, E]]:
        from .collection.fold import reduce
        return reduce(self.lower(), combine, initial=initial)

    def reduce_w[U, E, W](
        self,
        combine: Callable[[U, T], WriterResult[U, E, Log[W]]],
        *,
        initial: U,
    ) -> WriterResult[U, ReduceFailure[U, E], Log[W]]:
        from .collection.fold import reduce_w
        return reduce_w(self.lower(), combine, initial=initial)


@dataclass(frozen=True, slots=True)
class Flow2[K, V]:
    """
    Fluent builder for chaining combinators over a Seq2.
    """

    expr: Expr2[K, V]

    def limit(self, count: int) -> Flow2[K, V]:
        return Flow2(Limit2(self.expr, count=count))

    def tap(self, effect: Callable[[K, V], None]) -> Flow2[K, V]:
        return Flow2(Tap2(self.expr, effect=effect))

    def pairs(self) -> Flow[tuple[K, V]]:
        """Continue the chain over (key, value) tuples."""
        return Flow(Pairs(self.expr))

    def lower(self) -> Seq2[K, V]:
        return self.expr.lower()

    # Terminal operations (start a run)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(self.lower())

    def for_each(self, step: Step2[K, V]) -> bool:
        return self.lower().for_each(step)

    def to_list(self) -> list[tuple[K, V]]:
        return self.pairs().to_list()


def flow[T](seq: Seq[T]) -> Flow[T]:
    """Build a Flow (AST) from a Seq for fluent combinator chaining."""
    return Flow(Base(seq))


def flow2[K, V](seq: Seq2[K, V]) -> Flow2[K, V]:
    """Build a Flow2 (AST) from a Seq2 for fluent combinator chaining."""
    return Flow2(Base2(seq))


__all__ = (
    "Expr",
    "Expr2",
    "Flow",
    "Flow2",
    "flow",
    "flow2",
)
