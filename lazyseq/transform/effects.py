"""Side effects combinators

Effects execute for observation only (tracing, counting, debugging)
and don't change the values that flow through."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .._helpers import close_run
from .._types import Effect
from ..producer import Seq, Seq2

# Generic combinator (runs + wrap pattern)
def tapM[M, Item](
    runs: Callable[[], Iterator[Item]],
    *,
    effect: Effect[Item],
    wrap: Callable[..., M],
    name: str,
) -> M:
    """Generic tap combinator. effect sees each item right before downstream does."""

    def run() -> Iterator[Item]:
        upstream = runs()
        try:
            for item in upstream:
                effect(item)
                yield item
        finally:
            close_run(upstream)

    return wrap(run, name=name)

# Sugar for Seq / Seq2
def tap[T](seq: Seq[T], effect: Effect[T]) -> Seq[T]:
    """Call effect(value) for every value as it is produced."""
    return tapM(seq.__iter__, effect=effect, wrap=Seq, name=f"tap({seq!r})")

def tap2[K, V](seq: Seq2[K, V], effect: Callable[[K, V], None]) -> Seq2[K, V]:
    """Call effect(key, value) for every pair as it is produced."""

    def observe(pair: tuple[K, V]) -> None:
        effect(*pair)

    return tapM(seq.__iter__, effect=observe, wrap=Seq2, name=f"tap2({seq!r})")

__all__ = ("tap", "tap2", "tapM")
