"""
Limit combinators
=================

Truncate a producer to at most N values, finite or infinite source alike.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .._helpers import close_run
from ..producer import Seq, Seq2


# ============================================================================
# Generic combinator (runs + wrap pattern)
# ============================================================================


def limitM[M, Item](
    runs: Callable[[], Iterator[Item]],
    count: int,
    *,
    wrap: Callable[..., M],
    name: str,
) -> M:
    """
    Generic limit combinator.

    runs starts an upstream run, wrap builds the resulting producer type.
    The upstream run is closed as soon as the count-th item has been taken
    from it (before that item reaches downstream), so an infinite upstream
    is never asked for more. count <= 0 never starts the upstream.
    """

    def run() -> Iterator[Item]:
        if count <= 0:
            return
        remaining = count
        upstream = runs()
        try:
            for item in upstream:
                remaining -= 1
                if remaining == 0:
                    close_run(upstream)
                    yield item
                    return
                yield item
        finally:
            close_run(upstream)

    return wrap(run, name=name)


# ============================================================================
# Sugar for Seq / Seq2
# ============================================================================


def limit[T](seq: Seq[T], count: int) -> Seq[T]:
    """At most count values of seq, in order."""
    return limitM(seq.__iter__, count, wrap=Seq, name=f"limit({seq!r}, {count})")


def limit2[K, V](seq: Seq2[K, V], count: int) -> Seq2[K, V]:
    """At most count pairs of seq, in order."""
    return limitM(seq.__iter__, count, wrap=Seq2, name=f"limit2({seq!r}, {count})")


__all__ = ("limit", "limit2", "limitM")
