"""Internal helpers for lazyseq.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used when writing custom
producers or combinators."""

from __future__ import annotations

from collections.abc import Iterator

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def close_run(run: Iterator[object]) -> None:
    """
    Release a producer run.

    Generators get close(), which raises GeneratorExit at the suspension
    point so their finally blocks execute. Plain iterators (list, range)
    hold nothing and have no close().
    """
    close = getattr(run, "close", None)
    if close is not None:
        close()

__all__ = (
    "identity",
    "close_run",
)
