"""
Core type definitions for lazyseq.

Type aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Step = per-value consumer, returns whether production should continue
type Step[T] = Callable[[T], bool]

# Step2 = per-pair consumer for key/value producers
type Step2[K, V] = Callable[[K, V], bool]

# Source = zero-arg factory returning a fresh iterator for one run
type Source[T] = Callable[[], Iterator[T]]

# Combine = fallible fold step
type Combine[U, T, E] = Callable[[U, T], Result[U, E]]

# Effect = observation-only callback
type Effect[T] = Callable[[T], None]

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) instead of None: such an error cannot be constructed.
type NoError = typing.Never

__all__ = (
    "Step",
    "Step2",
    "Source",
    "Combine",
    "Effect",
    "NoError",
)
