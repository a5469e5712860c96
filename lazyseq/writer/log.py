"""
Log - monoidal accumulator for writer results
=============================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered log of observations collected while a sequence is consumed.

    A list with monoid operations, so logs from every element of a fold
    can be merged without caring where they came from:
    - empty: Log()
    - combine: concatenation, returns a new Log

    Example:
        Log.of("saw 1").combine(Log.of("saw 2"))  # Log(["saw 1", "saw 2"])
    """

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        """Create log with entries."""
        return Log[T](entries)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Concatenate two logs. Neither operand is modified."""
        merged: Log[A] = Log(self)
        merged.extend(other)
        return merged

    def tell(self, entry: A, /) -> Log[A]:
        """Return a new log with one more entry appended."""
        merged: Log[A] = Log(self)
        merged.append(entry)
        return merged


__all__ = ("Log",)
