from __future__ import annotations

class ReduceFailure[U, E](Exception):
    """reduce stopped because combine failed on an element."""

    error: E
    partial: U
    index: int

    def __init__(self, error: E, partial: U, index: int) -> None:
        self.error = error
        self.partial = partial
        self.index = index
        super().__init__(f"Combine failed at element {index}: {error!r}")

__all__ = ("ReduceFailure",)
