"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    Result of a step (or of a whole fold) together with its log.

    - result: Ok(value) or Error(err)
    - log: what was observed on the way there
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> W:
        return self._log

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


def writer_ok[T, W](value: T, *entries: W) -> WriterResult[T, typing.Never, Log[W]]:
    """Successful WriterResult with optional log entries."""
    return WriterResult(Ok(value), Log.of(*entries))


def writer_error[E, W](error: E, *entries: W) -> WriterResult[typing.Never, E, Log[W]]:
    """Failed WriterResult with optional log entries."""
    return WriterResult(Error(error), Log.of(*entries))


__all__ = ("WriterResult", "writer_ok", "writer_error")
