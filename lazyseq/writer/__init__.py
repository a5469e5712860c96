"""
Writer
======

Log accumulation for sequence consumers:
- Log[W]: monoidal list of observations
- WriterResult[T, E, W]: Result[T, E] plus the log that led to it

Folds that need to explain themselves (which element was seen, why one
was rejected) return a WriterResult from each step and let reduce_w
merge the logs.
"""

from .log import Log
from .result import WriterResult, writer_error, writer_ok

__all__ = (
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
)
