"""
Lazy sequence combinators.

Composable primitives for producing, limiting, zipping and folding
possibly-infinite sequences without materializing them.

Architecture:
- Producers (Seq, Seq2) are restartable descriptions; every run is a generator
- Transforms (limit, tap) wrap a producer and close its run as soon as they stop
- Cursors (pull) expose one suspended run on demand; zip drives two of them
- Folds (reduce) consume a run into kungfu Result / WriterResult
- Generic combinators (*M functions) take runs + wrap, sugar fixes the types
"""

# Core types
from ._types import Combine, Effect, NoError, Source, Step, Step2

# Internal helpers (for custom producers)
from . import _helpers

# Producers
from .producer import (
    IntsFrom,
    Seq,
    Seq2,
    fibs,
    indexed,
    ints_from,
    ints_from_to,
    numbers,
    numbers_from,
    producer,
    producer2,
    values,
)

# Transforms
from .transform import (
    limit,
    limit2,
    limitM,
    tap,
    tap2,
    tapM,
)

# Pull adapter
from .pull import Cursor, CursorState, pull, pull2

# Pairwise
from .pairwise import zip_seq, zip_with, zipM

# Folds
from .collection import reduce, reduce_to_list, reduce_w, reduceM

# Writer
from . import writer
from .writer import Log, WriterResult, writer_error, writer_ok

# AST builder (Flow API)
from .ast import Expr, Expr2, Flow, Flow2, flow, flow2

# Errors
from ._errors import ReduceFailure

__all__ = (
    # Types
    "Combine",
    "Effect",
    "NoError",
    "Source",
    "Step",
    "Step2",
    # Internal helpers (for custom producers)
    "_helpers",
    # Producers
    "IntsFrom",
    "Seq",
    "Seq2",
    "fibs",
    "indexed",
    "ints_from",
    "ints_from_to",
    "numbers",
    "numbers_from",
    "producer",
    "producer2",
    "values",
    # Transforms
    "limit",
    "limit2",
    "tap",
    "tap2",
    # Transforms - Generic
    "limitM",
    "tapM",
    # Pull adapter
    "Cursor",
    "CursorState",
    "pull",
    "pull2",
    # Pairwise
    "zip_seq",
    "zip_with",
    "zipM",
    # Folds
    "reduce",
    "reduce_to_list",
    "reduce_w",
    "reduceM",
    # Writer
    "writer",
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
    # AST
    "Expr",
    "Expr2",
    "Flow",
    "Flow2",
    "flow",
    "flow2",
    # Errors
    "ReduceFailure",
)
