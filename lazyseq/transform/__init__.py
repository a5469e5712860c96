from .effects import tap, tap2, tapM
from .limit import limit, limit2, limitM

__all__ = (
    # Seq
    "limit",
    "tap",
    # Seq2
    "limit2",
    "tap2",
    # Generic
    "limitM",
    "tapM",
)
