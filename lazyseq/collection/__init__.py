from .fold import reduce, reduce_to_list, reduce_w, reduceM

__all__ = (
    # Result
    "reduce",
    "reduce_to_list",
    # WriterResult
    "reduce_w",
    # Generic
    "reduceM",
)
