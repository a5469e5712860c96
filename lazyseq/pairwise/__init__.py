from .zip import zip_seq, zip_with, zipM

__all__ = (
    # Seq
    "zip_seq",
    "zip_with",
    # Generic
    "zipM",
)
