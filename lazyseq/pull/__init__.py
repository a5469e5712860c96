from .cursor import Cursor, CursorState, pull, pull2

__all__ = ("Cursor", "CursorState", "pull", "pull2")
