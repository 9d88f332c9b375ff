"""Document model, line index, and edit application."""

from .document import TextDocument, create, update
from .edits import OverlappingEditError, apply_edits
from .line_index import LineIndex, clamp
from .positions import ContentChangeEvent, Position, Range, TextEdit

__all__ = [
    "TextDocument",
    "create",
    "update",
    "apply_edits",
    "OverlappingEditError",
    "LineIndex",
    "clamp",
    "Position",
    "Range",
    "ContentChangeEvent",
    "TextEdit",
]
