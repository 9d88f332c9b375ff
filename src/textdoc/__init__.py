"""In-memory text documents with exact offset/position mapping."""

from .buffer import (
    ContentChangeEvent,
    LineIndex,
    OverlappingEditError,
    Position,
    Range,
    TextDocument,
    TextEdit,
    apply_edits,
    create,
    update,
)

__all__ = [
    "ContentChangeEvent",
    "LineIndex",
    "OverlappingEditError",
    "Position",
    "Range",
    "TextDocument",
    "TextEdit",
    "apply_edits",
    "create",
    "update",
]

__version__ = "0.1.0"
