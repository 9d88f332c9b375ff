"""Snapshot application of text edits against a document."""

from __future__ import annotations

from typing import Iterable, List

from textdoc.runtime import telemetry

from .document import TextDocument
from .positions import TextEdit


class OverlappingEditError(ValueError):
    """Raised when two edits in one set address overlapping spans."""

    def __init__(self, edit: TextEdit, *, previous_end: int) -> None:
        super().__init__(
            f"Edit at {edit.range.start.line}:{edit.range.start.character} "
            f"overlaps a previous edit ending at offset {previous_end}"
        )
        self.edit = edit
        self.previous_end = previous_end


def _normalize(edit: TextEdit) -> TextEdit:
    normalized = edit.range.normalized()
    if normalized is edit.range:
        return edit
    return TextEdit(normalized, edit.new_text)


def apply_edits(document: TextDocument, edits: Iterable[TextEdit]) -> str:
    """Return the document text with ``edits`` applied; the document is untouched.

    All edits address the current content. They are applied in position
    order; edits sharing a position keep their given order.
    """

    ordered = sorted(
        (_normalize(edit) for edit in edits),
        key=lambda edit: (edit.range.start, edit.range.end),
    )
    text = document.get_text()
    parts: List[str] = []
    last_offset = 0

    with telemetry.span(
        "document::apply_edits",
        metadata={"uri": document.uri, "edits": len(ordered)},
    ):
        for edit in ordered:
            start = document.offset_at(edit.range.start)
            if start < last_offset:
                telemetry.record_event(
                    "document::overlapping_edit",
                    level="warning",
                    data={"uri": document.uri, "start": start, "previous_end": last_offset},
                )
                raise OverlappingEditError(edit, previous_end=last_offset)
            if start > last_offset:
                parts.append(text[last_offset:start])
            if edit.new_text:
                parts.append(edit.new_text)
            last_offset = document.offset_at(edit.range.end)
        parts.append(text[last_offset:])

    return "".join(parts)


__all__ = ["OverlappingEditError", "apply_edits"]
