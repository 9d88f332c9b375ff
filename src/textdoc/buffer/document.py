"""Text document model mapping offsets to positions and absorbing edits."""

from __future__ import annotations

from typing import Iterable, Optional

from textdoc.runtime import telemetry

from .line_index import LineIndex
from .positions import ContentChangeEvent, Position, Range


class TextDocument:
    """Mutable text content with a lazily built line index.

    Content and version only change through :func:`update`; every read
    clamps out-of-range coordinates instead of raising.
    """

    __slots__ = ("_uri", "_language_id", "_version", "_content", "_line_index")

    def __init__(self, uri: str, language_id: str, version: int, content: str) -> None:
        self._uri = uri
        self._language_id = language_id
        self._version = version
        self._content = content
        self._line_index: Optional[LineIndex] = None

    def __repr__(self) -> str:
        return (
            f"TextDocument(uri={self._uri!r}, language_id={self._language_id!r}, "
            f"version={self._version})"
        )

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def version(self) -> int:
        return self._version

    @property
    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex.from_text(self._content)
        return self._line_index

    @property
    def line_count(self) -> int:
        return self.line_index.line_count

    def get_text(self, range: Optional[Range] = None) -> str:
        """Return the whole content, or the span addressed by ``range``.

        Each endpoint is clamped on its own; a reversed range yields ``""``.
        """

        if range is None:
            return self._content
        start = self.offset_at(range.start)
        end = self.offset_at(range.end)
        return self._content[start:end]

    def offset_at(self, position: Position) -> int:
        return self.line_index.offset_at(position.line, position.character)

    def position_at(self, offset: int) -> Position:
        return self.line_index.position_at(offset)

    def update(self, changes: Iterable[ContentChangeEvent], version: int) -> None:
        update(self, changes, version)

    def _replace_content(self, content: str) -> None:
        self._content = content
        self._line_index = None


def create(uri: str, language_id: str, version: int, content: str) -> TextDocument:
    return TextDocument(uri, language_id, version, content)


def update(
    document: TextDocument, changes: Iterable[ContentChangeEvent], version: int
) -> TextDocument:
    """Apply ``changes`` in order, then set ``document.version``.

    Incremental ranges are resolved against the content left by the previous
    change in the same batch, not against the content before the call.
    """

    applied = 0
    with telemetry.span(
        "document::update",
        component="document",
        metadata={"uri": document.uri},
    ) as handle:
        for change in changes:
            if change.is_full:
                document._replace_content(change.text)
                telemetry.record_event(
                    "document::change",
                    level="debug",
                    data={"kind": "full", "length": len(change.text)},
                )
            else:
                content = document.get_text()
                start = document.offset_at(change.range.start)
                end = document.offset_at(change.range.end)
                document._replace_content(content[:start] + change.text + content[end:])
                telemetry.record_event(
                    "document::change",
                    level="debug",
                    data={"kind": "incremental", "start": start, "end": end},
                )
            applied += 1

        document._version = version
        handle.add_metadata("changes", applied)
        handle.add_metadata("version", version)
    return document


__all__ = ["TextDocument", "create", "update"]
