"""Position, range, and change value objects consumed by documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based ``(line, character)`` coordinate.

    Values are not validated; documents clamp them on use.
    """

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Range:
    start: Position
    end: Position

    @classmethod
    def create(
        cls, start_line: int, start_character: int, end_line: int, end_character: int
    ) -> "Range":
        return cls(
            Position(start_line, start_character), Position(end_line, end_character)
        )

    def normalized(self) -> "Range":
        """Return the range with ``start <= end``."""

        if self.end < self.start:
            return Range(self.end, self.start)
        return self


@dataclass(frozen=True, slots=True)
class ContentChangeEvent:
    """Edit instruction sent by a host.

    Without a ``range`` the text replaces the whole document, otherwise it
    replaces the addressed span.
    """

    text: str
    range: Optional[Range] = None

    @property
    def is_full(self) -> bool:
        return self.range is None

    @property
    def is_incremental(self) -> bool:
        return self.range is not None


@dataclass(frozen=True, slots=True)
class TextEdit:
    range: Range
    new_text: str

    @classmethod
    def insert(cls, position: Position, text: str) -> "TextEdit":
        return cls(Range(position, position), text)

    @classmethod
    def delete(cls, range: Range) -> "TextEdit":
        return cls(range, "")


__all__ = [
    "Position",
    "Range",
    "ContentChangeEvent",
    "TextEdit",
]
