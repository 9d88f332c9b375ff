"""Line-start index and the offset/position conversions built on it."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List

from .positions import Position


def clamp(value: int, low: int, high: int) -> int:
    """Return ``value`` bounded to ``[low, high]``."""

    return max(low, min(value, high))


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Offsets where each line starts and where its content stops.

    ``line_ends[i]`` excludes the terminator of line ``i`` (``\\n``, ``\\r``
    or ``\\r\\n``). The last line has no terminator, so its end is the text
    length.
    """

    line_starts: tuple[int, ...]
    line_ends: tuple[int, ...]
    text_length: int

    @classmethod
    def from_text(cls, text: str) -> "LineIndex":
        starts: List[int] = [0]
        ends: List[int] = []
        length = len(text)
        offset = 0
        while offset < length:
            char = text[offset]
            if char == "\r" and offset + 1 < length and text[offset + 1] == "\n":
                ends.append(offset)
                offset += 2
                starts.append(offset)
            elif char == "\r" or char == "\n":
                ends.append(offset)
                offset += 1
                starts.append(offset)
            else:
                offset += 1
        ends.append(length)
        return cls(line_starts=tuple(starts), line_ends=tuple(ends), text_length=length)

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def max_character(self, line: int) -> int:
        return self.line_ends[line] - self.line_starts[line]

    def line_at(self, offset: int) -> int:
        """Return the line containing ``offset`` (rightmost start <= offset)."""

        offset = clamp(offset, 0, self.text_length)
        return bisect_right(self.line_starts, offset) - 1

    def offset_at(self, line: int, character: int) -> int:
        if line < 0:
            return 0
        if line >= self.line_count:
            return self.text_length
        start = self.line_starts[line]
        return start + clamp(character, 0, self.max_character(line))

    def position_at(self, offset: int) -> Position:
        offset = clamp(offset, 0, self.text_length)
        line = self.line_at(offset)
        character = clamp(offset - self.line_starts[line], 0, self.max_character(line))
        return Position(line, character)


__all__ = ["LineIndex", "clamp"]
