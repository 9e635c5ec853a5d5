"""Core document data structures for ascii_blocks buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .segments import SegmentedLine
from .sync import BufferValidationError


@dataclass(slots=True)
class BufferDocument:
    """Editable text stored as a list of segmented lines.

    Rows and columns are 1-based. Reads outside the document return ``None``
    so scanners can walk off the last row without special casing it; writes
    outside the document raise :class:`BufferValidationError`.
    """

    _lines: List[SegmentedLine] = field(default_factory=lambda: [SegmentedLine()])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        # only line feeds separate rows; a trailing one leaves an empty last row
        return cls.from_lines(text.split("\n"))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=[SegmentedLine.from_text(line) for line in lines])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> SegmentedLine:
        if row < 1 or row > len(self._lines):
            raise BufferValidationError("Row out of range", row=row)
        return self._lines[row - 1]

    def char_at(self, row: int, col: int) -> Optional[str]:
        if row < 1 or row > len(self._lines):
            return None
        return self._lines[row - 1].char_at(col)

    def substring(self, row: int, start_col: int, end_col: int) -> str:
        line = self.line(row)
        try:
            return line.substring(start_col, end_col)
        except BufferValidationError as exc:
            exc.row = row
            raise

    def replace_range(self, row: int, start_col: int, end_col: int, text: str) -> None:
        line = self.line(row)
        try:
            line.replace_range(start_col, end_col, text)
        except BufferValidationError as exc:
            exc.row = row
            raise
        self.version += 1
        self.dirty = True

    def replace(self, row: int, col: int, char: str) -> None:
        self.replace_range(row, col, col, char)

    def snapshot(self) -> Sequence[str]:
        """Return the rendered rows without exposing internal mutability."""

        return tuple(line.to_string() for line in self._lines)

    def to_lines(self) -> List[str]:
        return [line.to_string() for line in self._lines]

    def to_text(self) -> str:
        return "\n".join(self.to_lines())


__all__ = ["BufferDocument"]
