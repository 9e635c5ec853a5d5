"""Segmented storage for a single line of text.

A line is kept as an ordered list of string fragments whose concatenation is
the line's content. Replacing a column range only splits or merges the
fragments it touches, so a line that receives one edit per wall character
is never rebuilt from scratch on each edit.

Replacing column 4 of ``'foo bar'`` with ``'-'`` turns the single segment
into three::

    ['foo bar']  ->  ['foo', '-', 'bar']

All columns are 1-based and inclusive, counted in characters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .sync import BufferValidationError
from .validation import ensure_order, ensure_span


@dataclass(slots=True)
class SegmentedLine:
    """One logical line stored as a list of segments."""

    _segments: List[str] = field(default_factory=lambda: [""])

    @classmethod
    def from_text(cls, text: str) -> "SegmentedLine":
        return cls(_segments=[text])

    @property
    def segments(self) -> Tuple[str, ...]:
        """Return the current segments without exposing internal mutability."""

        return tuple(self._segments)

    def __len__(self) -> int:
        return sum(len(segment) for segment in self._segments)

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return "".join(self._segments)

    def char_at(self, col: int) -> Optional[str]:
        """Return the character at ``col`` or ``None`` when it is out of range."""

        if col < 1:
            return None
        for segment in self._segments:
            if col <= len(segment):
                return segment[col - 1]
            col -= len(segment)
        return None

    def substring(self, start_col: int, end_col: int) -> str:
        """Return the text covering ``[start_col, end_col]``, clipped to the line."""

        ensure_order(start_col, end_col)
        pieces: List[str] = []
        offset = 0
        for segment in self._segments:
            first = offset + 1
            last = offset + len(segment)
            offset = last
            if last < start_col:
                continue
            if first > end_col:
                break
            lo = max(start_col, first) - first
            hi = min(end_col, last) - first + 1
            pieces.append(segment[lo:hi])
        return "".join(pieces)

    def replace_range(self, start_col: int, end_col: int, text: str) -> None:
        """Replace ``[start_col, end_col]`` with ``text`` of any length."""

        end_col = ensure_span(len(self), start_col, end_col)
        first, last, offset = self._locate(start_col, end_col)

        # compact so the whole range lives in one segment
        if last > first:
            self._segments[first : last + 1] = [
                "".join(self._segments[first : last + 1])
            ]

        segment = self._segments[first]
        leading = segment[: start_col - offset - 1]
        trailing = segment[end_col - offset :]
        parts = [part for part in (leading, text, trailing) if part]
        self._segments[first : first + 1] = parts
        if not self._segments:
            self._segments.append("")

    def replace(self, col: int, char: str) -> None:
        self.replace_range(col, col, char)

    def _locate(self, start_col: int, end_col: int) -> Tuple[int, int, int]:
        """Return the indices of the segments holding both ends of a range.

        The third element is the number of columns before the first segment.
        """

        first: Optional[int] = None
        first_offset = 0
        offset = 0
        for index, segment in enumerate(self._segments):
            last_col = offset + len(segment)
            if first is None and start_col <= last_col:
                first, first_offset = index, offset
            if first is not None and end_col <= last_col:
                return first, index, first_offset
            offset = last_col
        raise BufferValidationError("Column out of range", column=end_col)


__all__ = ["SegmentedLine"]
