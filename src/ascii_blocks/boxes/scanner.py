"""Box detection and in-place glyph substitution.

A box top is a run of at least five characters on one row that starts and
ends with ``+`` and holds only ``-``, ``+`` or ``┼`` in between. A run is
only converted when the row below has ``|`` or ``+`` under its first
column. The scanner then walks down the left wall to the bottom border and
rewrites the top, both walls and the bottom::

    +---+        ┌───┐
    |   |   ->   │   │
    +---+        └───┘

Boxes sharing a wall are handled by turning any non-bar character on a wall
into ``┼``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from ascii_blocks.buffer import BufferDocument
from ascii_blocks.runtime import telemetry

from .glyphs import JUNCTION, box_bottom, box_top, wall_char

BORDER_RUN = re.compile(r"\+[-+" + JUNCTION + r"]+\+")
MIN_BORDER_WIDTH = 5


@dataclass(frozen=True, slots=True)
class BorderRun:
    row: int
    start_col: int
    end_col: int

    @property
    def width(self) -> int:
        return self.end_col - self.start_col + 1


def find_border_runs(text: str, row: int) -> Iterator[BorderRun]:
    """Yield the candidate box tops on one rendered row, left to right.

    Each search resumes after the previous match, so a consumed run is
    never looked at twice. Runs narrower than ``MIN_BORDER_WIDTH`` are skipped.
    """

    for match in BORDER_RUN.finditer(text):
        run = BorderRun(row=row, start_col=match.start() + 1, end_col=match.end())
        if run.width >= MIN_BORDER_WIDTH:
            yield run


def _inside_box(document: BufferDocument, row: int, col: int) -> bool:
    char = document.char_at(row, col)
    # a `+` followed by a bar is another box's border crossing this wall
    return char == "|" or (char == "+" and document.char_at(row + 1, col) == "|")


def _find_bottom(document: BufferDocument, run: BorderRun) -> Optional[int]:
    row = run.row + 1
    while _inside_box(document, row, run.start_col):
        row += 1
    # the bottom border must reach both walls
    if document.char_at(row, run.start_col) is None:
        return None
    if document.char_at(row, run.end_col) is None:
        return None
    return row


def format_block(document: BufferDocument, run: BorderRun) -> bool:
    """Rewrite the box whose top border is ``run``.

    Returns ``False`` and leaves the document untouched when the run is not
    a box top.
    """

    below = document.char_at(run.row + 1, run.start_col)
    if below not in ("|", "+"):
        return False

    bottom = _find_bottom(document, run)
    if bottom is None:
        return False

    start, end = run.start_col, run.end_col
    top = document.substring(run.row, start, end)
    document.replace_range(run.row, start, end, box_top(top))

    for row in range(run.row + 1, bottom):
        for col in (start, end):
            char = document.char_at(row, col)
            if char is not None:
                document.replace(row, col, wall_char(char))

    edge = document.substring(bottom, start, end)
    document.replace_range(bottom, start, end, box_bottom(edge))
    return True


def blockify(document: BufferDocument) -> int:
    """Convert every box in ``document`` in place and return how many were found."""

    with telemetry.scan_span(document.line_count) as stats:
        for row in range(1, document.line_count + 1):
            text = document.line(row).to_string()
            for run in find_border_runs(text, row):
                data = {"row": run.row, "start": run.start_col, "end": run.end_col}
                if format_block(document, run):
                    stats.boxes += 1
                    telemetry.record_event("box.converted", level="debug", data=data)
                else:
                    stats.rejected += 1
                    telemetry.record_event("box.rejected", level="debug", data=data)
    return stats.boxes


__all__ = [
    "BORDER_RUN",
    "MIN_BORDER_WIDTH",
    "BorderRun",
    "find_border_runs",
    "format_block",
    "blockify",
]
