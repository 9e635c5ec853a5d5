"""ASCII box detection and Unicode border rewriting."""

from .glyphs import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    H_WALL,
    JUNCTION,
    TOP_LEFT,
    TOP_RIGHT,
    V_WALL,
)
from .scanner import BorderRun, blockify, find_border_runs, format_block

__all__ = [
    "BorderRun",
    "blockify",
    "find_border_runs",
    "format_block",
    "H_WALL",
    "V_WALL",
    "JUNCTION",
    "TOP_LEFT",
    "TOP_RIGHT",
    "BOTTOM_LEFT",
    "BOTTOM_RIGHT",
]
