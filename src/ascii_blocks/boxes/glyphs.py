"""Unicode glyphs and the rules that turn ASCII borders into them."""

from __future__ import annotations

H_WALL = "─"
V_WALL = "│"
JUNCTION = "┼"
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"


def _fill(chars: str) -> str:
    return chars[1:-1].replace("-", H_WALL).replace("+", JUNCTION)


def box_top(chars: str) -> str:
    """Convert a ``+---+`` run into a top border, keeping its inner junctions."""

    return TOP_LEFT + _fill(chars) + TOP_RIGHT


def box_bottom(chars: str) -> str:
    return BOTTOM_LEFT + _fill(chars) + BOTTOM_RIGHT


def wall_char(char: str) -> str:
    # anything other than a bar is another border crossing this wall
    if char == "|":
        return V_WALL
    return JUNCTION


__all__ = [
    "H_WALL",
    "V_WALL",
    "JUNCTION",
    "TOP_LEFT",
    "TOP_RIGHT",
    "BOTTOM_LEFT",
    "BOTTOM_RIGHT",
    "box_top",
    "box_bottom",
    "wall_char",
]
