"""Redraw ASCII-art boxes with Unicode box-drawing characters."""

from .convert import blockify_host, blockify_lines, blockify_text

__all__ = [
    "adapters",
    "boxes",
    "buffer",
    "runtime",
    "blockify_text",
    "blockify_lines",
    "blockify_host",
]

__version__ = "0.1.0"
