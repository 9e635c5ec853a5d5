"""Segmented line and document buffers."""

from .document import BufferDocument
from .segments import SegmentedLine
from .sync import BufferValidationError, HostBuffer
from .validation import ensure_span

__all__ = [
    "BufferDocument",
    "SegmentedLine",
    "HostBuffer",
    "BufferValidationError",
    "ensure_span",
]
