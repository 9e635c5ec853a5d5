"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Optional

from .sync import BufferValidationError


def ensure_span(
    length: int, start_col: int, end_col: int, *, row: Optional[int] = None
) -> int:
    """Check a 1-based inclusive write span and return ``end_col`` clipped to ``length``."""

    if start_col < 1 or start_col > length:
        raise BufferValidationError("Column out of range", row=row, column=start_col)
    if end_col < start_col:
        raise BufferValidationError("Span ends before it starts", row=row, column=end_col)
    return min(end_col, length)


def ensure_order(start_col: int, end_col: int, *, row: Optional[int] = None) -> None:
    if start_col > end_col:
        raise BufferValidationError("Span ends before it starts", row=row, column=end_col)
