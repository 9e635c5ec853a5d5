"""Adapter boundary types for syncing documents with host buffers."""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence


class HostBuffer(Protocol):
    """Protocol describing how a host editor exchanges lines with the engine."""

    def get_lines(self) -> Sequence[str]:
        """Return every line currently held by the host, in order."""
        ...

    def set_lines(self, lines: List[str]) -> None:
        """Replace the host's entire content with ``lines``."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a write or read addresses columns outside a line."""

    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column
