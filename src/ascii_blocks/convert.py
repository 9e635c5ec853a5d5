"""Entry points that run the box scanner over text, lines or a host buffer."""

from __future__ import annotations

from typing import Iterable, List

from ascii_blocks.boxes import blockify
from ascii_blocks.buffer import BufferDocument, HostBuffer


def blockify_text(text: str) -> str:
    """Return ``text`` with every ASCII box redrawn in box-drawing glyphs."""

    document = BufferDocument.from_text(text)
    blockify(document)
    return document.to_text()


def blockify_lines(lines: Iterable[str]) -> List[str]:
    document = BufferDocument.from_lines(lines)
    blockify(document)
    return document.to_lines()


def blockify_host(host: HostBuffer) -> int:
    """Convert the boxes held by ``host`` and write every line back.

    The host is read once and written once; the number of converted boxes is
    returned.
    """

    document = BufferDocument.from_lines(host.get_lines())
    converted = blockify(document)
    host.set_lines(document.to_lines())
    return converted


__all__ = ["blockify_text", "blockify_lines", "blockify_host"]
