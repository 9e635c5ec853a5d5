"""Host buffer backed by a Textual ``TextArea``."""

from __future__ import annotations

from typing import List, Sequence

from textual.widgets import TextArea


class TextAreaHost:
    """Expose a ``TextArea`` through the ``HostBuffer`` protocol.

    Writes go through ``TextArea.replace`` over the whole document so the
    conversion lands on the widget's undo stack as a single edit.
    """

    def __init__(self, text_area: TextArea) -> None:
        self.text_area = text_area

    def get_lines(self) -> Sequence[str]:
        return list(self.text_area.document.lines)

    def set_lines(self, lines: List[str]) -> None:
        document = self.text_area.document
        self.text_area.replace("\n".join(lines), document.start, document.end)


__all__ = ["TextAreaHost"]
