"""Executable Textual app that converts boxes in an editable buffer."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use ascii_blocks.adapters.textual.app"
    ) from exc

from ascii_blocks.convert import blockify_host
from ascii_blocks.runtime import telemetry

from .host import TextAreaHost


@dataclass
class UIState:
    status_text: str = ""
    boxes_converted: int = 0


class BlockifyApp(App[None]):
    """Minimal Textual editor with a key binding that redraws ASCII boxes."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+b", "blockify", "Blockify"),
        ("ctrl+s", "save", "Save"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        path: Optional[Path] = None,
        text: Optional[str] = None,
        read_only: bool = False,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._path = path
        self._read_only = read_only
        if text is None and path is not None and path.exists():
            text = path.read_text(encoding="utf-8")
        self._initial_text = text or ""
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._editor = TextArea(self._initial_text, id="editor")
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        if self._editor:
            self._editor.focus()
        self._update_status(str(self._path) if self._path else "[scratch]")

    @property
    def ui_state(self) -> UIState:
        return self._state

    def action_blockify(self) -> None:
        if not self._editor:
            return
        converted = blockify_host(TextAreaHost(self._editor))
        self._state.boxes_converted += converted
        self._update_status(f"converted {converted} box(es)")

    def action_save(self) -> None:
        if not self._editor:
            return
        if self._path is None or self._read_only:
            self._update_status("nothing to save to")
            return
        self._path.write_text(self._editor.text, encoding="utf-8")
        telemetry.record_event("app.save", data={"path": str(self._path)})
        self._update_status(f"saved {self._path}")

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Edit a text file and redraw its ASCII boxes with ctrl+b."
    )
    parser.add_argument("path", nargs="?", help="File to open (optional)")
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Never write changes back to the opened file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="quiet")
    path = Path(args.path) if args.path else None
    app = BlockifyApp(path=path, read_only=args.read_only)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
