from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Tuple

from textual.widgets import TextArea

from ascii_blocks.adapters.textual import TextAreaHost
from ascii_blocks.adapters.textual.app import BlockifyApp

BOX = "+---+\n|   |\n+---+"
CONVERTED = "┌───┐\n│   │\n└───┘"


def test_text_area_host_reads_and_replaces_lines() -> None:
    async def drive() -> Tuple[List[str], str]:
        app = BlockifyApp(text=BOX)
        async with app.run_test() as pilot:
            host = TextAreaHost(app.query_one(TextArea))
            lines = list(host.get_lines())
            host.set_lines(["one", "two"])
            await pilot.pause()
            return lines, app.query_one(TextArea).text

    lines, text = asyncio.run(drive())

    assert lines == ["+---+", "|   |", "+---+"]
    assert text == "one\ntwo"


def test_blockify_action_converts_editor_text() -> None:
    async def drive() -> Tuple[str, str, int]:
        app = BlockifyApp(text=f"intro\n{BOX}\noutro")
        async with app.run_test() as pilot:
            app.action_blockify()
            await pilot.pause()
            return (
                app.query_one(TextArea).text,
                app.ui_state.status_text,
                app.ui_state.boxes_converted,
            )

    text, status, converted = asyncio.run(drive())

    assert text == f"intro\n{CONVERTED}\noutro"
    assert status == "converted 1 box(es)"
    assert converted == 1


def test_save_action_writes_converted_file(tmp_path: Path) -> None:
    target = tmp_path / "diagram.txt"
    target.write_text(BOX, encoding="utf-8")

    async def drive() -> str:
        app = BlockifyApp(path=target)
        async with app.run_test() as pilot:
            app.action_blockify()
            app.action_save()
            await pilot.pause()
            return app.ui_state.status_text

    status = asyncio.run(drive())

    assert target.read_text(encoding="utf-8") == CONVERTED
    assert status == f"saved {target}"


def test_save_action_respects_read_only(tmp_path: Path) -> None:
    target = tmp_path / "diagram.txt"
    target.write_text(BOX, encoding="utf-8")

    async def drive() -> str:
        app = BlockifyApp(path=target, read_only=True)
        async with app.run_test() as pilot:
            app.action_blockify()
            app.action_save()
            await pilot.pause()
            return app.ui_state.status_text

    status = asyncio.run(drive())

    assert target.read_text(encoding="utf-8") == BOX
    assert status == "nothing to save to"
