from __future__ import annotations

import io
from pathlib import Path

import pytest

from ascii_blocks.cli import FileProcessor, main

BOX = "+---+\n|   |\n+---+\n"
CONVERTED = "┌───┐\n│   │\n└───┘\n"


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_single_file_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = write(tmp_path / "box.txt", BOX)

    assert main([str(target)]) == 0

    assert capsys.readouterr().out == CONVERTED
    assert target.read_text(encoding="utf-8") == BOX


def test_cli_in_place_modification(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = write(tmp_path / "box.txt", BOX)

    assert main(["--in-place", str(target)]) == 0

    assert capsys.readouterr().out == ""
    assert target.read_text(encoding="utf-8") == CONVERTED


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(BOX))

    assert main([]) == 0

    assert capsys.readouterr().out == CONVERTED


def test_cli_check_reports_without_writing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    dirty = write(tmp_path / "dirty.txt", BOX)
    clean = write(tmp_path / "clean.txt", CONVERTED)

    assert main(["--check", "--in-place", str(dirty), str(clean)]) == 1

    out = capsys.readouterr().out
    assert out == f"would convert: {dirty}\n"
    assert dirty.read_text(encoding="utf-8") == BOX


def test_cli_check_passes_on_converted_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    clean = write(tmp_path / "clean.txt", CONVERTED)

    assert main(["--check", str(clean)]) == 0
    assert capsys.readouterr().out == ""


def test_cli_directory_without_recursive_flag(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main([str(tmp_path)]) == 1

    assert "Use --recursive" in capsys.readouterr().err


def test_cli_recursive_uses_pattern(tmp_path: Path) -> None:
    nested = tmp_path / "docs" / "deep"
    nested.mkdir(parents=True)
    first = write(tmp_path / "docs" / "a.md", BOX)
    second = write(nested / "b.md", BOX)
    skipped = write(nested / "c.txt", BOX)

    assert main(["-r", "-i", "-p", "*.md", str(tmp_path)]) == 0

    assert first.read_text(encoding="utf-8") == CONVERTED
    assert second.read_text(encoding="utf-8") == CONVERTED
    assert skipped.read_text(encoding="utf-8") == BOX


def test_cli_nonexistent_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.txt"

    assert main([str(missing)]) == 1

    assert "File not found" in capsys.readouterr().err


def test_cli_rejects_large_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = write(tmp_path / "box.txt", BOX)

    assert main(["--max-size", "4", str(target)]) == 1

    assert "File too large" in capsys.readouterr().err


def test_cli_reports_undecodable_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    target = tmp_path / "binary.txt"
    target.write_bytes(b"\xff\xfe+---+")

    assert main([str(target)]) == 1

    assert "Cannot decode file" in capsys.readouterr().err


def test_processor_keeps_crlf_line_endings(tmp_path: Path) -> None:
    target = tmp_path / "crlf.txt"
    target.write_bytes(BOX.replace("\n", "\r\n").encode("utf-8"))

    converted, changed = FileProcessor().process_file(str(target), in_place=True)

    assert changed is True
    assert converted == CONVERTED.replace("\n", "\r\n")
    assert target.read_bytes() == CONVERTED.replace("\n", "\r\n").encode("utf-8")
