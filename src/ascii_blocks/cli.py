"""Command line entry point for converting ASCII boxes in files or stdin."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from ascii_blocks.convert import blockify_text
from ascii_blocks.runtime import telemetry

STDIN_PATH = "-"


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


# File size limit (10MB)
MAX_FILE_SIZE = _env_int(f"{telemetry.ENV_PREFIX}MAX_FILE_SIZE", 10 * 1024 * 1024)


class FileProcessor:
    """Reads, converts and (optionally) writes back text files."""

    def __init__(self, *, max_size: int = MAX_FILE_SIZE) -> None:
        self.max_size = max_size
        self.logger = telemetry.get_logger("ascii_blocks.cli")

    def process_file(
        self, file_path: str, *, in_place: bool = False, dry_run: bool = False
    ) -> tuple[str, bool]:
        """Convert one file and return ``(converted_text, changed)``.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is larger than ``max_size``
            UnicodeDecodeError: If the file is not valid UTF-8
        """

        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Not a regular file: {file_path}")

        file_size = path.stat().st_size
        if file_size > self.max_size:
            raise ValueError(
                f"File too large: {file_size} bytes (max {self.max_size})"
            )

        with open(path, "r", encoding="utf-8", newline="") as handle:
            original = handle.read()

        converted = blockify_text(original)
        changed = converted != original

        if changed:
            self.logger.info(f"Converted: {file_path}")
        else:
            self.logger.debug(f"No changes: {file_path}")

        if in_place and changed and not dry_run:
            with open(path, "w", encoding="utf-8", newline="") as handle:
                handle.write(converted)

        return converted, changed

    def iter_directory(self, dir_path: str, pattern: str) -> list[Path]:
        path = Path(dir_path)
        if not path.is_dir():
            raise NotADirectoryError(f"Not a directory: {dir_path}")
        return sorted(p for p in path.rglob(pattern) if p.is_file())


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ascii-blocks",
        description="Redraw ASCII boxes (+, -, |) with Unicode box-drawing characters",
        epilog="Example: %(prog)s --in-place diagram.txt",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to process ('-' or nothing reads stdin)",
    )
    parser.add_argument(
        "-i", "--in-place", action="store_true", help="Modify files in place"
    )
    parser.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Only report files that would change; exit 1 if any would",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Process directories recursively",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        default="*.txt",
        help="File pattern for recursive processing (default: *.txt)",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=MAX_FILE_SIZE,
        help=f"Largest file accepted, in bytes (default: {MAX_FILE_SIZE})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose logging"
    )
    return parser.parse_args(argv)


def _convert_stdin(check: bool) -> int:
    original = sys.stdin.read()
    converted = blockify_text(original)
    if check:
        if converted != original:
            print(f"would convert: {STDIN_PATH}")
            return 1
        return 0
    sys.stdout.write(converted)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool and return its exit code."""

    args = _parse_args(argv)
    if args.verbose:
        telemetry.configure(preset="development")

    paths = list(args.paths) or [STDIN_PATH]
    processor = FileProcessor(max_size=args.max_size)
    exit_code = 0

    for path_str in paths:
        if path_str == STDIN_PATH:
            exit_code = max(exit_code, _convert_stdin(args.check))
            continue

        path = Path(path_str)
        if path.is_dir():
            if not args.recursive:
                print(
                    f"Error: {path_str} is a directory. Use --recursive to process directories.",
                    file=sys.stderr,
                )
                exit_code = 1
                continue
            targets = processor.iter_directory(path_str, args.pattern)
        else:
            targets = [path]

        for target in targets:
            try:
                converted, changed = processor.process_file(
                    str(target), in_place=args.in_place, dry_run=args.check
                )
            except FileNotFoundError:
                print(f"Error: File not found: {target}", file=sys.stderr)
                exit_code = 1
                continue
            except UnicodeDecodeError as exc:
                print(f"Error: Cannot decode file {target}: {exc.reason}", file=sys.stderr)
                exit_code = 1
                continue
            except (OSError, ValueError) as exc:
                print(f"Error: {exc}", file=sys.stderr)
                exit_code = 1
                continue

            if args.check:
                if changed:
                    print(f"would convert: {target}")
                    exit_code = 1
            elif not args.in_place:
                sys.stdout.write(converted)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
