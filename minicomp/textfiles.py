"""Small text-file utilities: counting, reversing, merging and cleaning."""

from __future__ import annotations

import argparse
import itertools
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import NamedTuple

_MISSING = object()


class FileStats(NamedTuple):
    """Line and character counts of a piece of text."""

    lines: int
    characters: int


def count_lines_and_chars(text: str) -> FileStats:
    """Count lines and characters; any non-empty text gets one extra line."""
    characters = len(text)
    lines = text.count("\n")
    if characters:
        lines += 1
    return FileStats(lines, characters)


def reverse_file(source: str | Path, destination: str | Path) -> int:
    """Write the bytes of ``source`` in reverse order to ``destination``.

    Returns the size of the source file in bytes.
    """
    data = Path(source).read_bytes()
    Path(destination).write_bytes(data[::-1])
    return len(data)


def merge_alternating(first: Iterable[str], second: Iterable[str]) -> Iterator[str]:
    """Yield lines taken alternately from both inputs, then whatever remains."""
    for pair in itertools.zip_longest(first, second, fillvalue=_MISSING):
        for line in pair:
            if line is not _MISSING:
                yield line


def squeeze_blanks(text: str) -> str:
    """Replace runs of spaces and tabs with single spaces.

    A blank is dropped only when the character before it was a space, so a
    tab that follows another tab still yields a space of its own.
    """
    out = []
    previous = ""
    for ch in text:
        if ch in " \t":
            if previous != " ":
                out.append(" ")
        else:
            out.append(ch)
        previous = ch
    return "".join(out)


def strip_directives(lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines that do not start with a preprocessor ``#``."""
    return (line for line in lines if not line.startswith("#"))


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return handle.read()


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        handle.write(text)


def _cmd_count(args: argparse.Namespace) -> int:
    try:
        text = _read_text(args.file)
    except OSError:
        print(f"Could not open file {args.file}")
        return 1
    stats = count_lines_and_chars(text)
    print(f"Number of lines: {stats.lines}")
    print(f"Number of characters: {stats.characters}")
    return 0


def _cmd_reverse(args: argparse.Namespace) -> int:
    try:
        size = reverse_file(args.input, args.output)
    except OSError as exc:
        print(f"Could not open file {exc.filename}")
        return 1
    print(f"The size of the file '{args.input}' is: {size} bytes")
    return 0


def _cmd_merge(args: argparse.Namespace) -> int:
    try:
        with open(args.first, encoding="utf-8", errors="surrogateescape", newline="") as a, \
                open(args.second, encoding="utf-8", errors="surrogateescape", newline="") as b, \
                open(args.output, "w", encoding="utf-8", errors="surrogateescape",
                     newline="") as out:
            out.writelines(merge_alternating(a, b))
    except OSError:
        print("Error opening one or more files.")
        return 1
    print(f"Lines merged successfully into {args.output}")
    return 0


def _cmd_squeeze(args: argparse.Namespace) -> int:
    try:
        text = _read_text(args.input)
    except OSError:
        print(f"Could not open file {args.input}")
        return 1
    try:
        _write_text(args.output, squeeze_blanks(text))
    except OSError:
        print(f"Could not open file {args.output}")
        return 1
    print("Blank spaces and tabs replaced by single spaces successfully.")
    return 0


def _cmd_strip(args: argparse.Namespace) -> int:
    try:
        text = _read_text(args.input)
    except OSError:
        print(f"Could not open file {args.input}")
        return 1
    try:
        _write_text(args.output, "".join(strip_directives(text.splitlines(keepends=True))))
    except OSError:
        print(f"Could not open file {args.output}")
        return 1
    print("Preprocessor directives removed successfully.")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textfiles", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    count = sub.add_parser("count", help="count lines and characters")
    count.add_argument("file")
    count.set_defaults(func=_cmd_count)

    reverse = sub.add_parser("reverse", help="write a file's contents in reverse")
    reverse.add_argument("input")
    reverse.add_argument("output")
    reverse.set_defaults(func=_cmd_reverse)

    merge = sub.add_parser("merge", help="merge two files line by line, alternately")
    merge.add_argument("first")
    merge.add_argument("second")
    merge.add_argument("output")
    merge.set_defaults(func=_cmd_merge)

    squeeze = sub.add_parser("squeeze", help="collapse blanks and tabs to single spaces")
    squeeze.add_argument("input")
    squeeze.add_argument("output")
    squeeze.set_defaults(func=_cmd_squeeze)

    strip = sub.add_parser("strip", help="remove preprocessor directive lines")
    strip.add_argument("input")
    strip.add_argument("output")
    strip.set_defaults(func=_cmd_strip)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one of the text-file commands and return an exit status."""
    args = _build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())