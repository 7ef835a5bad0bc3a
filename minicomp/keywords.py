"""Find C keywords in source text and report them in upper case."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterator

KEYWORDS = frozenset({
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if",
    "inline", "int", "long", "register", "restrict", "return", "short",
    "signed", "sizeof", "static", "struct", "switch", "typedef", "union",
    "unsigned", "void", "volatile", "while", "_Bool", "_Complex", "_Imaginary",
})

_SEPARATORS = re.compile(r"[ \t\n(){}\[\];,<>=+\-*/&|!]+")


def is_keyword(word: str) -> bool:
    """Return True if ``word`` is exactly a C keyword."""
    return word in KEYWORDS


def find_keywords(text: str) -> Iterator[str]:
    """Yield keywords, upper-cased, splitting words on whitespace and punctuation."""
    for line in text.splitlines():
        for word in _SEPARATORS.split(line):
            if is_keyword(word):
                yield word.upper()


def find_keywords_in_words(text: str) -> Iterator[str]:
    """Yield keywords, upper-cased, among whitespace-separated words only."""
    for word in text.split():
        if is_keyword(word):
            yield word.upper()


def main(argv: list[str] | None = None) -> int:
    """Print the keywords of a C file in upper case."""
    parser = argparse.ArgumentParser(prog="keywords", description=__doc__)
    parser.add_argument("file", help="C source file to scan")
    parser.add_argument(
        "--words",
        action="store_true",
        help="match whole whitespace-separated words only",
    )
    args = parser.parse_args(argv)
    try:
        with open(args.file, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        print(f"Could not open file {args.file}")
        return 1
    finder = find_keywords_in_words if args.words else find_keywords
    print("Keywords in uppercase:")
    for keyword in finder(text):
        print(keyword)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())