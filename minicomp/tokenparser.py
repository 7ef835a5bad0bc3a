"""Tokenizer and recursive-descent parser for a tiny declaration language.

Grammar::

    program       -> main() { declarations assign_stat }
    declarations  -> data_type identifier_list ; declarations | e
    data_type     -> int | char
    identifier_list -> id | id , identifier_list
    assign_stat   -> id = id ; | id = num ;
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

CODE_LIMIT = 255
_SPACE = frozenset(" \t\n\v\f\r")
_DATA_TYPES = ("int", "char")


class ParseError(ValueError):
    """Raised when the token stream does not match the grammar."""

    def __init__(self, expected: str, row: int, column: int, found: str) -> None:
        self.expected = expected
        self.row = row
        self.column = column
        self.found = found
        super().__init__(
            f"Expected {expected} at line {row}, column {column}, but found '{found}'"
        )


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def tokenize(code: str) -> list[str]:
    """Split ``code`` into ``main()``, letter runs, digit runs and single characters."""
    tokens: list[str] = []
    pos = 0
    length = len(code)
    while pos < length:
        while pos < length and code[pos] in _SPACE:
            pos += 1
        if pos >= length:
            break
        if code.startswith("main()", pos):
            tokens.append("main()")
            pos += 6
        elif _is_alpha(code[pos]) or _is_digit(code[pos]):
            test = _is_alpha if _is_alpha(code[pos]) else _is_digit
            start = pos
            while pos < length and test(code[pos]):
                pos += 1
            tokens.append(code[start:pos])
        else:
            tokens.append(code[pos])
            pos += 1
    return tokens


class TokenParser:
    """Parses a token list; the column counts tokens consumed so far."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = list(tokens)
        self.pos = 0
        self.row = 0
        self.col = 0

    @property
    def current(self) -> str:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else ""

    def _error(self, expected: str) -> ParseError:
        return ParseError(expected, self.row, self.col, self.current)

    def _eat(self, token: str) -> None:
        if self.current != token:
            raise self._error(token)
        self.pos += 1
        self.col += 1

    def parse(self) -> int:
        """Parse a whole program and return the number of tokens consumed."""
        self._eat("main()")
        self._eat("{")
        self._declarations()
        self._assign_stat()
        self._eat("}")
        return self.pos

    def _declarations(self) -> None:
        while self.current in _DATA_TYPES:
            self._eat(self.current)
            self._identifier_list()
            self._eat(";")

    def _identifier_list(self) -> None:
        self._eat("id")
        while self.current == ",":
            self._eat(",")
            self._eat("id")

    def _assign_stat(self) -> None:
        if self.current != "id":
            raise self._error("id")
        self._eat("id")
        self._eat("=")
        if self.current not in ("id", "num"):
            raise self._error("id or num")
        self._eat(self.current)
        self._eat(";")


def parse_program(code: str) -> int:
    """Tokenize and parse ``code``; return the number of tokens consumed."""
    return TokenParser(tokenize(code)).parse()


def main(argv: list[str] | None = None) -> int:
    """Parse code from a file or a prompt and report the outcome."""
    parser = argparse.ArgumentParser(prog="tokenparser", description="Parse a tiny program.")
    parser.add_argument("file", nargs="?", help="file holding the code; prompt if omitted")
    args = parser.parse_args(argv)
    if args.file is not None:
        try:
            with open(args.file, encoding="utf-8", errors="replace") as handle:
                code = handle.read()
        except OSError:
            print(f"Could not open file {args.file}")
            return 1
    else:
        try:
            code = input("Enter the code: ")[:CODE_LIMIT]
        except EOFError:
            code = ""
    try:
        parse_program(code)
    except ParseError as exc:
        print(exc)
        return 1
    print("Parsing successful")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())