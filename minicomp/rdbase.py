"""Recursive-descent parser for declarations and assignment statements.

Grammar::

    program         -> main ( ) { declarations statement_list }
    declarations    -> data_type identifier_list ; declarations | e
    data_type       -> int | char
    identifier_list -> id | id , identifier_list
                     | id [ number ] | id [ number ] , identifier_list
    statement_list  -> statement statement_list | e
    statement       -> assign_stat ;
    assign_stat     -> id = expn | id [ expn ] = expn
    expn            -> simple_expn eprime
    eprime          -> relop simple_expn | e
    simple_expn     -> term seprime
    seprime         -> addop term seprime | e
    term            -> factor tprime
    tprime          -> mulop factor tprime | e
    factor          -> id | id [ expn ] | num | ( expn )
"""

from __future__ import annotations

import argparse
import string
from typing import NamedTuple

SAMPLE_PROGRAM = (
    "main() {\n"
    "  int x[10], y, count;\n"
    "  char name[20];\n"
    "  x[0] = 5;\n"
    "  y = x[0] + 2;\n"
    "  count = y * 3;\n"
    "  name[0] = 65;\n"
    "}"
)

SUCCESS_MESSAGE = "Parsing successful!"

_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_WHITESPACE = frozenset(" \t\n")
_ADDOPS = frozenset("+-")
_MULOPS = frozenset("*/%")
_SINGLE_RELOPS = frozenset("<>")
_DOUBLE_RELOPS = frozenset({"==", "!=", ">=", "<="})
_FOUND_LIMIT = 19


class Position(NamedTuple):
    """A 1-based row and column in the source text."""

    row: int
    column: int


class SourceSyntaxError(ValueError):
    """Raised when the source text does not match the grammar."""

    def __init__(self, row: int, column: int, message: str) -> None:
        self.row = row
        self.column = column
        self.message = message
        super().__init__(f"Error at row {row}, column {column}: {message}")


def _starts_identifier(ch: str) -> bool:
    return ch in _ALPHA or ch == "_"


def _identifier_char(ch: str) -> bool:
    return ch in _ALPHA or ch in _DIGITS or ch == "_"


def _is_digit(ch: str) -> bool:
    return ch in _DIGITS


class BasicParser:
    """Character-level parser that tracks the row and column it has reached."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.row = 1
        self.column = 1

    # -- low-level helpers -------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        start = self.pos + offset
        return self.source[start:start + 1]

    def _advance(self, count: int = 1) -> None:
        self.pos += count
        self.column += count

    def _error(self, message: str) -> SourceSyntaxError:
        return SourceSyntaxError(self.row, self.column, message)

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE and not self._at_end():
            if self._peek() == "\n":
                self.row += 1
                self.column = 1
                self.pos += 1
            else:
                self._advance()

    def _consume_while(self, predicate) -> None:
        while not self._at_end() and predicate(self._peek()):
            self._advance()

    def _match(self, expected: str) -> None:
        self._skip_whitespace()
        found = self._peek()
        if found != expected:
            raise self._error(f"Expected '{expected}', found '{found}'")
        self._advance()

    def _match_string(self, expected: str) -> None:
        self._skip_whitespace()
        if not self.source.startswith(expected, self.pos):
            width = min(len(expected), _FOUND_LIMIT)
            found = self.source[self.pos:self.pos + width]
            raise self._error(f"Expected '{expected}', found '{found}'")
        self._advance(len(expected))

    def _relop_length(self) -> int:
        if self.source[self.pos:self.pos + 2] in _DOUBLE_RELOPS:
            return 2
        if self._peek() and self._peek() in _SINGLE_RELOPS:
            return 1
        return 0

    # -- grammar -----------------------------------------------------------

    def parse(self) -> Position:
        """Parse a whole program and return the position where it ended."""
        self._match_string("main")
        self._match("(")
        self._match(")")
        self._match("{")
        self._declarations()
        self._statement_list()
        self._match("}")
        self._skip_whitespace()
        if not self._at_end():
            raise self._error("Unexpected input after program")
        return Position(self.row, self.column)

    def _declarations(self) -> None:
        while True:
            self._skip_whitespace()
            if self.source.startswith("int", self.pos):
                self._advance(3)
            elif self.source.startswith("char", self.pos):
                self._advance(4)
            else:
                return
            self._skip_whitespace()
            self._identifier_list()
            self._match(";")

    def _identifier_list(self) -> None:
        while True:
            self._skip_whitespace()
            if not _starts_identifier(self._peek()):
                raise self._error("Expected identifier")
            self._consume_while(_identifier_char)
            self._skip_whitespace()
            if self._peek() == "[":
                self._match("[")
                self._skip_whitespace()
                if not _is_digit(self._peek()):
                    raise self._error("Expected array size (number)")
                self._consume_while(_is_digit)
                self._skip_whitespace()
                self._match("]")
            self._skip_whitespace()
            if self._peek() != ",":
                return
            self._match(",")

    def _statement_list(self) -> None:
        while True:
            self._skip_whitespace()
            if not _starts_identifier(self._peek()):
                return
            self._statement()

    def _statement(self) -> None:
        self._skip_whitespace()
        self._assign_stat()
        self._match(";")

    def _assign_stat(self) -> None:
        self._skip_whitespace()
        if not _starts_identifier(self._peek()):
            raise self._error("Expected identifier in assignment")
        self._consume_while(_identifier_char)
        self._skip_whitespace()
        if self._peek() == "[":
            self._match("[")
            self._expn()
            self._match("]")
        self._skip_whitespace()
        self._match("=")
        self._expn()

    def _expn(self) -> None:
        self._skip_whitespace()
        self._simple_expn()
        self._eprime()

    def _eprime(self) -> None:
        self._skip_whitespace()
        length = self._relop_length()
        if length:
            self._advance(length)
            self._simple_expn()

    def _simple_expn(self) -> None:
        self._skip_whitespace()
        self._term()
        self._skip_whitespace()
        while self._peek() and self._peek() in _ADDOPS:
            self._advance()
            self._term()
            self._skip_whitespace()

    def _term(self) -> None:
        self._skip_whitespace()
        self._factor()
        self._skip_whitespace()
        while self._peek() and self._peek() in _MULOPS:
            self._advance()
            self._factor()
            self._skip_whitespace()

    def _factor(self) -> None:
        self._skip_whitespace()
        ch = self._peek()
        if _starts_identifier(ch):
            self._consume_while(_identifier_char)
            self._skip_whitespace()
            if self._peek() == "[":
                self._match("[")
                self._expn()
                self._match("]")
        elif _is_digit(ch):
            self._consume_while(_is_digit)
        elif ch == "(":
            self._match("(")
            self._expn()
            self._match(")")
        else:
            raise self._error("Expected identifier, number, or parenthesized expression")


def parse_program(source: str) -> Position:
    """Parse ``source``; return the end position or raise SourceSyntaxError."""
    return BasicParser(source).parse()


def main(argv: list[str] | None = None) -> int:
    """Parse a program from a file, or the built-in sample, and report the outcome."""
    parser = argparse.ArgumentParser(prog="rdbase", description="Parse a small C-like program.")
    parser.add_argument("file", nargs="?", help="program to parse; the built-in sample if omitted")
    args = parser.parse_args(argv)
    if args.file is None:
        source = SAMPLE_PROGRAM
    else:
        try:
            with open(args.file, encoding="utf-8", errors="replace") as handle:
                source = handle.read()
        except OSError:
            print(f"Could not open file {args.file}")
            return 1
    try:
        parse_program(source)
    except SourceSyntaxError as exc:
        print(exc)
        return 1
    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())