"""Recursive-descent parser for programs with decision and looping statements.

Grammar, on top of the declarations and expressions of :mod:`minicomp.rdbase`::

    statement      -> assign_stat ; | decision_stat | looping_stat
    decision_stat  -> if ( expn ) { statement_list } dprime
    dprime         -> else { statement_list } | e
    looping_stat   -> while ( expn ) { statement_list }
                    | for ( assign_stat ; expn ; assign_stat ) { statement_list }

The ``decisions`` dialect knows only ``if``/``else``. The ``loops`` dialect
adds ``while`` and ``for``.
"""

from __future__ import annotations

import argparse
from enum import Enum

from minicomp.rdbase import BasicParser, Position, SourceSyntaxError, SUCCESS_MESSAGE

DECISIONS_SAMPLE = (
    "main() {\n"
    "  int x, y;\n"
    "  x = 10;\n"
    "  if (x > 5) {\n"
    "    y = x + 1;\n"
    "  } else {\n"
    "    y = x - 1;\n"
    "  }\n"
    "}"
)

LOOPS_SAMPLE = (
    "main() {\n"
    "  int i, sum;\n"
    "  sum = 0;\n"
    "  for (i = 0; i < 10; i = i + 1) {\n"
    "    sum = sum + i;\n"
    "  }\n"
    "  while (sum > 50) {\n"
    "    sum = sum - 10;\n"
    "  }\n"
    "}"
)


class Dialect(Enum):
    """Which statement forms the parser accepts."""

    DECISIONS = "decisions"
    LOOPS = "loops"

    @property
    def sample(self) -> str:
        """A small program written in this dialect."""
        return DECISIONS_SAMPLE if self is Dialect.DECISIONS else LOOPS_SAMPLE

    @property
    def has_loops(self) -> bool:
        """True if ``while`` and ``for`` statements are recognised."""
        return self is Dialect.LOOPS


class StatementParser(BasicParser):
    """Parser that adds ``if``/``else`` and, optionally, loop statements."""

    def __init__(self, source: str, dialect: Dialect = Dialect.LOOPS) -> None:
        super().__init__(source)
        self.dialect = dialect

    def parse(self) -> Position:
        """Parse a whole program and return the position where it ended."""
        return super().parse()

    def _starts_with(self, word: str) -> bool:
        return self.source.startswith(word, self.pos)

    def _statement(self) -> None:
        self._skip_whitespace()
        if self._starts_with("if"):
            self._decision_stat()
        elif self.dialect.has_loops and (self._starts_with("while") or self._starts_with("for")):
            self._looping_stat()
        else:
            self._assign_stat()
            self._match(";")

    def _block(self) -> None:
        self._skip_whitespace()
        self._match("{")
        self._statement_list()
        self._match("}")

    def _decision_stat(self) -> None:
        self._match_string("if")
        self._match("(")
        self._expn()
        self._match(")")
        self._block()
        self._dprime()

    def _dprime(self) -> None:
        self._skip_whitespace()
        if self._starts_with("else"):
            self._match_string("else")
            self._block()

    def _looping_stat(self) -> None:
        self._skip_whitespace()
        if self._starts_with("while"):
            self._match_string("while")
            self._match("(")
            self._expn()
            self._match(")")
            self._block()
        elif self._starts_with("for"):
            self._match_string("for")
            self._match("(")
            self._assign_stat()
            self._match(";")
            self._expn()
            self._match(";")
            self._assign_stat()
            self._match(")")
            self._block()
        else:
            raise self._error("Expected 'while' or 'for' for looping statement")


def parse_program(source: str, dialect: Dialect = Dialect.LOOPS) -> Position:
    """Parse ``source`` in ``dialect``; return the end position or raise SourceSyntaxError."""
    return StatementParser(source, dialect).parse()


def main(argv: list[str] | None = None) -> int:
    """Parse a program from a file, or the dialect's sample, and report the outcome."""
    parser = argparse.ArgumentParser(
        prog="rdparser", description="Parse a small C-like program with control flow."
    )
    parser.add_argument("file", nargs="?", help="program to parse; the built-in sample if omitted")
    parser.add_argument(
        "--dialect",
        choices=[dialect.value for dialect in Dialect],
        default=Dialect.LOOPS.value,
        help="statement forms to accept",
    )
    args = parser.parse_args(argv)
    dialect = Dialect(args.dialect)
    if args.file is None:
        source = dialect.sample
    else:
        try:
            with open(args.file, encoding="utf-8", errors="replace") as handle:
                source = handle.read()
        except OSError:
            print(f"Could not open file {args.file}")
            return 1
    try:
        parse_program(source, dialect)
    except SourceSyntaxError as exc:
        print(exc)
        return 1
    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())