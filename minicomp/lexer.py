"""Split C-like source text into classified tokens and build symbol tables."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

MAX_SOURCE_CHARS = 999
GLOBAL_SCOPE = 0
LOCAL_SCOPE = 1

DELIMITERS = frozenset(" +-*/,;><=()[]{}")
OPERATORS = frozenset("+-*/><=")
KEYWORDS = frozenset({
    "if", "else", "while", "do", "break", "continue", "int",
    "double", "float", "return", "char", "case", "sizeof", "long", "short",
    "typedef", "switch", "unsigned", "void", "static", "struct", "goto",
})

_DIGITS = frozenset("0123456789")
_SPLITTER = re.compile(r"([ +\-*/,;><=()\[\]{}])")

_TABLE_RULE = "========================================"
_HEADER_RULE = "--------------------------------------------"


class TokenKind(Enum):
    """Classification of a token, valued by its report label."""

    OPERATOR = "Valid operator"
    KEYWORD = "Valid keyword"
    INTEGER = "Valid Integer"
    REAL_NUMBER = "Real Number"
    IDENTIFIER = "Valid Identifier"
    INVALID_IDENTIFIER = "Invalid Identifier"


@dataclass(frozen=True)
class Token:
    """A piece of source text together with its classification."""

    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.value} : '{self.text}'"


def is_delimiter(ch: str) -> bool:
    """Return True if ``ch`` separates words."""
    return ch in DELIMITERS


def is_operator(ch: str) -> bool:
    """Return True if ``ch`` is an arithmetic, relational or assignment operator."""
    return ch in OPERATORS


def is_keyword(word: str) -> bool:
    """Return True if ``word`` is one of the recognised keywords."""
    return word in KEYWORDS


def is_integer(word: str) -> bool:
    """Return True if ``word`` is a non-empty run of decimal digits."""
    return bool(word) and all(ch in _DIGITS for ch in word)


def is_real_number(word: str) -> bool:
    """Return True if ``word`` holds only digits and dots, with at least one dot."""
    return (
        bool(word)
        and all(ch in _DIGITS or ch == "." for ch in word)
        and "." in word
    )


def is_identifier(word: str) -> bool:
    """Return True unless ``word`` starts with a digit or a delimiter."""
    first = word[:1]
    return first not in _DIGITS and not is_delimiter(first)


def _classify(word: str) -> Token:
    if is_keyword(word):
        return Token(TokenKind.KEYWORD, word)
    if is_integer(word):
        return Token(TokenKind.INTEGER, word)
    if is_real_number(word):
        return Token(TokenKind.REAL_NUMBER, word)
    if is_identifier(word):
        return Token(TokenKind.IDENTIFIER, word)
    return Token(TokenKind.INVALID_IDENTIFIER, word)


def detect_tokens(text: str) -> list[Token]:
    """Split ``text`` at delimiters and classify every word and operator.

    Delimiters that are not operators are dropped. Text after a NUL
    character is ignored.
    """
    text = text.split("\0", 1)[0]
    tokens: list[Token] = []
    for piece in _SPLITTER.split(text):
        if not piece:
            continue
        if is_delimiter(piece):
            if is_operator(piece):
                tokens.append(Token(TokenKind.OPERATOR, piece))
        else:
            tokens.append(_classify(piece))
    return tokens


@dataclass
class Symbol:
    """An entry of a symbol table."""

    name: str
    type_name: str
    scope: int


def _row(name: str, type_name: str, scope: str) -> str:
    return f"| {name:<20} | {type_name:<20} | {scope:<10} |"


@dataclass
class SymbolTable:
    """Global and local symbols, kept in insertion order."""

    global_symbols: list[Symbol] = field(default_factory=list)
    local_symbols: list[Symbol] = field(default_factory=list)

    def add(self, name: str, type_name: str, scope: int) -> Symbol:
        """Record a symbol; scope 0 is global, anything else is local."""
        symbol = Symbol(name, type_name, scope)
        if scope == GLOBAL_SCOPE:
            self.global_symbols.append(symbol)
        else:
            self.local_symbols.append(symbol)
        return symbol

    def format(self) -> str:
        """Render both tables as text, one section per scope."""
        lines: list[str] = []
        sections = (
            ("Global Symbol Table", "Global", self.global_symbols),
            ("Local Symbol Table", "Local", self.local_symbols),
        )
        for title, label, symbols in sections:
            lines += ["", _TABLE_RULE, f"\t{title}", _TABLE_RULE,
                      _row("Name", "Type", "Scope"), _HEADER_RULE]
            lines += [_row(symbol.name, symbol.type_name, label) for symbol in symbols]
        return "\n".join(lines) + "\n"


def build_symbol_table(tokens: Iterable[Token]) -> SymbolTable:
    """Enter every valid identifier among ``tokens`` into the local table."""
    table = SymbolTable()
    for token in tokens:
        if token.kind is TokenKind.IDENTIFIER:
            table.add(token.text, "Identifier", LOCAL_SCOPE)
    return table


def main(argv: list[str] | None = None) -> int:
    """Print the tokens of a source file, optionally with its symbol table."""
    parser = argparse.ArgumentParser(prog="lexer", description=__doc__)
    parser.add_argument("file", nargs="?", default="input.c", help="source file to scan")
    parser.add_argument("--symbols", action="store_true", help="also print the symbol tables")
    args = parser.parse_args(argv)
    try:
        with open(args.file, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read(MAX_SOURCE_CHARS)
    except OSError:
        print(f"Error: Could not open file {args.file}")
        return 1
    print(f"The Program is :\n{text}")
    print("All Tokens are : ")
    tokens = detect_tokens(text)
    for token in tokens:
        print(token)
    if args.symbols:
        print(build_symbol_table(tokens).format(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())