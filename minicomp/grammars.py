"""Recursive-descent recognisers for three small grammars ending in ``$``."""

from __future__ import annotations

import argparse
from collections.abc import Callable

END_MARKER = "$"
SUCCESS_BANNER = "----------------SUCCESS!---------------"
ERROR_BANNER = "-----------------ERROR!----------------"


class GrammarError(ValueError):
    """Raised when a string is not in the language of a grammar."""

    def __init__(self, position: int, found: str) -> None:
        self.position = position
        self.found = found
        what = repr(found) if found else "end of input"
        super().__init__(f"unexpected {what} at position {position}")


class _Cursor:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def accept(self, ch: str) -> bool:
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def expect(self, ch: str) -> None:
        if not self.accept(ch):
            self.fail()

    def fail(self) -> None:
        raise GrammarError(self.pos, self.peek())

    def finish(self) -> int:
        if self.peek() != END_MARKER:
            self.fail()
        return self.pos


# S -> a | > | ( T )     T -> S T'     T' -> , S T' | e
def _list_s(cur: _Cursor) -> None:
    if cur.accept("a") or cur.accept(">"):
        return
    if cur.accept("("):
        _list_t(cur)
        cur.expect(")")
        return
    cur.fail()


def _list_t(cur: _Cursor) -> None:
    _list_s(cur)
    while cur.accept(","):
        _list_s(cur)


def recognize_list(text: str) -> int:
    """Recognise S -> a | > | ( T ), T -> S {, S} followed by ``$``.

    Returns the position of the end marker; raises GrammarError otherwise.
    """
    cur = _Cursor(text)
    _list_s(cur)
    return cur.finish()


# S -> U V W     U -> ( S ) | a S b | d     V -> a V | e     W -> c W | e
def _uvw_s(cur: _Cursor) -> None:
    _uvw_u(cur)
    while cur.accept("a"):
        pass
    while cur.accept("c"):
        pass


def _uvw_u(cur: _Cursor) -> None:
    if cur.accept("("):
        _uvw_s(cur)
        cur.expect(")")
    elif cur.accept("a"):
        _uvw_s(cur)
        cur.expect("b")
    elif not cur.accept("d"):
        cur.fail()


def recognize_uvw(text: str) -> int:
    """Recognise S -> U V W with U -> (S) | aSb | d, V -> a*, W -> c*, then ``$``.

    Returns the position of the end marker; raises GrammarError otherwise.
    """
    cur = _Cursor(text)
    _uvw_s(cur)
    return cur.finish()


def recognize_abcde(text: str) -> int:
    """Recognise S -> a A c B e with A -> b b*, B -> d, then ``$``.

    Returns the position of the end marker; raises GrammarError otherwise.
    """
    cur = _Cursor(text)
    cur.expect("a")
    cur.expect("b")
    while cur.accept("b"):
        pass
    cur.expect("c")
    cur.expect("d")
    cur.expect("e")
    return cur.finish()


_RECOGNIZERS: dict[str, Callable[[str], int]] = {
    "list": recognize_list,
    "uvw": recognize_uvw,
    "abcde": recognize_abcde,
}


def main(argv: list[str] | None = None) -> int:
    """Check one string against a grammar and print the verdict."""
    parser = argparse.ArgumentParser(prog="grammars", description=__doc__)
    parser.add_argument("grammar", choices=sorted(_RECOGNIZERS))
    parser.add_argument("text", nargs="?", help="string to check; read from input if omitted")
    args = parser.parse_args(argv)
    text = args.text
    if text is None:
        try:
            words = input("Enter String: ").split()
        except EOFError:
            words = []
        text = words[0] if words else ""
    try:
        _RECOGNIZERS[args.grammar](text)
    except GrammarError:
        print(ERROR_BANNER)
    else:
        print(SUCCESS_BANNER)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())