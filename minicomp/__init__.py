"""Compiler-construction toolkit: text filters, keyword finding, lexing, parsing and code generation."""

__version__ = "0.1.0"
__all__ = [
    "codegen",
    "grammars",
    "keywords",
    "lexer",
    "rdbase",
    "rdparser",
    "textfiles",
    "tokenparser",
]