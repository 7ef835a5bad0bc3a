# minicomp

A set of small tools for the early stages of a compiler: plain text
filters, a keyword finder, a lexer with a symbol table, recursive-descent
recognizers and parsers, and two simple code generators. Each module can
be used as a library or run as a command. Only the standard library is
needed.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

| Module | What it does |
| --- | --- |
| `minicomp.textfiles` | `count_lines_and_chars`, `reverse_file`, `merge_alternating`, `squeeze_blanks`, `strip_directives` |
| `minicomp.keywords` | `is_keyword`, `find_keywords`, `find_keywords_in_words`: C keywords reported in upper case |
| `minicomp.lexer` | `detect_tokens` returns `Token`s classified by `TokenKind`; `build_symbol_table` fills a `SymbolTable` |
| `minicomp.grammars` | `recognize_list`, `recognize_uvw`, `recognize_abcde`: recognizers for three small grammars whose input ends with `$`; raise `GrammarError` |
| `minicomp.codegen` | `CodeGenerator.if_else` for three-address code; `postfix_to_assembly` for accumulator-style assembly |
| `minicomp.tokenparser` | `tokenize` and `TokenParser` / `parse_program` for a tiny `main(){ ... }` language; raise `ParseError` |
| `minicomp.rdbase` | `BasicParser` / `parse_program`: character-level parser for declarations, arrays, assignments and expressions; raise `SourceSyntaxError` |
| `minicomp.rdparser` | `StatementParser` / `parse_program` adding `if`/`else` and, in the `Dialect.LOOPS` dialect, `while` and `for` |

## Library use

    from minicomp.textfiles import squeeze_blanks, count_lines_and_chars
    from minicomp.keywords import find_keywords
    from minicomp.lexer import detect_tokens, build_symbol_table
    from minicomp.grammars import recognize_list, GrammarError
    from minicomp.codegen import CodeGenerator, postfix_to_assembly
    from minicomp.rdparser import parse_program, Dialect

    squeeze_blanks("a  b")                        # "a b"
    count_lines_and_chars("x\ny")                 # FileStats(lines=2, characters=3)
    list(find_keywords("int main() { return 0; }"))   # ["INT", "RETURN"]

    tokens = detect_tokens("int x = 10;")
    for token in tokens:
        print(token)                              # e.g. "Valid keyword : 'int'"
    print(build_symbol_table(tokens).format())

    recognize_list("(a,>)$")                      # returns the position of "$"

    gen = CodeGenerator()
    print(gen.if_else("x > y", "a = b", "c = d"))  # labels L0, L1, L2

    postfix_to_assembly("3 4 + 5 *")
    # ["LOAD 3", "ADD 4", "STORE TEMP0", "LOAD TEMP0", "MUL 5", "STORE TEMP1"]

    parse_program("main() { int i; while (i < 3) { i = i + 1; } }", Dialect.LOOPS)

On success the recognizers and parsers return a position (or, for
`minicomp.tokenparser`, the number of tokens consumed). On bad input they
raise: `GrammarError` carries the position and the character found;
`ParseError` the expected token, row, column and the token found;
`SourceSyntaxError` the row, column and a message. `postfix_to_assembly`
raises `ValueError` on stack underflow or overflow.

The `minicomp.tokenparser` grammar works on literal words: identifiers
and numbers must be written as `id` and `num`, as in
`main(){ int id; id=num; }`.

## Commands

    minicomp-textfiles count FILE
    minicomp-textfiles reverse INPUT OUTPUT
    minicomp-textfiles merge FIRST SECOND OUTPUT
    minicomp-textfiles squeeze INPUT OUTPUT
    minicomp-textfiles strip INPUT OUTPUT
    minicomp-keywords [--words] FILE
    minicomp-lexer [--symbols] [FILE]            # FILE defaults to input.c
    minicomp-grammars {abcde,list,uvw} [TEXT]    # prompts for TEXT if omitted
    minicomp-codegen ifelse [CONDITION] [TRUE_BLOCK] [FALSE_BLOCK]
    minicomp-codegen postfix [EXPRESSION]
    minicomp-tokenparser [FILE]                  # prompts for the code if omitted
    minicomp-rdbase [FILE]                       # parses a built-in sample if omitted
    minicomp-rdparser [--dialect {decisions,loops}] [FILE]

Missing command arguments are asked for interactively where noted. The
lexer reads at most the first 999 characters of its file. Commands exit
with status 1 when a file cannot be opened or the input does not parse;
`minicomp-grammars` prints a success or error banner and always exits 0.

## What it does not do

The parts are separate: nothing joins them into a compiler. The parsers
only check syntax and report where it fails; they build no syntax tree,
do no type checking and feed nothing to the code generators, which work
from the strings they are given.