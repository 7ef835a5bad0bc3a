"""Three-address code for if-else statements and assembly from postfix."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

STACK_LIMIT = 100
CONDITION_LIMIT = 49
BLOCK_LIMIT = 99
POSTFIX_LIMIT = 99

_OPCODES = {
    "+": "ADD",
    "-": "SUB",
    "*": "MUL",
    "/": "DIV",
    "^": "EXP",
}


@dataclass
class CodeGenerator:
    """Emits three-address code, numbering temporaries and labels as it goes."""

    temp_count: int = 0
    label_count: int = 0

    def new_temp(self) -> str:
        """Return a fresh temporary name such as ``t0``."""
        name = f"t{self.temp_count}"
        self.temp_count += 1
        return name

    def new_label(self) -> str:
        """Return a fresh label name such as ``L0``."""
        name = f"L{self.label_count}"
        self.label_count += 1
        return name

    def if_else(self, condition: str, true_block: str, false_block: str) -> str:
        """Return three-address code that branches on ``condition``."""
        true_label = self.new_label()
        false_label = self.new_label()
        end_label = self.new_label()
        lines = [
            f"if {condition} goto {true_label}",
            f"goto {false_label}",
            f"{true_label}:",
            true_block,
            f"goto {end_label}",
            f"{false_label}:",
            false_block,
            f"{end_label}:",
        ]
        return "\n".join(lines) + "\n"


def _is_operator_token(token: str) -> bool:
    return len(token) == 1 and token in _OPCODES


def postfix_to_assembly(postfix: str) -> list[str]:
    """Translate a space-separated postfix expression into accumulator assembly.

    Each operator pops two operands, emits LOAD/op/STORE into a fresh
    ``TEMPn`` and pushes that temporary. Raises ValueError on stack
    underflow or when more than ``STACK_LIMIT`` operands are pending.
    """
    stack: list[str] = []
    assembly: list[str] = []
    temp_count = 0

    def push(item: str) -> None:
        if len(stack) >= STACK_LIMIT:
            raise ValueError("Stack Overflow")
        stack.append(item)

    def pop() -> str:
        if not stack:
            raise ValueError("Stack Underflow")
        return stack.pop()

    for token in filter(None, postfix.split(" ")):
        if _is_operator_token(token):
            right = pop()
            left = pop()
            temp = f"TEMP{temp_count}"
            temp_count += 1
            assembly += [
                f"LOAD {left}",
                f"{_OPCODES[token]} {right}",
                f"STORE {temp}",
            ]
            push(temp)
        else:
            push(token)
    return assembly


def _prompt(message: str) -> str:
    try:
        return input(message)
    except EOFError:
        return ""


def _cmd_ifelse(args: argparse.Namespace) -> int:
    condition = args.condition
    if condition is None:
        condition = _prompt("Enter a condition (e.g., x > y): ")
    true_block = args.true_block
    if true_block is None:
        true_block = _prompt("Enter a true block statement (e.g., a = b): ")
    false_block = args.false_block
    if false_block is None:
        false_block = _prompt("Enter a false block statement (e.g., c = d): ")
    code = CodeGenerator().if_else(
        condition[:CONDITION_LIMIT],
        true_block[:BLOCK_LIMIT],
        false_block[:BLOCK_LIMIT],
    )
    print(f"Generated Three-Address Code:\n{code}", end="")
    return 0


def _cmd_postfix(args: argparse.Namespace) -> int:
    expression = args.expression
    if expression is None:
        print("Enter a postfix expression (e.g., '3 4 + 5 *'):")
        expression = _prompt("")
    try:
        assembly = postfix_to_assembly(expression[:POSTFIX_LIMIT])
    except ValueError as exc:
        print(exc)
        return 1
    print("Generated Assembly Code:")
    for line in assembly:
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Generate three-address code or assembly and print it."""
    parser = argparse.ArgumentParser(prog="codegen", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    ifelse = sub.add_parser("ifelse", help="three-address code for an if-else")
    ifelse.add_argument("condition", nargs="?")
    ifelse.add_argument("true_block", nargs="?")
    ifelse.add_argument("false_block", nargs="?")
    ifelse.set_defaults(func=_cmd_ifelse)

    postfix = sub.add_parser("postfix", help="assembly for a postfix expression")
    postfix.add_argument("expression", nargs="?")
    postfix.set_defaults(func=_cmd_postfix)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())