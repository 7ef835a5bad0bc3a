import pytest

from minicomp.codegen import STACK_LIMIT, CodeGenerator, main, postfix_to_assembly


def test_labels_and_temps_are_numbered_independently():
    gen = CodeGenerator()
    assert gen.new_label() == "L0"
    assert gen.new_temp() == "t0"
    assert gen.new_label() == "L1"
    assert gen.new_temp() == "t1"


def test_if_else_layout():
    code = CodeGenerator().if_else("x > y", "a = b", "c = d")
    assert code.splitlines() == [
        "if x > y goto L0",
        "goto L1",
        "L0:",
        "a = b",
        "goto L2",
        "L1:",
        "c = d",
        "L2:",
    ]
    assert code.endswith("\n")


def test_if_else_consumes_three_labels_per_call():
    gen = CodeGenerator()
    gen.if_else("p", "q", "r")
    second = gen.if_else("p", "q", "r")
    assert second.startswith("if p goto L3\ngoto L4\n")
    assert second.endswith("L5:\n")
    assert gen.label_count == 6


def test_postfix_worked_example():
    assert postfix_to_assembly("3 4 + 5 *") == [
        "LOAD 3",
        "ADD 4",
        "STORE TEMP0",
        "LOAD TEMP0",
        "MUL 5",
        "STORE TEMP1",
    ]


@pytest.mark.parametrize(
    "op, opcode",
    [("+", "ADD"), ("-", "SUB"), ("*", "MUL"), ("/", "DIV"), ("^", "EXP")],
)
def test_each_operator(op, opcode):
    assert postfix_to_assembly(f"a b {op}") == ["LOAD a", f"{opcode} b", "STORE TEMP0"]


def test_multi_char_token_starting_with_operator_is_operand():
    assert postfix_to_assembly("-5 x +") == ["LOAD -5", "ADD x", "STORE TEMP0"]


def test_operands_only_emit_nothing():
    assert postfix_to_assembly("a b c") == []


def test_extra_spaces_ignored():
    assert postfix_to_assembly("  a   b  + ") == postfix_to_assembly("a b +")


def test_underflow_raises():
    with pytest.raises(ValueError, match="Underflow"):
        postfix_to_assembly("a +")


def test_overflow_raises():
    with pytest.raises(ValueError, match="Overflow"):
        postfix_to_assembly(" ".join(["x"] * (STACK_LIMIT + 1)))


def test_stack_limit_itself_is_allowed():
    assert postfix_to_assembly(" ".join(["x"] * STACK_LIMIT)) == []


def test_main_postfix(capsys):
    assert main(["postfix", "a b +"]) == 0
    out = capsys.readouterr().out
    assert out == "Generated Assembly Code:\nLOAD a\nADD b\nSTORE TEMP0\n"


def test_main_postfix_underflow(capsys):
    assert main(["postfix", "+"]) == 1
    assert "Stack Underflow" in capsys.readouterr().out


def test_main_ifelse(capsys):
    assert main(["ifelse", "x > y", "a = b", "c = d"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Generated Three-Address Code:\nif x > y goto L0\n")
    assert out.endswith("L2:\n")