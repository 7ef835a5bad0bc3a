import pytest

from minicomp.textfiles import (
    count_lines_and_chars,
    main,
    merge_alternating,
    reverse_file,
    squeeze_blanks,
    strip_directives,
)


def test_count_empty_text():
    assert count_lines_and_chars("") == (0, 0)


def test_count_single_line_without_newline():
    assert count_lines_and_chars("hello").lines == 1


@pytest.mark.parametrize("text", ["a", "abc\ndef", "x\n\ny", "tail\n"])
def test_count_characters_equal_length(text):
    assert count_lines_and_chars(text).characters == len(text)


@pytest.mark.parametrize("text", ["a", "abc\ndef", "x\n\ny", "tail\n"])
def test_count_each_newline_adds_a_line(text):
    before = count_lines_and_chars(text)
    after = count_lines_and_chars(text + "\n")
    assert after.lines == before.lines + 1
    assert after.characters == before.characters + 1


def test_reverse_file_writes_reversed_bytes(tmp_path):
    data = b"abc\ndef"
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(data)
    size = reverse_file(src, dst)
    assert size == len(data)
    assert dst.read_bytes() == data[::-1]


def test_reverse_file_twice_restores(tmp_path):
    data = b"line one\nline two\n"
    src = tmp_path / "a"
    mid = tmp_path / "b"
    back = tmp_path / "c"
    src.write_bytes(data)
    reverse_file(src, mid)
    reverse_file(mid, back)
    assert back.read_bytes() == data


def test_reverse_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        reverse_file(tmp_path / "nope", tmp_path / "out")


def test_merge_equal_lengths():
    first = ["a1\n", "a2\n"]
    second = ["b1\n", "b2\n"]
    assert list(merge_alternating(first, second)) == ["a1\n", "b1\n", "a2\n", "b2\n"]


def test_merge_first_longer_keeps_rest():
    first = ["a1\n", "a2\n", "a3\n"]
    second = ["b1\n"]
    assert list(merge_alternating(first, second)) == ["a1\n", "b1\n", "a2\n", "a3\n"]


def test_merge_second_longer_keeps_rest():
    first = ["a1\n"]
    second = ["b1\n", "b2\n", "b3\n"]
    assert list(merge_alternating(first, second)) == ["a1\n", "b1\n", "b2\n", "b3\n"]


def test_merge_with_empty_input():
    lines = ["x\n", "y\n"]
    assert list(merge_alternating([], lines)) == lines
    assert list(merge_alternating(lines, [])) == lines


def test_squeeze_collapses_spaces():
    assert squeeze_blanks("a    b") == "a b"


def test_squeeze_tab_after_space_is_dropped():
    assert squeeze_blanks("a \tb") == "a b"


def test_squeeze_each_tab_after_tab_gives_space():
    assert squeeze_blanks("a\t\tb") == "a  b"


@pytest.mark.parametrize("text", ["plain", "line\nnext", ""])
def test_squeeze_leaves_text_without_blanks(text):
    assert squeeze_blanks(text) == text


@pytest.mark.parametrize("text", ["a   b  c", "  x", "y   "])
def test_squeeze_space_runs_idempotent(text):
    once = squeeze_blanks(text)
    assert "  " not in once
    assert squeeze_blanks(once) == once


def test_strip_directives_removes_hash_lines():
    lines = ["#include <stdio.h>\n", "int main() {\n", "  #pragma x\n", "}\n"]
    assert list(strip_directives(lines)) == lines[1:]


def test_main_count(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_text("hello")
    assert main(["count", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Number of lines: 1" in out
    assert f"Number of characters: {len('hello')}" in out


def test_main_count_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["count", str(missing)]) == 1
    assert f"Could not open file {missing}" in capsys.readouterr().out


def test_main_reverse(tmp_path, capsys):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes(b"xyz")
    assert main(["reverse", str(src), str(dst)]) == 0
    assert dst.read_bytes() == b"zyx"
    assert f"is: {len(b'xyz')} bytes" in capsys.readouterr().out


def test_main_merge(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    out = tmp_path / "out.txt"
    a.write_text("a1\na2\n")
    b.write_text("b1\n")
    assert main(["merge", str(a), str(b), str(out)]) == 0
    assert out.read_text() == "a1\nb1\na2\n"


def test_main_merge_missing(tmp_path, capsys):
    a = tmp_path / "a.txt"
    a.write_text("x\n")
    code = main(["merge", str(a), str(tmp_path / "none"), str(tmp_path / "out")])
    assert code == 1
    assert "Error opening one or more files." in capsys.readouterr().out


def test_main_squeeze(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("a   b\n")
    assert main(["squeeze", str(src), str(dst)]) == 0
    assert dst.read_text() == "a b\n"


def test_main_strip(tmp_path):
    src = tmp_path / "in.c"
    dst = tmp_path / "out.c"
    src.write_text("#include <stdio.h>\nint x;\n")
    assert main(["strip", str(src), str(dst)]) == 0
    assert dst.read_text() == "int x;\n"