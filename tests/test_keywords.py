import pytest

from minicomp.keywords import (
    KEYWORDS,
    find_keywords,
    find_keywords_in_words,
    is_keyword,
    main,
)


@pytest.mark.parametrize("word", ["int", "while", "_Bool", "volatile", "restrict"])
def test_is_keyword_true(word):
    assert is_keyword(word) is True


@pytest.mark.parametrize("word", ["Int", "main", "printf", "", "integer"])
def test_is_keyword_false(word):
    assert is_keyword(word) is False


def test_find_keywords_splits_on_punctuation():
    text = "int main(){\n  return(0);\n}\n"
    assert list(find_keywords(text)) == ["INT", "RETURN"]


def test_find_keywords_results_are_uppercased_keywords():
    text = "for(int i=0;i<n;i++){if(x)break;else continue;}\nstatic void f(void);"
    found = list(find_keywords(text))
    upper = {k.upper() for k in KEYWORDS}
    assert found
    assert all(word in upper for word in found)


def test_find_keywords_ignores_non_keywords():
    assert list(find_keywords("printf scanf main")) == []


def test_words_mode_does_not_split_punctuation():
    text = "int main(){\n  return(0);\n}\n"
    assert list(find_keywords_in_words(text)) == ["INT"]


def test_words_mode_is_subset_of_split_mode():
    text = "unsigned long x; while (x) { x--; } return x;"
    words = list(find_keywords_in_words(text))
    split = list(find_keywords(text))
    for word in words:
        assert word in split
    assert len(words) <= len(split)


def test_main_prints_keywords(tmp_path, capsys):
    path = tmp_path / "prog.c"
    path.write_text("int main() { return 0; }\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Keywords in uppercase:", "INT", "RETURN"]


def test_main_words_mode(tmp_path, capsys):
    path = tmp_path / "prog.c"
    path.write_text("int main() { return(0); }\n")
    assert main(["--words", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Keywords in uppercase:", "INT"]


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "none.c"
    assert main([str(missing)]) == 1
    assert f"Could not open file {missing}" in capsys.readouterr().out