import pytest

from sollong.wordtab import find, find_outside_quotes, split_words


def test_find_returns_match_position():
    text = "hello world"
    pos = find(text, "world", 100)
    assert text[pos:pos + 5] == "world"
    assert find(text, "hello", 100) == 0


def test_find_missing_returns_minus_one():
    assert find("abcdef", "xyz", 10) == -1


def test_find_needle_longer_than_limit():
    assert find("abcdef", "cde", 2) == -1


def test_find_stops_at_nul():
    assert find("ab\0cd", "cd", 10) == -1


def test_find_returns_first_occurrence():
    text = "a\"b\"c\""
    assert find(text, '"', 10) == text.index('"')


def test_find_empty_needle_raises():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_outside_quotes_skips_quoted():
    text = '"a /* b" /* c'
    pos = find_outside_quotes(text, "/*", len(text))
    assert pos == text.rindex("/*")
    assert find(text, "/*", len(text)) == text.index("/*")


def test_find_outside_quotes_unquoted_match():
    text = "x // y"
    assert find_outside_quotes(text, "//", len(text)) == text.index("//")


def test_find_outside_quotes_all_quoted():
    assert find_outside_quotes('"// inside"', "//", 20) == -1


def test_find_outside_quotes_limit():
    assert find_outside_quotes("a/*b", "/*", 1) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_in_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words("") == []
    assert split_words(" \t ") == []


def test_split_words_round_trip():
    words = ["16", "16", "2", "1"]
    assert split_words(" ".join(words)) == words