import pytest

from pixkit.split import split_plain, split_quoted


def test_split_quoted_simple_words():
    assert split_quoted("one two three", " ") == ["one", "two", "three"]


def test_split_quoted_collapses_separator_runs():
    assert split_quoted("   a   b  ", " ") == ["a", "b"]


def test_split_quoted_keeps_double_quoted_span():
    assert split_quoted('echo "a b" c', " ") == ["echo", '"a b"', "c"]


def test_split_quoted_keeps_single_quoted_span():
    assert split_quoted("x 'p q r' y", " ") == ["x", "'p q r'", "y"]


def test_split_quoted_unterminated_quote_runs_to_end():
    assert split_quoted('a "b c d', " ") == ["a", '"b c d']


def test_split_quoted_escaped_quote_is_ordinary():
    assert split_quoted('a\\"b c"', " ") == ['a\\"b', 'c"']


def test_split_quoted_adjacent_quoted_spans():
    assert split_quoted("\"a b\"'c d' e", " ") == ["\"a b\"'c d'", "e"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_quoted_no_words(text):
    assert split_quoted(text, ",") == []


@pytest.mark.parametrize("text", ["a,b,,c", ",x,y,", "single", "p,,q,r,s"])
def test_split_quoted_matches_plain_without_quotes(text):
    assert split_quoted(text, ",") == split_plain(text, ",")


def test_split_quoted_words_rejoin_to_stripped_text():
    text = 'cmd "a b" \'c d\' e'
    words = split_quoted(text, " ")
    assert " ".join(words) == text


def test_split_quoted_bad_separator():
    with pytest.raises(ValueError):
        split_quoted("a b", "")
    with pytest.raises(ValueError):
        split_quoted("a b", "ab")


def test_split_plain_words():
    assert split_plain("1.5,2,3", ",") == ["1.5", "2", "3"]


def test_split_plain_ignores_quotes():
    assert split_plain('"a b"', " ") == ['"a', 'b"']


def test_split_plain_empty_and_separators():
    assert split_plain("", " ") == []
    assert split_plain("    ", " ") == []


def test_split_plain_no_word_contains_separator():
    words = split_plain("::a:bb::ccc:", ":")
    assert all(word and ":" not in word for word in words)
    assert "".join(words) == "::a:bb::ccc:".replace(":", "")


def test_split_plain_bad_separator():
    with pytest.raises(ValueError):
        split_plain("abc", "")