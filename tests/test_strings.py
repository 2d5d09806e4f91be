import pytest

from pixkit.strings import (
    strchr,
    strcmp,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_clamps_length_and_start():
    assert substr("abc", 1, 100) == "bc"
    assert substr("abc", 10, 2) == ""


def test_substr_length_never_exceeds_request():
    text = "abcdefgh"
    for start in range(len(text) + 2):
        for length in range(len(text) + 2):
            part = substr(text, start, length)
            assert len(part) <= length
            assert part in text


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) is None


def test_strtrim():
    assert strtrim("  \tword\t ", " \t") == "word"
    assert strtrim("xxabcxx", "x") == "abc"
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_strnstr_found_and_limited():
    assert strnstr("lorem ipsum", "ipsum", 11) == 6
    assert strnstr("lorem ipsum", "ipsum", 10) == -1


def test_strnstr_empty_needle_and_zero_limit():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) == -1


def test_strnstr_match_is_within_limit():
    haystack = "abcabcabc"
    for n in range(len(haystack) + 1):
        index = strnstr(haystack, "ca", n)
        if index != -1:
            assert index + len("ca") <= n
            assert haystack[index:index + 2] == "ca"


def test_strchr_and_strrchr():
    text = "banana"
    assert strchr(text, "a") == text.index("a")
    assert strrchr(text, "a") == text.rindex("a")
    assert strchr(text, "z") == -1
    assert strrchr(text, "z") == -1


def test_strchr_nul_gives_length():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", 0) == len("abc")


def test_strchr_accepts_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")
    assert strrchr("abcb", ord("b") + 256) == strrchr("abcb", "b")


def test_strcmp():
    assert strcmp("same", "same") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp(None, "x") == 0


def test_strcmp_is_antisymmetric():
    pairs = [("a", "b"), ("hello", "help"), ("", "x"), ("zz", "z")]
    for a, b in pairs:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp():
    assert strncmp("abcdaaa", "abcd", 4) == 0
    assert strncmp("abcdaaa", "abcd", 10) == 1
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("b", "a", 1) == 1


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", len("hello"))
    assert strlcpy("hello", 100) == ("hello", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat():
    assert strlcat("foo", "bar", 100) == ("foobar", len("foobar"))
    assert strlcat("foo", "bar", 5) == ("foob", len("foobar"))
    assert strlcat("foo", "bar", 2) == ("foo", 2 + len("bar"))
    assert strlcat("foo", "bar", 0) == ("foo", len("bar"))


def test_strlcat_result_fits_buffer():
    for size in range(1, 10):
        text, total = strlcat("ab", "cdef", size)
        assert len(text) <= max(size - 1, len("ab"))
        assert "abcdef".startswith(text)


def test_strmapi():
    assert strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbCd"
    assert strmapi("", lambda i, c: c) == ""