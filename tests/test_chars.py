import string

import pytest

from pixkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", ["é", "_", " ", "@", "[", "`", "{"])
def test_non_alnum(c):
    assert is_alnum(c) is False


def test_integer_codes_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("7")) is False


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert all(is_print(c) for c in string.ascii_letters + string.digits + string.punctuation)


def test_case_conversion_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(upper) == upper
        assert to_lower(lower) == lower


def test_case_conversion_keeps_other_characters():
    for c in string.digits + string.punctuation + " é":
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_case_conversion_of_integer_codes_returns_integers():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")