import string

import pytest

from pipex.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", ["@", "[", "`", "{", " ", "/", ":", "é"])
def test_non_alnum(c):
    assert is_alpha(c) is False
    assert is_digit(c) is False
    assert is_alnum(c) is False


def test_ascii_range_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_bounds():
    assert is_print(31) is False
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False


def test_printable_count_matches_string_module():
    printable = [c for c in range(256) if is_print(c)]
    expected = sorted(ord(c) for c in string.printable if c not in "\t\n\r\x0b\x0c")
    assert printable == expected


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_case_round_trip(c):
    upper = to_upper(c)
    assert upper == c.upper()
    assert to_lower(upper) == c
    assert to_upper(ord(c)) == ord(c.upper())


@pytest.mark.parametrize("c", ["1", "@", "[", "{", "é", " "])
def test_case_leaves_others_unchanged(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")