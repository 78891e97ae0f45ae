import pytest

from pipex.conversions import atoi, atol, itoa


@pytest.mark.parametrize(
    "n", [0, 1, -1, 7, -42, 1000, 2147483647, -2147483648, 123456789]
)
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert atol(itoa(n)) == n


def test_itoa_values_from_input():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"


def test_atoi_skips_leading_whitespace_and_plus():
    assert atoi(" \t\n\v\f\r+17abc") == 17


def test_atoi_stops_at_first_non_digit():
    assert atoi("-42xyz99") == -42
    assert atoi("12 34") == 12


@pytest.mark.parametrize("text", ["", "   ", "abc", "--5", "+-5", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0
    assert atol(text) == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_modulo_32_bits():
    assert atoi("4294967296") == atoi("0")
    assert atoi("4294967297") == atoi("1")


def test_atol_holds_values_beyond_int():
    assert atol("2147483648") == 2147483648
    assert atol("-9223372036854775808") == -9223372036854775808


def test_atol_wraps_past_long_max():
    assert atol("9223372036854775808") == atol("-9223372036854775808")


@pytest.mark.parametrize("text", ["5", "-300", "  +99", "2147483647"])
def test_atoi_and_atol_agree_in_int_range(text):
    assert atoi(text) == atol(text)