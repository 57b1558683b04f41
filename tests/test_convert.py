import string

import pytest

from ftkit.convert import atoi, itoa, tolower, toupper


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42abc", -42),
        ("\t\n\v\f\r+7", 7),
        ("123", 123),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("+-5", 0),
        ("   ", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 123456])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


def test_case_mapping_on_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert tolower(upper) == lower
        assert toupper(lower) == upper
        assert tolower(ord(upper)) == ord(lower)
        assert toupper(ord(lower)) == ord(upper)


def test_case_mapping_leaves_others_unchanged():
    for ch in string.digits + string.punctuation + " é":
        assert tolower(ch) == ch
        assert toupper(ch) == ch
    assert tolower(-1) == -1
    assert toupper(300) == 300


def test_case_mapping_rejects_strings():
    with pytest.raises(TypeError):
        tolower("AB")