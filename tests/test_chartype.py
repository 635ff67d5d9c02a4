import string

import pytest

from so_long.chartype import (
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


@pytest.mark.parametrize("c", list(string.punctuation + " \t\n"))
def test_non_alnum_characters(c):
    assert is_alnum(c) is False


def test_integer_codes_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("@")) is False


def test_ascii_range_boundaries():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_print_range_boundaries():
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert is_print("\n") is False


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_to_upper_matches_str_upper(c):
    assert to_upper(c) == c.upper()
    assert to_upper(ord(c)) == ord(c.upper())


@pytest.mark.parametrize("c", list(string.ascii_uppercase))
def test_to_lower_matches_str_lower(c):
    assert to_lower(c) == c.lower()
    assert to_lower(ord(c)) == ord(c.lower())


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + "é"))
def test_conversions_leave_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_case_round_trip(c):
    assert to_lower(to_upper(c)) == c.lower()
    assert to_upper(to_lower(c)) == c.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)