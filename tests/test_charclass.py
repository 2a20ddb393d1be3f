import string

import pytest

from solong.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


@pytest.mark.parametrize("code", CODES)
def test_digit_matches_stdlib(code):
    assert is_digit(code) == (0 <= code < 128 and chr(code) in string.digits)


@pytest.mark.parametrize("code", CODES)
def test_alpha_matches_stdlib(code):
    assert is_alpha(code) == (0 <= code < 128 and chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", CODES)
def test_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", CODES)
def test_print_implies_ascii(code):
    if is_print(code):
        assert is_ascii(code)


def test_print_bounds():
    assert is_print(ord(" "))
    assert is_print(ord("~"))
    assert not is_print(ord("\t"))
    assert not is_print(127)


def test_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


@pytest.mark.parametrize("char", string.ascii_letters)
def test_case_mapping_matches_stdlib(char):
    assert to_upper(ord(char)) == ord(char.upper())
    assert to_lower(ord(char)) == ord(char.lower())


@pytest.mark.parametrize("code", [ord("1"), ord("@"), ord("["), 200, -3])
def test_case_mapping_leaves_others(code):
    assert to_upper(code) == code
    assert to_lower(code) == code