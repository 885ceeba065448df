import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_hex,
    is_print,
    is_whitespace,
    to_lower,
    to_upper,
)

CODES = range(0, 300)


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", CODES)
def test_is_ascii_matches_str_isascii(code):
    assert is_ascii(code) == chr(code).isascii()


@pytest.mark.parametrize("code", CODES)
def test_is_print_is_ascii_and_printable(code):
    assert is_print(code) == (chr(code).isascii() and chr(code).isprintable())


@pytest.mark.parametrize("code", CODES)
def test_is_whitespace_matches_c_whitespace(code):
    assert is_whitespace(code) == (chr(code) in " \t\n\v\f\r")


@pytest.mark.parametrize("code", CODES)
def test_is_hex_matches_hexdigits(code):
    assert is_hex(code) == (chr(code) in string.hexdigits)


def test_negative_codes_are_not_ascii():
    assert is_ascii(-1) is False


def test_string_arguments_accepted():
    assert is_alpha("q") and is_digit("7") and is_whitespace("\t")
    assert not is_alpha("7")


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_on_uppercase(letter):
    assert to_lower(letter) == letter.lower()
    assert to_lower(ord(letter)) == ord(letter.lower())


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_on_lowercase(letter):
    assert to_upper(letter) == letter.upper()
    assert to_upper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + "é")
def test_conversions_leave_others_unchanged(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


@pytest.mark.parametrize("letter", string.ascii_letters)
def test_case_round_trip(letter):
    assert to_lower(to_upper(to_lower(letter))) == to_lower(letter)
    assert to_upper(to_lower(letter)) == letter.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)