import io

import pytest

from solong.printf import format_text, printf, put_line, put_number


def test_plain_text_passes_through():
    assert format_text("You won!\n") == "You won!\n"


def test_move_message():
    assert format_text("You moved %d times.\n", 3) == "You moved 3 times.\n"


def test_string_and_null_string():
    assert format_text("%s\n", "Map too short") == "Map too short\n"
    assert format_text("%s", None) == "(null)"


def test_null_pointer():
    assert format_text("%p", 0) == "(nil)"
    assert format_text("%p", None) == "(nil)"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 0x7FFF12345678])
def test_pointer_round_trip(address):
    text = format_text("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_int_min_is_printed():
    assert format_text("%d", -2147483648) == "-2147483648"
    assert format_text("%i", 2147483647) == "2147483647"


@pytest.mark.parametrize("number", [0, 7, 10, 255, 4096, 2147483647])
def test_unsigned_and_hex_round_trip(number):
    assert int(format_text("%u", number)) == number
    assert int(format_text("%x", number), 16) == number
    assert format_text("%X", number) == format_text("%x", number).upper()


def test_unsigned_wraps_negative():
    assert int(format_text("%u", -1)) == 2**32 - 1
    assert int(format_text("%x", -1), 16) == 2**32 - 1


def test_percent_and_char():
    assert format_text("%%") == "%"
    assert format_text("%c%c", "z", 65) == "zA"


def test_unknown_conversion_and_trailing_percent():
    assert format_text("a%qb") == "ab"
    assert format_text("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_text("%d and %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s %d\n", "moves", 12)
    out = capsys.readouterr().out
    assert out == "moves 12\n"
    assert count == len(out)


@pytest.mark.parametrize("number", [0, -5, 123456, -2147483648])
def test_put_number_round_trip(number):
    stream = io.StringIO()
    put_number(number, stream)
    assert int(stream.getvalue()) == number


def test_put_number_rejects_out_of_range():
    with pytest.raises(OverflowError):
        put_number(2**31, io.StringIO())


def test_put_line():
    stream = io.StringIO()
    put_line("abc", stream)
    put_line(None, stream)
    assert stream.getvalue() == "abc\n"