import pytest

from solong.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c red",
"X c #00FF00",
"  .",
"X.X"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_quotes():
    text = '/* x */"a /* b */"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.endswith('"a /* b */"')
    assert "x" not in result[:7]


def test_strip_line_comment_removes_newline():
    text = '// note\n"ab"'
    result = strip_comments(text)
    assert result == " " * 8 + '"ab"'


def test_parse_sample_text():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == 0xFF000000
    assert image.pixel(2, 0) == 0xFF0000
    assert image.pixel(0, 1) == 0x00FF00
    assert image.pixel(1, 1) == 0xFF0000


def test_pixel_out_of_range():
    image = parse_xpm_text(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)


def test_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c #000001", "bb c #000002", "bbaa"])
    assert image.pixels == ((2, 1),)


def test_three_chars_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixel(0, 0) == 1


def test_unknown_key_gives_zero():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.pixel(0, 0) == 0


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == 0xADD8E6


def test_zero_in_header_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["0 1 1 1", "a c red", "a"])


def test_short_header_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1"])


def test_missing_c_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a m red", "a"])


def test_missing_rows_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c red", "a"])


def test_short_row_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", "a c red", "aa"])


def test_load_file_reports_size(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(SAMPLE)
    image = load_xpm(path)
    assert isinstance(image, XpmImage)
    assert (image.width, image.height) == (3, 2)
    assert image == parse_xpm_text(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_xpm(tmp_path / "missing.xpm")