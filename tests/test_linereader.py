import io

import pytest

from solong.linereader import LineReader, read_lines

TEXTS = [
    "",
    "one line no newline",
    "a\nb\nc\n",
    "111\n1P0\n\n1E1",
    "x" * 100 + "\n" + "y" * 5,
    "\n\n\n",
]


@pytest.mark.parametrize("text", TEXTS)
@pytest.mark.parametrize("size", [1, 3, 42, 1000])
def test_lines_match_splitlines(text, size):
    reader = LineReader(io.StringIO(text), buffer_size=size)
    assert list(reader) == text.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 42])
def test_bytes_stream(size):
    data = b"ab\ncd\nef"
    assert list(LineReader(io.BytesIO(data), size)) == data.splitlines(keepends=True)


def test_readline_returns_none_after_end():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.readline() == "only\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_joined_lines_rebuild_text():
    text = "10001\n1C0E1\n11111"
    assert "".join(LineReader(io.StringIO(text), 2)) == text


def test_bad_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=0)


def test_read_lines_from_file(tmp_path):
    text = "1111\n1PC1\n1E01\n1111\n"
    path = tmp_path / "map.ber"
    path.write_text(text)
    assert read_lines(path) == text.splitlines(keepends=True)


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.ber")