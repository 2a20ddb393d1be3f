"""Reading of XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from solong.colors import parse_color

__all__ = [
    "XpmError",
    "XpmImage",
    "split_words",
    "strip_comments",
    "parse_xpm",
    "parse_xpm_text",
    "load_xpm",
]

# Pixel value used for the transparent colour ("None").
TRANSPARENT = 0xFF000000

_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"[\t\n\v\f\r ]*([+-]?[0-9]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: rows of 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", line) if word]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    number = match.group(1) if match else ""
    if number in ("", "+", "-"):
        return 0
    return int(number)


def _find_unquoted(text: str, pattern: str) -> int:
    """Position of ``pattern`` outside double-quoted strings, or -1."""
    in_quote = False
    last_start = len(text) - len(pattern)
    for index in range(last_start + 1):
        if text[index] == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(pattern, index):
            return index
    return -1


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The text keeps its length; ``//`` comments are blanked up to and including
    the end of their line.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        length = 3 if end == -1 else end - begin + 2
        text = _blank(text, begin, length)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        length = 2 if end == -1 else end - begin + 1
        text = _blank(text, begin, length)
    return text


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    suffix = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], parse_color(words[index + 1], suffix)


def parse_xpm(lines: Sequence[str]) -> XpmImage:
    """Decode an XPM image from its strings: header, colours, then pixel rows."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    width, height, ncolors, cpp = _parse_header(next_line("header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color_line(next_line("colour table"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    pixels = []
    for _ in range(height):
        line = next_line("pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            row.append(color & 0xFFFFFFFF)
        pixels.append(tuple(row))
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    strings = [match.group(1) for match in _QUOTED.finditer(strip_comments(text))]
    return parse_xpm(strings)


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())