"""String helpers with the bounded-copy and search semantics the game relies on."""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "atoi",
    "itoa",
    "split",
    "trim",
    "substr",
    "find_bounded",
    "compare_prefix",
    "find_char",
    "rfind_char",
    "copy_bounded",
    "concat_bounded",
    "map_indexed",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Read a leading decimal integer, skipping whitespace and one optional sign.

    Text without digits gives 0; the result wraps like a 32-bit int.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    start = index
    while index < len(text) and text[index] in _DIGITS:
        index += 1
    digits = text[start:index]
    if not digits:
        return 0
    return _to_int32(sign * int(digits))


def itoa(number: int) -> str:
    """Render a 32-bit integer in decimal."""
    if not -(1 << 31) <= number < (1 << 31):
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(_single_char(sep)) if piece]


def trim(text: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    A ``charset`` of ``None`` leaves the text as it is.
    """
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly in the first ``limit`` characters.

    An empty needle is found at 0; ``None`` when there is no match.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(limit, 0))
    return None if index == -1 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign tells the order.

    The result is the difference of the first differing character codes, with
    the end of a string counting as code 0.
    """
    for index in range(count):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; ``"\\0"`` finds the end."""
    if _single_char(char) == "\0":
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; ``"\\0"`` finds the end."""
    if _single_char(char) == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so truncation shows
    as a length at least ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def concat_bounded(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had.
    When ``dest`` already fills the buffer it is returned unchanged and the
    length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = len(dest)
    if size > used:
        return dest + src[:size - used - 1], used + len(src)
    return dest, size + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))