"""A small printf with the conversions the game's messages use."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import IO, Any

from solong.textops import itoa

__all__ = ["format_text", "printf", "put_number", "put_line"]

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _UINT64
    return "(nil)" if address == 0 else f"0x{address:x}"


def _signed(value: Any) -> str:
    return str(_to_int32(operator.index(value)))


def _unsigned(value: Any) -> str:
    return str(operator.index(value) & _UINT32)


def _hex_lower(value: Any) -> str:
    return f"{operator.index(value) & _UINT32:x}"


def _hex_upper(value: Any) -> str:
    return f"{operator.index(value) & _UINT32:X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_text(fmt: str, *args: Any) -> str:
    """Expand ``%c %s %p %d %i %u %x %X %%`` in ``fmt`` with ``args``.

    An unknown conversion produces nothing; a lone ``%`` at the end is dropped.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERTERS:
            pieces.append(_CONVERTERS[spec](_take(values, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_text(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def put_number(number: int, stream: IO[str]) -> None:
    """Write a 32-bit integer in decimal to ``stream``."""
    stream.write(itoa(number))


def put_line(text: str | None, stream: IO[str]) -> None:
    """Write ``text`` and a newline to ``stream``; ``None`` writes nothing."""
    if text is None:
        return
    stream.write(text + "\n")