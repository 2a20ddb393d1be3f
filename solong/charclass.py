"""ASCII character classification on integer character codes."""

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
]

_ORD_0, _ORD_9 = ord("0"), ord("9")
_ORD_A, _ORD_Z = ord("A"), ord("Z")
_ORD_LA, _ORD_LZ = ord("a"), ord("z")


def is_digit(code: int) -> bool:
    """True for the codes of ``0`` to ``9``."""
    return _ORD_0 <= code <= _ORD_9


def is_alpha(code: int) -> bool:
    """True for ASCII letters."""
    return _ORD_A <= code <= _ORD_Z or _ORD_LA <= code <= _ORD_LZ


def is_alnum(code: int) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(code) or is_alpha(code)


def is_ascii(code: int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= code <= 126


def to_lower(code: int) -> int:
    """Lower-case an ASCII capital; other codes are returned unchanged."""
    return code + 32 if _ORD_A <= code <= _ORD_Z else code


def to_upper(code: int) -> int:
    """Upper-case an ASCII small letter; other codes are returned unchanged."""
    return code - 32 if _ORD_LA <= code <= _ORD_LZ else code