"""Character classification and case conversion for the ASCII range."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_SPACES = frozenset(range(9, 14)) | {32}


def _code(c: Char) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {c!r}")
    return c


def is_alpha(c: Char) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True if ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_sign(c: Char) -> bool:
    """True if ``c`` is ``'+'`` or ``'-'``."""
    return _code(c) in (ord("+"), ord("-"))


def is_space(c: Char) -> bool:
    """True if ``c`` is a space or one of the control characters 9 to 13."""
    return _code(c) in _SPACES


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _convert(c, code - 32)
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _convert(c, code + 32)
    return c