"""String helpers: parsing, searching, slicing, joining and bounded copies."""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, MutableSequence, Optional, Union

from pushswap.chars import is_digit

Char = Union[int, str]

_WHITESPACE = "".join(map(chr, (*range(9, 14), 32)))
_NUL = "\0"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string; integers are taken as byte codes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {c!r}")
    return chr(c & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace (codes 9 to 13 and space) is skipped, one optional sign
    is accepted, and digits are read until the first non-digit. The value is
    accumulated as a signed 64-bit integer: once it overflows, -1 is returned
    for a positive number and 0 for a negative one. Otherwise the result is
    truncated to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for digit in takewhile(is_digit, rest):
        result = _wrap(result * 10 + int(digit), 64)
        if result < 0:
            return -1 if sign == 1 else 0
    return _wrap(_wrap(result, 32) * sign, 32)


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading ``-`` when negative."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``; a NUL matches at ``len(text)``."""
    ch = _char(c)
    if ch == _NUL and _NUL not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``; a NUL matches at ``len(text)``."""
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def striteri(
    chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call ``func(index, chars)`` for every position, letting it edit ``chars`` in place."""
    for index in range(len(chars)):
        func(index, chars)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings into a new one."""
    return first + second


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full concatenation would
    have had, which is at least ``size`` when the result was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the length of ``src``, so truncation shows as a
    returned length of ``size`` or more.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return src[: max(size - 1, 0)], len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)``; a NUL result ends the string."""
    mapped = []
    for index, ch in enumerate(text):
        new = func(index, ch)
        if new == _NUL:
            break
        mapped.append(new)
    return "".join(mapped)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders the strings."""
    for index in range(max(n, 0)):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a == 0 and b == 0:
            return 0
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None."""
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, min(len(haystack), length))
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]