"""Formatted output with a small printf and helpers that write to a text stream."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument.

    ``partial`` holds the text produced before the faulty conversion.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {value!r}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"expected a str or None, got {value!r}")
    return value


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return _NULL_POINTER
    return "0x" + format(_integer(value) & 0xFFFF_FFFF_FFFF_FFFF, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda v: str(_signed32(_integer(v))),
    "i": lambda v: str(_signed32(_integer(v))),
    "u": lambda v: str(_integer(v) & 0xFFFFFFFF),
    "x": lambda v: format(_integer(v) & 0xFFFFFFFF, "x"),
    "X": lambda v: format(_integer(v) & 0xFFFFFFFF, "X"),
    "p": _pointer,
}


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with the conversions %c %s %d %i %u %x %X %p and %%."""
    out: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise FormatError(
                f"invalid format specifier {'%' + spec!r}", "".join(out)
            )
        try:
            arg = next(remaining)
        except StopIteration:
            raise FormatError(
                f"missing argument for %{spec}", "".join(out)
            ) from None
        out.append(convert(arg))
    return "".join(out)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered ``fmt`` to ``stream`` and return the number of characters.

    On a bad conversion the text before it is still written and
    :class:`FormatError` is raised.
    """
    out = _target(stream)
    try:
        text = format_printf(fmt, *args)
    except FormatError as error:
        out.write(error.partial)
        raise
    out.write(text)
    return len(text)


def put_char(c: Any, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _target(stream).write(_char(c))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(str(_signed32(_integer(n))))