"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX" or not conversion:
        return ""
    value = _next_arg(args, conversion)
    if conversion == "c":
        return value[:1] if isinstance(value, str) else chr(value & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        if not value:
            return "(nil)"
        return "0x" + format(value & _UINT64, "x")
    if conversion in "di":
        return str(_int32(value))
    if conversion == "u":
        return str(value & _UINT32)
    return format(value & _UINT32, conversion)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions and a trailing ``%`` produce nothing.
    """
    fmt = fmt.split("\0", 1)[0]
    arguments = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char == "%":
            pieces.append(_convert(next(chars, ""), arguments))
        else:
            pieces.append(char)
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)