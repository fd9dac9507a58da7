"""A small printf: %c %s %d %i %u %p %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from pushswap.numbers import itoa

CONVERSIONS = "cspdiuxX%"

_DIGITS = "0123456789abcdef"
_UINT_MASK = 0xFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def itoa_base(value: int, base: int) -> str:
    """Representation of the non-negative ``value`` in ``base`` (2 to 16), lower case."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if value < 0:
        raise ValueError("value must not be negative")
    digits = []
    while True:
        value, digit = divmod(value, base)
        digits.append(_DIGITS[digit])
        if value == 0:
            break
    return "".join(reversed(digits))


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _to_uint32(value: int) -> int:
    return value & _UINT_MASK


def _convert_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _convert_string(arg: Any) -> str:
    return _NULL_STRING if arg is None else str(arg)


def _convert_pointer(arg: Any) -> str:
    if arg is None or arg == 0:
        return _NULL_POINTER
    address = arg if isinstance(arg, int) else id(arg)
    return "0x" + itoa_base(address, 16)


def _convert(kind: str, args: Iterator[Any]) -> str:
    if kind == "%":
        return "%"
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{kind}") from None
    if kind == "c":
        return _convert_char(arg)
    if kind == "s":
        return _convert_string(arg)
    if kind in "di":
        return itoa(_to_int32(int(arg)))
    if kind == "u":
        return itoa(_to_uint32(int(arg)))
    if kind == "p":
        return _convert_pointer(arg)
    if kind == "x":
        return itoa_base(_to_uint32(int(arg)), 16)
    return itoa_base(_to_uint32(int(arg)), 16).upper()


def format_string(template: str, *args: Any) -> str:
    """Expand the conversions in ``template`` with ``args``.

    A '%' followed by an unknown character is kept as it is. A '%' at the
    very end of the template raises ValueError; too few arguments raise
    TypeError. Extra arguments are ignored.
    """
    if template is None:
        raise TypeError("template must be a string, not None")
    values = iter(args)
    pieces = []
    index = 0
    length = len(template)
    while index < length:
        char = template[index]
        if char == "%":
            if index + 1 == length:
                raise ValueError("incomplete conversion at the end of the template")
            kind = template[index + 1]
            if kind in CONVERSIONS:
                pieces.append(_convert(kind, values))
                index += 2
                continue
        pieces.append(char)
        index += 1
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded template to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)