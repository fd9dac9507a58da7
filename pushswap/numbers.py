"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(chr(code) for code in range(9, 14)) | {" "}
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a decimal integer that must fit in 32 bits.

    Leading whitespace and one optional sign are accepted. Text with no
    digits after them yields 0. Raises ValueError when the value does not
    fit in 32 bits or when anything other than digits follows.
    """
    index = 0
    length = len(text)
    while index < length and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < length and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    limit = -INT_MIN if sign < 0 else INT_MAX
    result = 0
    while index < length and text[index] in _DIGITS:
        result = result * 10 + int(text[index])
        index += 1
        if result > limit:
            raise ValueError(f"integer out of 32-bit range: {text!r}")
    if index < length:
        raise ValueError(f"invalid character in integer: {text!r}")
    return result * sign


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    if number < 0:
        return "-" + itoa(-number)
    digits = []
    while True:
        number, digit = divmod(number, 10)
        digits.append("0123456789"[digit])
        if number == 0:
            break
    return "".join(reversed(digits))