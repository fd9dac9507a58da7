"""Turning command-line arguments into a list of distinct 32-bit integers."""

from __future__ import annotations

from typing import Collection, Iterable, List

from pushswap.numbers import atoi
from pushswap.strings import split, strncmp

_ZERO_FORMS = ("0", "+0", "-0")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def _spells_zero(text: str) -> bool:
    return any(strncmp(text, form, len(text)) == 0 for form in _ZERO_FORMS)


def parse_number(text: str, seen: Collection[int]) -> int:
    """Parse one word as a 32-bit integer not already among ``seen``.

    Raises InputError for text that is not a number, a number out of
    range, or a duplicate.
    """
    try:
        value = atoi(text)
    except ValueError as exc:
        raise InputError(f"not a valid integer: {text!r}") from exc
    if value == 0 and not _spells_zero(text):
        raise InputError(f"not a valid integer: {text!r}")
    if value in seen:
        raise InputError(f"duplicate value: {value}")
    return value


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Parse every space-separated word of every argument, in order.

    Raises InputError when an argument holds no word or a word is invalid.
    """
    values: List[int] = []
    seen: set[int] = set()
    for arg in args:
        words = split(arg, " ")
        if not words:
            raise InputError(f"argument holds no number: {arg!r}")
        for word in words:
            value = parse_number(word, seen)
            seen.add(value)
            values.append(value)
    return values