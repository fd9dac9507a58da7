"""String helpers: searching, slicing, trimming, splitting and bounded copies.

Text functions work on ``str``. The bounded copies ``strlcpy`` and
``strlcat`` work on NUL-terminated byte buffers, since they exist to fill
a fixed-size destination in place.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _c_length(buffer: ReadableBuffer, limit: Optional[int] = None) -> int:
    """Length of the NUL-terminated string at the start of ``buffer``."""
    data = bytes(buffer if limit is None else buffer[:limit])
    end = data.find(0)
    return len(data) if end < 0 else end


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the first differing character codes, or 0.
    The end of a string compares as a NUL character.
    """
    _check_non_negative(count, "count")
    for left, right in zip_longest(first[:count], second[:count], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            break
    return 0


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenation of ``first`` and ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """``text`` with every leading and trailing character found in ``charset`` removed."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Non-empty pieces of ``text`` between occurrences of ``separator``."""
    _check_char(separator)
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of ``chars`` in place with ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)


def strlcpy(dest: bytearray, src: ReadableBuffer, size: int) -> int:
    """Copy the string in ``src`` into ``dest``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive. Returns the
    length of the source string, so a result of ``size`` or more means the
    copy was truncated.
    """
    _check_non_negative(size, "size")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds the destination ({len(dest)} bytes)")
    src_len = _c_length(src)
    if size == 0:
        return src_len
    copied = min(size - 1, src_len)
    dest[:copied] = bytes(src[:copied])
    dest[copied] = 0
    return src_len


def strlcat(dest: bytearray, src: ReadableBuffer, size: int) -> int:
    """Append the string in ``src`` to the string in ``dest`` within ``size`` bytes.

    Returns the length of the string it tried to create: the initial length
    of ``dest`` (bounded by ``size``) plus the length of ``src``.
    """
    _check_non_negative(size, "size")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds the destination ({len(dest)} bytes)")
    dst_len = _c_length(dest, size)
    src_len = _c_length(src)
    if size <= dst_len:
        return src_len + size
    copied = min(size - 1 - dst_len, src_len)
    dest[dst_len:dst_len + copied] = bytes(src[:copied])
    dest[dst_len + copied] = 0
    return src_len + dst_len