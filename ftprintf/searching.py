"""Searching, comparing and bounded copying of strings."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

_NUL = "\0"


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first occurrence of char in text, or None.

    Searching for NUL finds the terminator, at index len(text).
    """
    char = _single(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last occurrence of char in text, or None.

    Searching for NUL finds the terminator, at index len(text).
    """
    char = _single(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src, so truncation
    happened whenever the length is at least size.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting text and the length it tried to create. When
    dst already fills the buffer it is left unchanged and the length
    counts only size characters of it.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    used = min(len(dst), size)
    if used >= size:
        return dst, used + len(src)
    room = max(size - used - 1, 0)
    return dst + src[:room], used + len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders the strings.

    The result is the difference of the first differing character codes,
    with the end of a string counting as code 0.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    size = len(needle)
    for start, ch in enumerate(haystack):
        if start + size > length:
            break
        if ch == needle[0] and haystack[start:start + size] == needle:
            return start
    return None