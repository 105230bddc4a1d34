"""String helpers: number parsing and formatting, splitting, joining, trimming."""

from __future__ import annotations

from typing import Callable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_SPACE = frozenset("\t\n\v\f\r ")


def _wrap32(value: int) -> int:
    """Reduce a value to a signed 32-bit integer the way the hardware wraps it."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits yields 0. The result
    wraps around as a 32-bit signed integer.
    """
    rest = text.lstrip("".join(_SPACE))
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap32(-value if negative else value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings into a new one."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Apply func(index, char) to each character and join the results.

    A NUL character returned by func ends the resulting string.
    """
    mapped = "".join(func(index, ch) for index, ch in enumerate(text))
    return mapped.split("\0", 1)[0]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start > len(text):
        return ""
    return text[start:start + length]