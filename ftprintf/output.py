"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO, Union

from ftprintf.strings import itoa


def _until_nul(s: str) -> str:
    """The part of s before its first NUL character."""
    return s.split("\0", 1)[0]


def putchar_fd(c: Union[str, int], stream: TextIO) -> None:
    """Write one character, given as a one-character string or a code 0-255."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
        return
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    if not 0 <= c <= 255:
        raise ValueError(f"character code {c} is out of range")
    stream.write(chr(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write s up to its first NUL character."""
    stream.write(_until_nul(s))


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write s up to its first NUL character, then a newline."""
    stream.write(_until_nul(s) + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    stream.write(itoa(n))