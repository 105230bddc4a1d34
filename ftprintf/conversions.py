"""Rendering of single conversions: %c, %%, %s, %d/%i, %u, %x/%X and %p."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ftprintf.strings import itoa

_INT_MIN = -(2**31)
_INT_MAX_DIGITS = "2147483648"
_NULL_TEXT = "(null)"


@dataclass
class FormatSpec:
    """Flags, width and precision of one conversion.

    ``left`` is the '-' flag, ``zero`` the '0' flag and ``point`` records
    that a '.' was given, so a precision of 0 can be told from none.
    """

    left: bool = False
    zero: bool = False
    point: bool = False
    precision: int = 0
    width: int = 0

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("width must be non-negative")
        if self.precision < 0:
            raise ValueError("precision must be non-negative")


def _spaces(count: int) -> str:
    return " " * max(count, 0)


def _zeros(count: int) -> str:
    return "0" * max(count, 0)


def _int_value(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _wrap64(value: int) -> int:
    value &= 0xFFFFFFFFFFFFFFFF
    return value - 2**64 if value >= 2**63 else value


def _digit_count(value: int, base: int) -> int:
    """Digits of a non-negative value; negative values count as none."""
    if value == 0:
        return 1
    count = 0
    while value > 0:
        value //= base
        count += 1
    return count


def _hex_digits(value: int, upper: bool) -> str:
    """Hex digits of a non-negative value; a negative value gives no digits."""
    if value < 0:
        return ""
    return format(value, "X" if upper else "x")


def _pad_single(spec: FormatSpec, text: str) -> str:
    fill = _spaces(spec.width - 1) if spec.width > 1 else ""
    return text + fill if spec.left else fill + text


def format_char(spec: FormatSpec, value: Union[int, str]) -> str:
    """One character, padded with spaces to the width."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        code = ord(value) & 0xFF
    else:
        code = _int_value(value) & 0xFF
    return _pad_single(spec, chr(code))


def format_percent(spec: FormatSpec) -> str:
    """A literal percent sign, padded with spaces to the width."""
    return _pad_single(spec, "%")


def format_string(spec: FormatSpec, value: Optional[str]) -> str:
    """A string cut to the precision and padded with spaces.

    None prints as "(null)"; an empty string prints nothing, not even padding.
    """
    text = _NULL_TEXT if value is None else value.split("\0", 1)[0]
    length = len(text)
    if length == 0:
        return ""
    if spec.point and spec.precision < length:
        shown = text[:spec.precision]
        fill = _spaces(spec.width - spec.precision)
    else:
        shown = text
        fill = _spaces(spec.width - length)
    return shown + fill if spec.left else fill + shown


def _int_min(spec: FormatSpec) -> str:
    prec, width = spec.precision, spec.width
    if not spec.left:
        head = "-"
        if prec > 10:
            head += _zeros(prec - 10)
        tail = _spaces(width - prec - 1) if width > prec + 1 else ""
        return head + _INT_MAX_DIGITS + tail
    if prec > 10:
        lead = _spaces(width - prec - 1) if width > prec + 1 else ""
        return lead + "-" + _zeros(prec - 10) + _INT_MAX_DIGITS
    if width > 11 and spec.zero:
        lead = _zeros(prec - 10)
    elif width > 11:
        lead = _spaces(width - 11)
    else:
        lead = ""
    return lead + "-" + _INT_MAX_DIGITS


def format_int(spec: FormatSpec, value: int) -> str:
    """A signed 32-bit decimal integer.

    Zero padding is written before the minus sign, and a zero value with
    an explicit precision of 0 prints only the padding spaces.
    """
    number = _wrap32(_int_value(value))
    if number == _INT_MIN:
        return _int_min(spec)
    sign = 1 if number < 0 else 0
    number = abs(number)
    if number == 0 and spec.point and not spec.precision:
        return _spaces(spec.width)
    digits = itoa(number)
    size = _digit_count(number, 10)
    prec, width = spec.precision, spec.width
    minus = "-" if sign else ""
    if spec.left:
        if prec > size:
            tail = _spaces(width - prec - sign) if width > prec + sign else ""
            return minus + _zeros(prec - size) + digits + tail
        tail = _spaces(width - size - sign) if width > size + sign else ""
        return minus + digits + tail
    if prec > size:
        lead = _spaces(width - prec - sign) if width > prec + sign else ""
        return lead + minus + _zeros(prec - size) + digits
    if width > size + sign and spec.zero and not spec.point:
        lead = _zeros(width - size - sign)
    elif width > size + sign:
        lead = _spaces(width - size - sign)
    else:
        lead = ""
    return lead + minus + digits


def format_unsigned(spec: FormatSpec, value: int) -> str:
    """An unsigned 32-bit decimal integer.

    Values above 2**31 - 1 are printed as their signed 32-bit counterpart
    and padded as if they had no digits.
    """
    number = _int_value(value) & 0xFFFFFFFF
    if number == 0 and spec.point and not spec.precision:
        return _spaces(spec.width)
    signed = _wrap32(number)
    digits = itoa(signed)
    size = _digit_count(signed, 10)
    prec, width = spec.precision, spec.width
    if spec.left:
        if prec > size:
            tail = _spaces(width - prec) if width > prec else ""
            return _zeros(prec - size) + digits + tail
        tail = _spaces(width - size) if width > size else ""
        return digits + tail
    if prec > size:
        lead = _spaces(width - prec) if width > prec else ""
        return lead + _zeros(prec - size) + digits
    if width > size and spec.zero and not spec.point:
        lead = _zeros(width - size)
    elif width > size:
        lead = _spaces(width - size)
    else:
        lead = ""
    return lead + digits


def format_hex(spec: FormatSpec, value: int, upper: bool) -> str:
    """A 32-bit value in hexadecimal, upper or lower case."""
    number = _int_value(value) & 0xFFFFFFFF
    size = _digit_count(number, 16)
    if number == 0 and spec.point and not spec.precision:
        return _spaces(spec.width)
    digits = _hex_digits(number, upper)
    prec, width = spec.precision, spec.width
    if spec.left:
        if prec > size:
            tail = _spaces(width - prec) if width > prec else ""
            return _zeros(prec - size) + digits + tail
        tail = _spaces(width - size) if width > size else ""
        return digits + tail
    if not prec:
        if width > size:
            lead = _zeros(width - size) if spec.zero else _spaces(width - size)
        else:
            lead = ""
        return lead + digits
    if prec > size:
        lead = _spaces(width - prec) if width > prec else ""
        return lead + _zeros(prec - size) + digits
    return _spaces(width - size) + digits


def format_pointer(spec: FormatSpec, value: Optional[int]) -> str:
    """An address as "0x" followed by lower-case hex digits; None is 0."""
    address = _wrap64(0 if value is None else _int_value(value))
    total = _digit_count(address, 16) + 2
    digits = _hex_digits(address, False)
    prec, width = spec.precision, spec.width
    if spec.left:
        if prec > total - 2:
            tail = _spaces(width - (prec + 2)) if width > prec + 2 else ""
            return "0x" + _zeros(prec - total - 2) + digits + tail
        tail = _spaces(width - total) if width > total else ""
        return "0x" + digits + tail
    if prec > total - 2:
        lead = _spaces(width - (prec + 2)) if width > prec + 2 else ""
        return lead + "0x" + _zeros(prec - total - 2) + digits
    lead = _spaces(width - total) if width > total else ""
    return lead + "0x" + digits