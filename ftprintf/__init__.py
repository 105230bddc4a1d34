"""A printf-style formatter with C-like character, string, memory, output and list helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "strings",
    "searching",
    "memory",
    "output",
    "linkedlist",
    "conversions",
    "printf",
]