# ftprintf

A compact printf-style formatter. It comes with a set of small helpers modelled
on the classic C string, memory and list routines.

## Installation

```
pip install .
```

To install with the test requirements:

```
pip install ".[test]"
```

## Formatting

`ftprintf.printf.printf` and `ftprintf.printf.sformat` support these conversions:

- `c`
- `s`
- `p`
- `d` and `i`
- `u`
- `x` and `X`
- `%`

They also accept the `-` and `0` flags, a field width, and a precision after `.`.
A `*` takes the width or the precision from the arguments. A negative `*` value
turns on left alignment.

Characters between `%` and the conversion letter that mean nothing are skipped.

```python
from ftprintf.printf import printf, sformat

text = sformat("%3.3s%7.3s", "hello", "world")   # "hel    wor"
count = printf("[%-5d|%05d]\n", 42, 42)           # writes "[42   |00042]\n"
```

### `sformat` and `printf`

`sformat` returns the formatted text. `printf` writes the text to standard
output and returns a character count. In most cases that count is the length of
the text, with two exceptions:

- A `%c` conversion resets the running count instead of adding to it.
- For `%u` values above `2**31 - 1`, the digits are written but not counted.

Either function raises `TypeError` when the arguments run out.

### Integer handling

Integers are treated as 32-bit values:

- `%d` and `%i` wrap to signed 32 bits.
- `%x` and `%X` take the low 32 bits.
- `%u` prints a value above `2**31 - 1` as its signed 32-bit counterpart.
- For `%s`, `None` prints as `(null)`, and an empty string prints nothing at all, not even padding.
- For `%p`, `None` prints as `0x0`.

### Single conversions

Each conversion is also available on its own in `ftprintf.conversions`:

- `format_char`
- `format_percent`
- `format_string`
- `format_int`
- `format_unsigned`
- `format_hex`
- `format_pointer`

Each one takes a `FormatSpec`, which has the fields `left`, `zero`, `point`,
`precision` and `width`, followed by the value. `format_hex` also takes an
`upper` flag.

```python
from ftprintf.conversions import FormatSpec, format_hex

format_hex(FormatSpec(width=6, zero=True), 255, upper=True)   # "0000FF"
```

## Helpers

- `ftprintf.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`. These accept an int code or a one-character string.
- `ftprintf.strings`: `atoi`, `itoa`, `split`, `strjoin`, `strmapi`,
  `strtrim`, `substr`.
- `ftprintf.searching`: `strchr`, `strrchr`, `strlcpy`, `strlcat`,
  `strncmp`, `strnstr`. The search functions return an index or `None`.
  `strlcpy` and `strlcat` return the resulting text together with the length
  they tried to create.
- `ftprintf.memory`: `bzero`, `memset`, `calloc`, `memcpy`, `memccpy`,
  `memmove`, `memchr`, `memcmp`. These work on `bytearray` and `bytes`.
  `memmove` moves bytes within one buffer, given by offsets.
- `ftprintf.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
  These write to any text stream.
- `ftprintf.linkedlist`: `LinkedList`, a singly linked list. It supports
  `add_front`, `add_back`, `last`, `clear`, `iterate`, `map`, `len()` and
  iteration. `map` builds its result by pushing onto the front, so the results
  come out in reverse order.

```python
from ftprintf.strings import split, atoi

split("  a b  c ", " ")   # ["a", "b", "c"]
atoi("  -42abc")          # -42
```

## Command line

```
ftprintf
```

This command prints the sample format `%3.3s%7.3s` with `"hello"` and `"world"`
twice:

1. once through `ftprintf.printf.printf`;
2. once through Python's own `%` operator.

It then prints the two character counts so they can be compared.

## What it does not do

The formatter has no floating-point conversions (`f`, `e`, `g`). It also has no
length modifiers (`l`, `h`) and no `+`, space or `#` flags. It writes only to
standard output or returns a string; it has no variant that writes to a chosen
stream.

## Running the tests

```
pytest
```