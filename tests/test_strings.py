import pytest

from ftprintf.strings import (
    atoi,
    itoa,
    split,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 10, 123456, -98765, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 99") == 17


def test_atoi_no_digits_gives_zero():
    assert atoi("hello") == 0
    assert atoi("--5") == 0
    assert atoi("") == 0


def test_atoi_wraps_at_32_bits():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("****", "*") == []


def test_split_join_round_trip():
    words = ["hello", "world", "again"]
    assert split(",".join(words), ",") == words


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strjoin():
    assert strjoin("hello", "world") == "helloworld"
    assert strjoin("", "world") == "world"


def test_strmapi_passes_index_and_char():
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch

    assert strmapi("hello", record) == "hello"
    assert seen == list(enumerate("hello"))


def test_strmapi_stops_at_nul():
    assert strmapi("hello", lambda i, ch: "\0" if i == 2 else ch) == "he"


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  hello  ", "") == "  hello  "


def test_strtrim_keeps_inner_chars():
    assert strtrim(" hello world ", " ") == "hello world"


def test_substr_basic_and_bounds():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 9, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)