import pytest

from ftprintf.searching import strchr, strlcat, strlcpy, strncmp, strnstr, strrchr


def test_strchr_finds_first_occurrence():
    text = "hello world"
    idx = strchr(text, "o")
    assert text[idx] == "o"
    assert "o" not in text[:idx]


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_multi_character_needle():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_finds_last_occurrence():
    text = "hello world"
    idx = strrchr(text, "o")
    assert text[idx] == "o"
    assert "o" not in text[idx + 1:]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "q") is None


def test_strlcpy_truncates_and_reports_source_length():
    copied, total = strlcpy("hello", 3)
    assert copied == "he"
    assert total == len("hello")


def test_strlcpy_size_zero_copies_nothing():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_large_buffer_copies_all():
    copied, total = strlcpy("hello", 100)
    assert copied == "hello"
    assert total == len(copied)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foo") + len("bar")


def test_strlcat_buffer_already_full():
    result, total = strlcat("foobar", "baz", 3)
    assert result == "foobar"
    assert total == 3 + len("baz")


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_ignores_beyond_n():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string_counts_end_as_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found():
    haystack = "lorem ipsum dolor"
    idx = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[idx:idx + len("ipsum")] == "ipsum"


def test_strnstr_respects_length():
    haystack = "lorem ipsum"
    assert strnstr(haystack, "ipsum", len(haystack) - 1) is None
    assert strnstr(haystack, "ipsum", len(haystack)) == haystack.index("ipsum")


def test_strnstr_missing():
    assert strnstr("lorem", "xyz", 10) is None