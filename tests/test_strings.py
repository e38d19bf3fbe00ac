import pytest

from pushswap.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("\t\n\v\f\r +17", 17),
        ("+-5", 0),
        ("abc", 0),
        ("", 0),
        ("-0", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_basic(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atoi_long_overflow_positive():
    assert atoi("99999999999999999999") == -1


def test_atoi_long_overflow_negative():
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2147483647, -2147483648])
def test_itoa_round_trips_with_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("a,b,,c", ",") == ["a", "b", "c"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("     ", " ") == []


def test_split_rejoin_invariant():
    text = "one two  three"
    assert " ".join(split(text, " ")) == "one two three"


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_finds_first():
    text = "abcabc"
    assert strchr(text, "b") == text.index("b")
    assert strchr(text, ord("c")) == text.index("c")


def test_strchr_missing_and_nul():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_rejects_long_string():
    with pytest.raises(TypeError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    text = "abcabc"
    assert strrchr(text, "b") == text.rindex("b")
    assert strrchr(text, "a") == text.rindex("a")
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)


def test_striteri_edits_in_place():
    chars = list("abcd")

    def upper_even(index, seq):
        if index % 2 == 0:
            seq[index] = seq[index].upper()

    striteri(chars, upper_even)
    assert "".join(chars) == "AbCd"


def test_striteri_passes_every_index():
    seen = []
    striteri(list("xyz"), lambda i, seq: seen.append((i, seq[i])))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strlcat_fits():
    assert strlcat("ab", "cde", 10) == ("abcde", len("ab") + len("cde"))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cde", 4)
    assert result == "abc"
    assert total == len("ab") + len("cde")
    assert len(result) == 4 - 1


def test_strlcat_dst_longer_than_size():
    assert strlcat("abcdef", "xy", 3) == ("abcdef", 3 + len("xy"))


def test_strlcat_zero_size():
    assert strlcat("ab", "cde", 0) == ("ab", len("cde"))


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", len("hello"))
    assert strlcpy("hello", 10) == ("hello", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("hello", -1)


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("abcd", lambda i, c: c.upper() if i % 2 else c) == "aBcD"


def test_strmapi_nul_ends_string():
    assert strmapi("abcd", lambda i, c: "\0" if c == "c" else c) == "ab"


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_prefix():
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("", "a", 1) == -ord("a")


def test_strncmp_antisymmetric():
    pairs = [("hello", "help"), ("a", "b"), ("same", "same")]
    for first, second in pairs:
        assert strncmp(first, second, 5) == -strncmp(second, first, 5)


def test_strnstr():
    text = "lorem ipsum dolor"
    assert strnstr(text, "ipsum", len(text)) == text.index("ipsum")
    assert strnstr(text, "ipsum", len("lorem ipsum")) == text.index("ipsum")
    assert strnstr(text, "ipsum", len("lorem ipsu")) is None


def test_strnstr_edge_cases():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None
    assert strnstr("abc", "zz", 100) is None


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim(" \t a b \t", " \t") == "a b"
    assert strtrim("abc", "") == "abc"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 0, 0) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 1, -2)