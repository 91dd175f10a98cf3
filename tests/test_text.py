import pytest

from pipex import text


@pytest.mark.parametrize("number", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_atoi_itoa_round_trip(number):
    assert text.atoi(text.itoa(number)) == number


def test_itoa_minimum_int():
    assert text.itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert text.atoi(" \t\n\v\f\r+123abc") == text.atoi("123")
    assert text.atoi("  -99xyz") == -text.atoi("99")


@pytest.mark.parametrize("value", ["", "abc", "+", "-", "--5", "  +-3"])
def test_atoi_without_digits_is_zero(value):
    assert text.atoi(value) == 0


def test_split_drops_empty_words():
    assert text.split("  hello   world ", " ") == ["hello", "world"]


def test_split_path_like():
    assert text.split("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]


def test_split_only_separators():
    assert text.split(":::", ":") == []


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        text.split("a b", "  ")


def test_trim_both_ends():
    assert text.trim("xyabcyx", "xy") == "abc"
    assert text.trim("xxxx", "x") == ""
    assert text.trim("  keep  ", "") == "  keep  "


def test_substr_basic_and_clamped():
    source = "hello"
    assert text.substr(source, 1, 3) == source[1:4]
    assert text.substr(source, 2, 100) == source[2:]
    assert text.substr(source, 10, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        text.substr("abc", -1, 2)


def test_find_bounded_within_limit():
    haystack = "lorem ipsum dolor"
    index = text.find_bounded(haystack, "ipsum", len(haystack))
    assert index is not None
    assert haystack[index:].startswith("ipsum")


def test_find_bounded_match_crossing_limit_is_missed():
    haystack = "lorem ipsum dolor"
    start = haystack.index("ipsum")
    assert text.find_bounded(haystack, "ipsum", start + 4) is None
    assert text.find_bounded(haystack, "ipsum", start + 5) == start


def test_find_bounded_empty_needle():
    assert text.find_bounded("abc", "", 0) == 0


def test_compare_prefix_signs():
    assert text.compare_prefix("abc", "abd", 3) < 0
    assert text.compare_prefix("abd", "abc", 3) > 0
    assert text.compare_prefix("abc", "abd", 2) == 0
    assert text.compare_prefix("PATH=/bin", "PATH=", 5) == 0


def test_compare_prefix_shorter_string():
    assert text.compare_prefix("ab", "abc", 5) == -ord("c")
    assert text.compare_prefix("abc", "ab", 5) == ord("c")


def test_map_indexed():
    result = text.map_indexed("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_bounded_copy():
    src = "hello"
    assert text.bounded_copy(src, 4) == (src[:3], len(src))
    assert text.bounded_copy(src, 0) == ("", len(src))
    assert text.bounded_copy(src, 50) == (src, len(src))


def test_bounded_concat_fits():
    assert text.bounded_concat("foo", "bar", 20) == ("foobar", 6)


def test_bounded_concat_truncates():
    dst, src = "foo", "bar"
    result, total = text.bounded_concat(dst, src, 5)
    assert result == dst + src[:1]
    assert total == len(dst) + len(src)


def test_bounded_concat_too_small():
    assert text.bounded_concat("foo", "bar", 2) == ("foo", len("bar") + 2)


@pytest.mark.parametrize(
    "char, alpha, digit, printable",
    [
        ("a", True, False, True),
        ("Z", True, False, True),
        ("5", False, True, True),
        (" ", False, False, True),
        ("\n", False, False, False),
        ("~", False, False, True),
    ],
)
def test_classifiers(char, alpha, digit, printable):
    assert text.is_alpha(char) is alpha
    assert text.is_digit(char) is digit
    assert text.is_alnum(char) is (alpha or digit)
    assert text.is_printable(char) is printable
    assert text.is_ascii(char) is True


def test_classifiers_accept_ints():
    assert text.is_ascii(127) is True
    assert text.is_ascii(128) is False
    assert text.is_ascii(-1) is False
    assert text.is_printable(127) is False
    assert text.is_alpha("é") is False


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        text.is_alpha("ab")


def test_case_conversion():
    assert text.to_upper("a") == "A"
    assert text.to_lower("Q") == "q"
    assert text.to_upper("1") == "1"
    assert text.to_lower(ord("A")) == ord("a")


@pytest.mark.parametrize("char", list("azAZ09 !"))
def test_case_round_trip(char):
    assert text.to_lower(text.to_upper(char)) == text.to_lower(char)