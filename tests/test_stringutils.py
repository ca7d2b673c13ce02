import pytest

from hwprobe.stringutils import (
    count_substring,
    get_value,
    split,
    split_char,
    split_get_index,
    strip,
)


def test_strip_removes_spaces_tabs_and_newlines():
    assert strip("  \t hello \n") == "hello"


def test_strip_all_whitespace_gives_empty():
    assert strip(" \t\n ") == ""
    assert strip("") == ""


def test_strip_keeps_carriage_return():
    assert strip("\rx\r") == "\rx\r"


def test_strip_keeps_inner_whitespace():
    assert strip(" a b ") == "a b"


def test_count_substring_non_overlapping():
    assert count_substring("a--b--c", "--") == 2


@pytest.mark.parametrize(
    "text, delimiter",
    [("a  b  c", "  "), ("aaaa", "aa"), ("none", ","), ("", ","), (",,,", ",")],
)
def test_count_matches_split(text, delimiter):
    assert count_substring(text, delimiter) == len(split(text, delimiter)) - 1


def test_count_substring_empty_raises():
    with pytest.raises(ValueError):
        count_substring("abc", "")


def test_split_basic():
    assert split("a  b  c", "  ") == ["a", "b", "c"]


def test_split_without_delimiter():
    assert split("abc", ",") == ["abc"]
    assert split("", ",") == [""]


@pytest.mark.parametrize("text", ["a,b", ",a,", "", "abc", ",,"])
def test_split_join_round_trip(text):
    assert ",".join(split(text, ",")) == text


def test_split_empty_delimiter_raises():
    with pytest.raises(ValueError):
        split("abc", "")


def test_split_char_drops_unterminated_tail():
    assert split_char("a\nb\nc", "\n") == ["a", "b"]


def test_split_char_terminated():
    assert split_char("a\nb\n", "\n") == ["a", "b"]


def test_split_char_without_delimiter():
    assert split_char("abc", "\n") == []


def test_split_char_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split_char("a\n\nb", "\n\n")


def test_split_get_index_positive_and_negative():
    assert split_get_index("a:b:c", ":", 1) == "b"
    assert split_get_index("a:b:c", ":", -1) == "c"
    assert split_get_index("a:b:c", ":", 0) == "a"


def test_split_get_index_out_of_range():
    assert split_get_index("a:b:c", ":", 3) == ""
    assert split_get_index("a:b:c", ":", -4) == ""


def test_split_get_index_agrees_with_split():
    text = "x::yy::::z"
    pieces = split(text, "::")
    for position, piece in enumerate(pieces):
        assert split_get_index(text, "::", position) == piece
        assert split_get_index(text, "::", position - len(pieces)) == piece


def test_get_value_in_range():
    assert get_value(["x", "y"], 1, "<unknown>") == "y"


def test_get_value_out_of_range():
    assert get_value(["x"], 5, "<unknown>") == "<unknown>"
    assert get_value([], 0, -1) == -1
    assert get_value(["x", "y"], -1, "d") == "d"