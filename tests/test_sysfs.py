import pytest

from hwprobe.sysfs import (
    Jiffies,
    directory_entries,
    exists,
    get_jiffies,
    parse_jiffies,
    read_first_line,
    specs_by_file_path,
)


def test_exists(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    assert exists(target) is True
    assert exists(tmp_path) is True
    assert exists(tmp_path / "missing") is False


def test_directory_entries_lists_names(tmp_path):
    (tmp_path / "a").write_text("")
    (tmp_path / "b").mkdir()
    assert sorted(directory_entries(tmp_path)) == ["a", "b"]


def test_directory_entries_missing_dir(tmp_path):
    assert directory_entries(tmp_path / "missing") == []


def test_read_first_line(tmp_path):
    target = tmp_path / "f"
    target.write_text("first\nsecond\n")
    assert read_first_line(target) == "first"


def test_read_first_line_empty_and_missing(tmp_path):
    empty = tmp_path / "empty"
    empty.write_text("")
    assert read_first_line(empty) == ""
    assert read_first_line(tmp_path / "missing") is None


def test_specs_by_file_path_reads_number(tmp_path):
    target = tmp_path / "scaling_max_freq"
    target.write_text("2400000\n")
    assert specs_by_file_path(target) == 2400000


def test_specs_by_file_path_leading_number(tmp_path):
    target = tmp_path / "value"
    target.write_text("  42 kHz\n")
    assert specs_by_file_path(target) == 42


def test_specs_by_file_path_invalid_or_missing(tmp_path):
    target = tmp_path / "value"
    target.write_text("abc\n")
    assert specs_by_file_path(target) == -1
    assert specs_by_file_path(tmp_path / "missing") == -1


def test_jiffies_default_is_unknown():
    assert Jiffies() == Jiffies(all=-1, working=-1)


def test_parse_jiffies_source_example():
    result = parse_jiffies("cpu  349585 0 30513 875546 0 935 0 0 0 0")
    assert result == Jiffies(all=1256579, working=380098)


def test_parse_jiffies_idle_only_counts_in_all():
    result = parse_jiffies("cpu0 0 0 0 5 0 0 0 0 0 0")
    assert result.working == 0
    assert result.all == 5


def test_parse_jiffies_working_is_part_of_all():
    result = parse_jiffies("cpu1 7 0 0 0 0 0 0 0 0 0")
    assert result.working == result.all == 7


def test_parse_jiffies_short_line_raises():
    with pytest.raises(ValueError):
        parse_jiffies("cpu 1 2 3")


def test_parse_jiffies_bad_counter_raises():
    with pytest.raises(ValueError):
        parse_jiffies("cpu a b c d e f g h i j")


def test_get_jiffies_selects_line(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(
        "cpu  3 0 0 0 0 0 0 0 0 0\n"
        "cpu0 0 0 0 9 0 0 0 0 0 0\n"
    )
    assert get_jiffies(0, stat) == parse_jiffies("cpu  3 0 0 0 0 0 0 0 0 0")
    assert get_jiffies(1, stat) == Jiffies(all=9, working=0)


def test_get_jiffies_missing_file(tmp_path):
    assert get_jiffies(0, tmp_path / "missing") == Jiffies()


def test_get_jiffies_past_end_raises(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu  3 0 0 0 0 0 0 0 0 0\n")
    with pytest.raises(ValueError):
        get_jiffies(4, stat)