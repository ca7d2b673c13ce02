import pytest

from hwprobe.memory import MemInfo, Memory, parse_meminfo, read_meminfo

SAMPLE = "MemTotal:       16 kB\nMemFree:        8 kB\nMemAvailable:   12 kB\nBuffers:        4 kB\n"


def test_parse_meminfo_sample():
    assert parse_meminfo(SAMPLE) == MemInfo(total=16384, free=8192, available=12288)


def test_parse_meminfo_missing_keys():
    assert parse_meminfo("Buffers: 4 kB\n") == MemInfo()


def test_parse_meminfo_value_without_unit_is_ignored():
    info = parse_meminfo("MemTotal: 16\nMemFree: 8 kB\n")
    assert info.total == -1
    assert info.free == parse_meminfo("MemFree: 8 kB\n").free


def test_parse_meminfo_stops_when_complete():
    assert parse_meminfo(SAMPLE + "MemTotal: 99 kB\n") == parse_meminfo(SAMPLE)


def test_parse_meminfo_invalid_number():
    with pytest.raises(ValueError):
        parse_meminfo("MemTotal: lots kB\n")


def test_read_meminfo_matches_parse(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    assert read_meminfo(path) == parse_meminfo(SAMPLE)


def test_memory_single_unknown_module(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    memory = Memory(path)
    (module,) = memory.modules
    assert module.id == 0
    assert module.vendor == "<unknown>"
    assert module.serial_number == "<unknown>"
    assert module.frequency_hz == -1
    assert memory.total_bytes() == read_meminfo(path).total


def test_memory_rereads_free_and_available(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(SAMPLE)
    memory = Memory(path)
    assert memory.free_bytes() == parse_meminfo(SAMPLE).free
    updated = "MemTotal: 16 kB\nMemFree: 2 kB\nMemAvailable: 3 kB\n"
    path.write_text(updated)
    assert memory.free_bytes() == parse_meminfo(updated).free
    assert memory.available_bytes() == parse_meminfo(updated).available
    assert memory.total_bytes() == parse_meminfo(SAMPLE).total