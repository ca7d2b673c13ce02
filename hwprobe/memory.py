"""Main memory size and usage from /proc/meminfo, with a sysconf fallback."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace

from hwprobe.stringutils import split, strip

MEMINFO = "/proc/meminfo"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_KEYS = (("MemTotal", "total"), ("MemFree", "free"), ("MemAvailable", "available"))


@dataclass(frozen=True)
class MemInfo:
    """Memory figures in bytes, -1 when unknown."""

    total: int = -1
    free: int = -1
    available: int = -1


@dataclass(frozen=True)
class MemoryModule:
    """One memory module; string fields are "<unknown>" and numbers -1 when not known."""

    id: int
    vendor: str = UNKNOWN
    name: str = UNKNOWN
    model: str = UNKNOWN
    serial_number: str = UNKNOWN
    total_bytes: int = -1
    frequency_hz: int = -1


def _kib_value(line: str) -> int | None:
    parts = split(line, ":")
    if len(parts) != 2:
        return None
    value = strip(parts[1])
    space = value.find(" ")
    if space == -1:
        return None
    match = _LEADING_INT.match(value[:space])
    if match is None:
        raise ValueError(f"invalid meminfo value: {line!r}")
    return int(match.group(1)) * 1024


def parse_meminfo(text: str) -> MemInfo:
    """Read MemTotal, MemFree and MemAvailable (given in kB) from meminfo text.

    Reading stops as soon as all three are known.
    """
    fields = {"total": -1, "free": -1, "available": -1}
    for line in text.split("\n"):
        if -1 not in fields.values():
            break
        for prefix, key in _KEYS:
            if line.startswith(prefix):
                value = _kib_value(line)
                if value is not None:
                    fields[key] = value
                break
    return MemInfo(**fields)


def _sysconf(name: str) -> int:
    try:
        return os.sysconf(name)
    except (AttributeError, ValueError, OSError):
        return -1


def _with_sysconf(info: MemInfo) -> MemInfo:
    pages = _sysconf("SC_PHYS_PAGES")
    available_pages = _sysconf("SC_AVPHYS_PAGES")
    page_size = _sysconf("SC_PAGE_SIZE")
    if pages > 0 and page_size > 0:
        info = replace(info, total=pages * page_size)
    if available_pages > 0 and page_size > 0:
        info = replace(info, available=available_pages * page_size)
    return info


def read_meminfo(path: str | os.PathLike[str] = MEMINFO) -> MemInfo:
    """Read memory figures from ``path``, asking sysconf when total or available is missing."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return _with_sysconf(MemInfo())
    info = parse_meminfo(text)
    if info.total == -1 or info.available == -1:
        info = _with_sysconf(info)
    return info


class Memory:
    """System memory, reported as a single module of the total size."""

    def __init__(self, meminfo_path: str | os.PathLike[str] = MEMINFO) -> None:
        self.meminfo_path = meminfo_path
        self.modules = [MemoryModule(id=0, total_bytes=read_meminfo(meminfo_path).total)]

    def total_bytes(self) -> int:
        """Sum of the sizes of all modules."""
        return sum(module.total_bytes for module in self.modules)

    def free_bytes(self) -> int:
        """Free memory right now, in bytes."""
        return read_meminfo(self.meminfo_path).free

    def available_bytes(self) -> int:
        """Available memory right now, in bytes."""
        return read_meminfo(self.meminfo_path).available