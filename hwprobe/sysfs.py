"""Access to sysfs/procfs style files: existence, listings, values and CPU jiffies."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from itertools import islice

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PROC_STAT = "/proc/stat"


@dataclass(frozen=True)
class Jiffies:
    """Total and busy CPU time counters, -1 when unknown."""

    all: int = -1
    working: int = -1


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def exists(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` can be stat'ed."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def directory_entries(path: str | os.PathLike[str]) -> list[str]:
    """Return the names in directory ``path``, or an empty list if it cannot be read."""
    try:
        return os.listdir(path)
    except OSError:
        return []


def read_first_line(path: str | os.PathLike[str]) -> str | None:
    """Return the first line of ``path`` without its newline, or None if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            line = stream.readline()
    except OSError:
        return None
    return line.rstrip("\n")


def specs_by_file_path(path: str | os.PathLike[str]) -> int:
    """Read the leading integer from the first line of ``path``; -1 if missing or invalid."""
    line = read_first_line(path)
    if line is None:
        return -1
    value = _leading_int(line)
    return -1 if value is None else value


def parse_jiffies(line: str) -> Jiffies:
    """Parse one ``cpu`` line of /proc/stat into jiffy counters.

    The ten counters after the label are summed for ``all``; the first
    three (user, nice, system) make ``working``.
    """
    fields = line.split()
    if len(fields) < 11:
        raise ValueError(f"expected 10 counters in stat line: {line!r}")
    counters = []
    for field in fields[1:11]:
        value = _leading_int(field)
        if value is None:
            raise ValueError(f"invalid counter {field!r} in stat line")
        counters.append(value)
    return Jiffies(all=sum(counters), working=sum(counters[:3]))


def get_jiffies(index: int, stat_path: str | os.PathLike[str] = PROC_STAT) -> Jiffies:
    """Return the jiffies from line ``index`` of the stat file.

    Line 0 is the aggregate of all CPUs, line ``n + 1`` is CPU ``n``.
    An unreadable file yields ``Jiffies()``.
    """
    try:
        with open(stat_path, encoding="utf-8", errors="replace") as stream:
            line = next(islice(stream, index, None), "")
    except OSError:
        return Jiffies()
    return parse_jiffies(line)