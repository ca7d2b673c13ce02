"""CPU sockets from /proc/cpuinfo, with clock speeds from sysfs and load from /proc/stat."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field
from itertools import count

from hwprobe.stringutils import split, split_char, strip
from hwprobe.sysfs import Jiffies, get_jiffies, specs_by_file_path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _khz_to_mhz(khz: int) -> int:
    mhz = abs(khz) // 1000
    return mhz if khz >= 0 else -mhz


def _cpufreq_path(root: str | os.PathLike[str], core_id: int, name: str) -> str:
    return os.path.join(root, "sys", "devices", "system", "cpu", f"cpu{core_id}", "cpufreq", name)


def _cpufreq_mhz(core_id: int, root: str | os.PathLike[str], name: str) -> int:
    khz = specs_by_file_path(_cpufreq_path(root, core_id, name))
    return _khz_to_mhz(khz) if khz > -1 else -1


def max_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = "/") -> int:
    """Maximum scaling frequency of ``core_id`` in MHz, or -1 if unknown."""
    return _cpufreq_mhz(core_id, root, "scaling_max_freq")


def regular_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = "/") -> int:
    """Base frequency of ``core_id`` in MHz, or -1 if unknown."""
    return _cpufreq_mhz(core_id, root, "base_frequency")


def min_clock_speed_mhz(core_id: int, root: str | os.PathLike[str] = "/") -> int:
    """Minimum scaling frequency of ``core_id`` in MHz, or -1 if unknown."""
    return _cpufreq_mhz(core_id, root, "scaling_min_freq")


def _ratio(work: int, total: int) -> float | None:
    try:
        return work / total
    except ZeroDivisionError:
        return None


@dataclass
class CPU:
    """One CPU socket. Numeric fields are -1 when unknown."""

    id: int = -1
    model_name: str = ""
    vendor: str = ""
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    flags: list[str] = field(default_factory=list)
    root: str = field(default="/", repr=False, compare=False)
    warmup: float = field(default=1.0, repr=False, compare=False)
    _warmed_up: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: list[Jiffies] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def stat_path(self) -> str:
        return os.path.join(self.root, "proc", "stat")

    def _warm_up(self) -> None:
        # The first utilisation sample needs some elapsed time to form a delta.
        if not self._warmed_up:
            if self.warmup > 0:
                time.sleep(self.warmup)
            self._warmed_up = True

    def current_clock_speed_mhz(self) -> list[int]:
        """Current frequency in MHz of every logical CPU, stopping at the first missing one."""
        speeds = []
        for core_id in count():
            khz = specs_by_file_path(_cpufreq_path(self.root, core_id, "scaling_cur_freq"))
            if khz == -1:
                break
            speeds.append(_khz_to_mhz(khz))
        return speeds

    def current_utilisation(self) -> float:
        """Share of busy time since the previous call, in [0, 1], or -1.0 if undefined."""
        self._warm_up()
        current = get_jiffies(0, self.stat_path)
        last, self._last_total = self._last_total, current
        ratio = _ratio(current.working - last.working, current.all - last.all)
        if ratio is None or ratio < 0 or ratio > 1:
            return -1.0
        return ratio

    def thread_utilisation(self, thread_index: int) -> float:
        """Share of busy time of one logical CPU since the previous call, or -1.0 if undefined."""
        self._warm_up()
        if not self._last_threads:
            self._last_threads = [Jiffies()] * max(self.num_logical_cores, 0)
        if not 0 <= thread_index < len(self._last_threads):
            raise IndexError(f"thread index {thread_index} out of range")
        current = get_jiffies(thread_index + 1, self.stat_path)
        last = self._last_threads[thread_index]
        self._last_threads[thread_index] = current
        ratio = _ratio(current.working - last.working, current.all - last.all)
        if ratio is None or ratio < 0 or ratio > 100:
            return -1.0
        return ratio

    def threads_utilisation(self) -> list[float]:
        """Utilisation of every logical CPU of this socket."""
        return [self.thread_utilisation(index) for index in range(max(self.num_logical_cores, 0))]


def _apply_field(cpu: CPU, name: str, value: str) -> None:
    if name == "vendor_id":
        cpu.vendor = value
    elif name == "model name":
        cpu.model_name = value
    elif name == "cache size":
        cpu.l3_cache_size_bytes = _to_int(split(value, " ")[0]) * 1024
    elif name == "siblings":
        cpu.num_logical_cores = _to_int(value)
    elif name == "cpu cores":
        cpu.num_physical_cores = _to_int(value)
    elif name == "flags":
        cpu.flags = split(value, " ")


def parse_cpuinfo(text: str, root: str | os.PathLike[str] = "/") -> list[CPU]:
    """Build one CPU per physical socket from the text of /proc/cpuinfo.

    Blocks are separated by blank lines; only lines ending in a newline are
    read. A block is kept when its physical id differs from the last socket
    counter, so each socket is reported once.
    """
    root = os.fspath(root)
    cpus = []
    physical_id = -1
    for block in split(text, "\n\n"):
        cpu = CPU(root=root)
        add = False
        for line in split_char(block, "\n"):
            parts = split(line, ":")
            if len(parts) < 2:
                continue
            name, value = strip(parts[0]), strip(parts[1])
            if name == "physical id":
                socket = _to_int(value)
                if socket == physical_id:
                    continue
                cpu.id = socket
                add = True
            else:
                _apply_field(cpu, name, value)
        if add:
            cpu.max_clock_speed_mhz = max_clock_speed_mhz(cpu.id, root)
            cpu.regular_clock_speed_mhz = regular_clock_speed_mhz(cpu.id, root)
            physical_id += 1
            cpus.append(cpu)
    return cpus


def get_all_cpus(root: str | os.PathLike[str] = "/") -> list[CPU]:
    """Return the CPU sockets described under ``root``; empty if cpuinfo cannot be read."""
    try:
        with open(os.path.join(root, "proc", "cpuinfo"), encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return []
    return parse_cpuinfo(text, root)