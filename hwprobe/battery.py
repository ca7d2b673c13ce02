"""Batteries as exposed under /sys/class/power_supply."""

from __future__ import annotations

import math
import os
from itertools import count

from hwprobe.sysfs import exists, read_first_line, specs_by_file_path

UNKNOWN = "<unknown>"

_POWER_SUPPLY = ("sys", "class", "power_supply")


def _battery_dir(root: str, battery_id: int) -> str:
    return os.path.join(root, *_POWER_SUPPLY, f"BAT{battery_id}")


class Battery:
    """One battery, read lazily from its sysfs directory.

    Descriptive values are read once and kept; a negative id describes no
    battery and yields "<unknown>", zero and False everywhere.
    """

    def __init__(self, id: int = 0, root: str | os.PathLike[str] = "/") -> None:
        self.id = id
        self.root = os.fspath(root)
        self._texts: dict[str, str] = {}
        self._energy_full = 0

    def __repr__(self) -> str:
        return f"Battery(id={self.id!r}, root={self.root!r})"

    def _path(self, name: str) -> str:
        return os.path.join(_battery_dir(self.root, self.id), name)

    def _read_text(self, name: str) -> str:
        if self.id < 0:
            return UNKNOWN
        value = read_first_line(self._path(name))
        return UNKNOWN if value is None else value

    def _cached_text(self, name: str) -> str:
        value = self._texts.get(name, "")
        if not value:
            value = self._read_text(name)
            self._texts[name] = value
        return value

    def _read_int(self, name: str) -> int:
        if self.id < 0:
            return 0
        return max(specs_by_file_path(self._path(name)), 0)

    def vendor(self) -> str:
        """Manufacturer of the battery."""
        return self._cached_text("manufacturer")

    def model(self) -> str:
        """Model name of the battery."""
        return self._cached_text("model_name")

    def serial_number(self) -> str:
        """Serial number of the battery."""
        return self._cached_text("serial_number")

    def technology(self) -> str:
        """Cell technology, such as Li-ion."""
        return self._cached_text("technology")

    def energy_full(self) -> int:
        """Energy when fully charged, as reported by the kernel; 0 if unknown."""
        if self._energy_full == 0:
            self._energy_full = self._read_int("energy_full")
        return self._energy_full

    def energy_now(self) -> int:
        """Energy stored right now; 0 if unknown."""
        return self._read_int("energy_now")

    def charging(self) -> bool:
        """Whether the battery status reads "Charging"."""
        if self.id < 0:
            return False
        return read_first_line(self._path("status")) == "Charging"

    def discharging(self) -> bool:
        """Whether the battery is not charging."""
        return not self.charging()

    def capacity(self) -> float:
        """Charge level as a fraction of the full energy.

        Without a known full energy the result is NaN (nothing stored) or
        infinity, as with floating-point division.
        """
        now = self.energy_now()
        full = self.energy_full()
        if full == 0:
            return math.nan if now == 0 else math.inf
        return now / full


def get_all_batteries(root: str | os.PathLike[str] = "/") -> list[Battery]:
    """Return BAT0, BAT1, ... up to the first one that does not exist."""
    root = os.fspath(root)
    batteries = []
    for battery_id in count():
        if not exists(_battery_dir(root, battery_id)):
            break
        batteries.append(Battery(battery_id, root))
    return batteries