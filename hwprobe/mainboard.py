"""Main board identity from the DMI attributes in sysfs."""

from __future__ import annotations

import os
from dataclasses import dataclass

from hwprobe.sysfs import read_first_line

UNKNOWN = "<unknown>"

_DMI_DIRECTORIES = (
    ("sys", "devices", "virtual", "dmi", "id"),
    ("sys", "class", "dmi", "id"),
)


@dataclass(frozen=True)
class MainBoard:
    """Vendor, name, version and serial number of the main board."""

    vendor: str
    name: str
    version: str
    serial_number: str


def get_dmi_by_name(name: str, root: str | os.PathLike[str] = "/") -> str:
    """First non-empty value of the DMI attribute ``name``, or "<unknown>"."""
    root = os.fspath(root)
    for parts in _DMI_DIRECTORIES:
        value = read_first_line(os.path.join(root, *parts, name))
        if value:
            return value
    return UNKNOWN


def read_mainboard(root: str | os.PathLike[str] = "/") -> MainBoard:
    """Describe the main board of the system under ``root``."""
    return MainBoard(
        vendor=get_dmi_by_name("board_vendor", root),
        name=get_dmi_by_name("board_name", root),
        version=get_dmi_by_name("board_version", root),
        serial_number=get_dmi_by_name("board_serial", root),
    )