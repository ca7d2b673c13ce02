"""Operating system name, version, kernel release, word size and byte order."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from hwprobe.sysfs import exists

OS_RELEASE = "/etc/os-release"
LD_64 = "/lib64/ld-linux-x86-64.so.2"
UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class OS:
    """A description of the running operating system."""

    name: str
    version: str
    kernel: str
    is_32bit: bool
    is_64bit: bool
    is_big_endian: bool
    is_little_endian: bool


def _quoted_value(line: str) -> str:
    value = line[line.find("=") + 1 :]
    return value[1:-1]


def parse_os_release(text: str) -> tuple[str, str]:
    """Return ``(name, version)`` from os-release text, using PRETTY_NAME and VERSION.

    The values are expected in quotes, which are removed. Missing keys give "".
    """
    name = version = ""
    for line in text.split("\n"):
        if line.startswith("PRETTY_NAME"):
            name = _quoted_value(line)
        if line.startswith("VERSION="):
            version = _quoted_value(line)
    return name, version


def _kernel_release() -> str:
    try:
        return os.uname().release
    except (AttributeError, OSError):
        return UNKNOWN


def read_os(
    os_release_path: str | os.PathLike[str] = OS_RELEASE,
    ld_path: str | os.PathLike[str] = LD_64,
) -> OS:
    """Describe the running system; 64 bit means the 64-bit loader at ``ld_path`` exists."""
    try:
        with open(os_release_path, encoding="utf-8", errors="replace") as stream:
            name, version = parse_os_release(stream.read())
    except OSError:
        name, version = "Linux", UNKNOWN
    is_64bit = exists(ld_path)
    little = sys.byteorder == "little"
    return OS(
        name=name,
        version=version,
        kernel=_kernel_release(),
        is_32bit=not is_64bit,
        is_64bit=is_64bit,
        is_big_endian=not little,
        is_little_endian=little,
    )