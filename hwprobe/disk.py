"""Block devices listed under /sys/class/block."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from hwprobe.stringutils import strip
from hwprobe.sysfs import directory_entries, exists, read_first_line

UNKNOWN = "<unknown>"

# The kernel counts sizes in 512-byte sectors whatever the device's own block size.
BLOCK_SIZE = 512

_PARTITION = re.compile(r"(sd[a-z]|nvme\d+n\d+)p?\d+$")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Disk:
    """One disk; strings are "<unknown>" and numbers -1 when not known."""

    vendor: str = UNKNOWN
    model: str = UNKNOWN
    serial_number: str = UNKNOWN
    size_bytes: int = -1
    id: int = -1


def is_partition(path: str) -> bool:
    """Whether ``path`` names a partition (sda1, nvme0n1p2) rather than a whole disk."""
    return _PARTITION.search(path) is not None


def _read_stripped(path: str) -> str:
    value = read_first_line(path)
    return UNKNOWN if value is None else strip(value)


def disk_vendor(path: str) -> str:
    """Vendor of the disk at ``path``.

    NVMe vendor files live under the controller in ``class/nvme/nvmeN``
    rather than under ``class/block``, so such paths are redirected there.
    """
    vendor_path = path
    nvme_pos = path.rfind("nvme")
    if nvme_pos != -1:
        nvme_name = path[nvme_pos : nvme_pos + 5]
        prefix = path[: nvme_pos - 6] if nvme_pos >= 6 else path
        vendor_path = prefix + "nvme/" + nvme_name
    return _read_stripped(os.path.join(vendor_path, "device", "vendor"))


def disk_model(path: str) -> str:
    """Model of the disk at ``path``."""
    return _read_stripped(os.path.join(path, "device", "model"))


def disk_serial_number(path: str) -> str:
    """Serial number of the disk at ``path``."""
    return _read_stripped(os.path.join(path, "device", "serial"))


def disk_size_bytes(path: str) -> int:
    """Size of the disk at ``path`` in bytes, or -1 if unknown."""
    try:
        with open(os.path.join(path, "size"), encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return -1
    match = _LEADING_INT.match(text)
    if match is None:
        return -1
    return int(match.group(1)) * BLOCK_SIZE


def get_all_disks(root: str | os.PathLike[str] = "/") -> list[Disk]:
    """Return every whole disk under ``root`` that reports a vendor, model or serial."""
    base = os.path.join(os.fspath(root), "sys", "class", "block")
    disks = []
    for entry in directory_entries(base):
        path = os.path.join(base, entry)
        if not exists(path) or is_partition(path):
            continue
        disk = Disk(
            vendor=disk_vendor(path),
            model=disk_model(path),
            serial_number=disk_serial_number(path),
        )
        # Every block device has a size, so only identified devices count as disks.
        if disk.vendor == disk.model == disk.serial_number == UNKNOWN:
            continue
        disk.size_bytes = disk_size_bytes(path)
        disks.append(disk)
    return disks