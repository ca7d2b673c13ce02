# hwprobe

`hwprobe` gathers hardware and system information on Linux by reading
`/proc` and `/sys`: CPU sockets, memory, the operating system, batteries,
disks and the main board. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Library use

```python
from hwprobe.cpu import get_all_cpus
from hwprobe.memory import Memory
from hwprobe.os_info import read_os
from hwprobe.battery import get_all_batteries
from hwprobe.disk import get_all_disks
from hwprobe.mainboard import read_mainboard

for cpu in get_all_cpus():
    print(cpu.vendor, cpu.model_name, cpu.num_logical_cores)
    print(cpu.current_clock_speed_mhz())

memory = Memory()
print(memory.total_bytes(), memory.free_bytes(), memory.available_bytes())

print(read_os().name)

for battery in get_all_batteries():
    print(battery.vendor(), battery.capacity(), battery.charging())

for disk in get_all_disks():
    print(disk.model, disk.size_bytes)

print(read_mainboard().vendor)
```

A value the system does not expose is reported as `"<unknown>"` or `-1`.

### Modules

- `hwprobe.cpu`: `get_all_cpus` and `parse_cpuinfo` build one `CPU` per
  physical socket from `/proc/cpuinfo`, with maximum and base clock speeds
  from cpufreq. `CPU.current_clock_speed_mhz`, `CPU.current_utilisation`,
  `CPU.thread_utilisation` and `CPU.threads_utilisation` read live values;
  the first utilisation call on a `CPU` waits `warmup` seconds (1.0 by
  default) so that there is a time span to measure over.
- `hwprobe.memory`: `Memory`, `parse_meminfo` and `read_meminfo` read
  `/proc/meminfo`, falling back to `os.sysconf` when total or available
  memory is missing.
- `hwprobe.os_info`: `read_os` returns an `OS` with name and version from
  `/etc/os-release`, the kernel release, word size and byte order.
- `hwprobe.battery`: `get_all_batteries` returns a `Battery` for each
  `BAT0`, `BAT1`, ... under `/sys/class/power_supply`.
- `hwprobe.disk`: `get_all_disks` lists whole disks under `/sys/class/block`,
  skipping partitions and devices with no vendor, model or serial number.
- `hwprobe.mainboard`: `read_mainboard` and `get_dmi_by_name` read the DMI
  board attributes.
- `hwprobe.sysfs` and `hwprobe.stringutils` hold the file and string helpers
  the readers share, including `get_jiffies` for `/proc/stat`.

`get_all_cpus`, `get_all_batteries`, `get_all_disks`, `read_mainboard` and
`get_dmi_by_name` take a `root` argument, so a copy of a sysfs/procfs tree can
be inspected in place of the live system. `Memory` and `read_meminfo` take the
path of a meminfo file, and `read_os` the paths of the os-release file and of
the 64-bit loader.

## What it does not do

`hwprobe` is a library only: it installs no command and has no function that
prints a complete hardware report. It does not detect graphics cards and does
not read PCI ID databases.

## Tests

```
pip install ".[test]"
pytest
```