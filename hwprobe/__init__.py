"""CPU, memory, OS, battery, disk and main board information read from Linux procfs and sysfs."""

__version__ = "0.1.0"