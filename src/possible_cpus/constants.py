"""Constants for locating the possible-CPU information on a Linux host."""

from pathlib import Path

PACKAGE_ROOT = "possible_cpus"

# Written by the kernel with bitmap_list_string(), e.g. "0-7\n"
POSSIBLE_CPUS_FILE = Path("/sys/devices/system/cpu/possible")

# Prints the number of installed processors, including offline ones
NPROC_COMMAND = ("nproc", "--all")
