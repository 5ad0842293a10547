"""
Module: cpus

Determine the number of possible CPUs on a Linux host, e.g. to size per-CPU data structures.
"""

import logging
import re
import subprocess
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from .constants import NPROC_COMMAND
from .exceptions import (
    CpuFileReadError,
    CpuSpecError,
    CpuSpecFormatError,
    CpuSpecRangeError,
    NprocExecutionError,
    NprocOutputError,
)
from .models.config import ResolverConfig
from .models.cpus import CpuSource, PossibleCpus

__all__ = [
    "find_possible_cpus",
    "get_cpus_nproc",
    "parse_cpus",
    "parse_cpus_from_file",
    "resolve_possible_cpus",
]

log = logging.getLogger(__name__)

_CPU_RANGE_PATTERN = re.compile(r"([0-9]+)-([0-9]+)\n?")
_NPROC_OUTPUT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_cpus(spec: str) -> int:
    """
    Parse the number of CPUs from a string produced by ``bitmap_list_string()`` in the Linux kernel.

    This is the format of ``/sys/devices/system/cpu/possible``. It is not suitable for
    ``/sys/devices/system/cpu/online`` and friends, since multiple ranges are rejected:
    they can't be unified into a single number.

    :param spec: The bitmap list string, e.g. ``"0-7\\n"``.
    :return: The number of CPUs.
    :raises CpuSpecFormatError: If the string is not a single ``low-high`` range.
    :raises CpuSpecRangeError: If the range does not start at CPU 0.
    """
    if spec.strip("\n") == "0":
        return 1

    match = _CPU_RANGE_PATTERN.fullmatch(spec)
    if match is None:
        raise CpuSpecFormatError(f"invalid format: {spec!r}", spec)

    low, high = int(match.group(1)), int(match.group(2))
    if low != 0:
        raise CpuSpecRangeError(f"CPU spec doesn't start at zero: {spec!r}", spec)

    # cpus are 0-indexed
    return high + 1


def parse_cpus_from_file(path: str | PathLike) -> int:
    """
    Parse a CPU bitmap list from the file at ``path``.

    :raises FileNotFoundError: If the file does not exist.
    :raises NotADirectoryError: If a parent of the path is not a directory, so the file does not exist either.
    :raises CpuFileReadError: If the file exists but cannot be read.
    :raises CpuSpecError: If the contents cannot be parsed.
    """
    path = Path(path)
    try:
        spec = path.read_text(encoding="ascii")
    except (FileNotFoundError, NotADirectoryError):
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise CpuFileReadError(f"can't read {path}: {e}", path) from e

    try:
        return parse_cpus(spec)
    except CpuSpecError as e:
        raise type(e)(f"can't parse {path}: {e}", e.spec) from e


def get_cpus_nproc(command: Sequence[str] = NPROC_COMMAND) -> int:
    """
    Retrieve the number of processors by running ``command`` (``nproc --all`` by default).

    :raises NprocExecutionError: If the command cannot be started or exits with a non-zero status.
    :raises NprocOutputError: If the command does not print a positive integer.
    """
    command = list(command)
    try:
        result = subprocess.run(command, capture_output=True, text=True, check=True)  # noqa: S603
    except subprocess.CalledProcessError as e:
        raise NprocExecutionError(
            f"'{' '.join(command)}' exited with status {e.returncode}: {(e.stderr or '').strip()}",
            command,
            returncode=e.returncode,
            stderr=e.stderr,
        ) from e
    except OSError as e:
        raise NprocExecutionError(f"can't run '{' '.join(command)}': {e}", command) from e

    output = result.stdout
    if _NPROC_OUTPUT_PATTERN.fullmatch(output.strip()) is None:
        raise NprocOutputError(f"'{' '.join(command)}' printed a non-numeric value: {output!r}", command, output)

    count = int(output.strip())

    if count < 1:
        raise NprocOutputError(f"'{' '.join(command)}' reported {count} processors", command, output)

    return count


def resolve_possible_cpus(config: ResolverConfig | None = None) -> PossibleCpus:
    """
    Determine the number of possible CPUs and where the number came from.

    If the possible-CPU file does not exist, the processor-count command is used instead.
    """
    if config is None:
        config = ResolverConfig()

    path = config.possible_cpus_file
    try:
        count = parse_cpus_from_file(path)
    except (FileNotFoundError, NotADirectoryError):
        log.debug(f"'{path}' does not exist, falling back to '{' '.join(config.nproc_command)}'")
    else:
        log.debug(f"Read {count} possible CPUs from '{path}'")
        return PossibleCpus(count=count, source=CpuSource.FILE, origin=str(path))

    count = get_cpus_nproc(config.nproc_command)
    log.debug(f"'{' '.join(config.nproc_command)}' reported {count} processors")
    return PossibleCpus(count=count, source=CpuSource.NPROC, origin=" ".join(config.nproc_command))


def find_possible_cpus(config: ResolverConfig | None = None) -> int:
    """Return the number of possible CPUs on this system."""
    return resolve_possible_cpus(config).count
