"""Determine the number of possible CPUs on a Linux host."""

from .cpus import find_possible_cpus, get_cpus_nproc, parse_cpus, parse_cpus_from_file, resolve_possible_cpus
from .exceptions import (
    CpuFileReadError,
    CpuSpecError,
    CpuSpecFormatError,
    CpuSpecRangeError,
    NprocError,
    NprocExecutionError,
    NprocOutputError,
    PossibleCpusError,
)
from .models.config import ResolverConfig
from .models.cpus import CpuSource, PossibleCpus

__all__ = [
    "CpuFileReadError",
    "CpuSource",
    "CpuSpecError",
    "CpuSpecFormatError",
    "CpuSpecRangeError",
    "NprocError",
    "NprocExecutionError",
    "NprocOutputError",
    "PossibleCpus",
    "PossibleCpusError",
    "ResolverConfig",
    "find_possible_cpus",
    "get_cpus_nproc",
    "parse_cpus",
    "parse_cpus_from_file",
    "resolve_possible_cpus",
]
