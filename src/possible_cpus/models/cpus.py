from enum import StrEnum

from pydantic import BaseModel, ConfigDict, PositiveInt


class CpuSource(StrEnum):
    """Backend that produced a possible-CPU count."""

    FILE = "file"
    NPROC = "nproc"


class PossibleCpus(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: PositiveInt
    """Number of possible CPUs."""

    source: CpuSource
    """Whether the count was read from the sysfs file or the fallback command."""

    origin: str
    """The file path that was parsed or the command line that was run."""
