from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import NPROC_COMMAND, POSSIBLE_CPUS_FILE

ExpandedPath = Annotated[Path, AfterValidator(lambda v: v.expanduser())]


class StrictBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid", validate_assignment=True, use_enum_values=True, env_nested_delimiter="__"
    )


class ResolverConfig(StrictBaseSettings):
    model_config = SettingsConfigDict(env_prefix="possible_cpus_")

    possible_cpus_file: ExpandedPath = POSSIBLE_CPUS_FILE
    """
    Path to the kernel's possible-CPU bitmap list.
    Only a single range starting at CPU 0 is supported.
    """

    nproc_command: list[str] = list(NPROC_COMMAND)
    """
    Command used when the possible-CPU file does not exist.
    It must print a single positive integer to stdout.
    """

    @field_validator("nproc_command")
    @classmethod
    def check_nproc_command(cls, v):
        if not v:
            raise ValueError("nproc_command must not be empty")
        return v
