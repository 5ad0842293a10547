import logging
from copy import deepcopy
from os import PathLike
from pathlib import Path

import yaml

from ..models.config import ResolverConfig

__all__ = [
    "load_resolver_config",
    "merge_config_dicts",
    "read_and_merge_config_files",
]

log = logging.getLogger(__name__)


def _merge_into(target: dict, source: dict, path: list[str]) -> dict:
    for key, new_value in source.items():
        key_path = [*path, str(key)]
        if key not in target or target[key] is None:
            target[key] = deepcopy(new_value)
        elif new_value is None:
            continue
        elif isinstance(target[key], dict) and isinstance(new_value, dict):
            _merge_into(target[key], new_value, key_path)
        elif type(target[key]) is type(new_value):
            log.warning(f"Overriding configuration key {'.'.join(key_path)} with value: {new_value}")
            target[key] = deepcopy(new_value)
        else:
            raise ValueError(f"Conflict at {'.'.join(key_path)}: {target[key]!r} != {new_value!r}")
    return target


def merge_config_dicts(a: dict, b: dict) -> dict:
    """Merge configuration dictionary ``b`` into a copy of ``a``.

    Nested dictionaries are merged recursively, values of ``b`` replace values of the
    same type in ``a`` and ``None`` never replaces a value.

    :raises ValueError: If a key holds values of different types in ``a`` and ``b``.
    """
    return _merge_into(deepcopy(a), b, path=[])


def read_and_merge_config_files(config_files: list[str | PathLike]) -> dict:
    """
    Read and merge YAML configuration files, later files taking precedence.

    :raises RuntimeError: If one of the files cannot be read or merged.
    """
    configuration: dict[str, object] = {}
    for config_file in config_files:
        try:
            with open(config_file) as fd:
                content = yaml.safe_load(fd) or {}
            if not isinstance(content, dict):
                raise ValueError(f"expected a mapping, got {type(content).__name__}")
            configuration = merge_config_dicts(configuration, content)
        except Exception as e:
            raise RuntimeError(f"Error reading configuration file: '{config_file}'") from e

    return configuration


def load_resolver_config(config_files: list[str | PathLike]) -> ResolverConfig:
    """Build the resolver configuration from config files and ``POSSIBLE_CPUS_*`` environment variables."""
    config_files = [Path(p) for p in config_files]
    log.debug(f"Loading configuration from: {[str(p) for p in config_files]}")
    return ResolverConfig(**read_and_merge_config_files(config_files))
