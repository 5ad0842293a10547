"""Command for dumping the configuration."""

import json
import logging

import click

from ..utils.config import read_and_merge_config_files
from .common import config_file, config_files_or_default

log = logging.getLogger(__name__)


@click.command()
@config_file
def dump_config(config_files):
    """
    Dump the merged configuration as read from config files.
    """
    config_files = config_files_or_default(config_files)
    log.info(f"Configuration files to load: {json.dumps([str(p) for p in config_files], indent=2)}")

    config = read_and_merge_config_files(config_files)
    log.info(f"Merged configuration: {json.dumps(config, indent=2)}")

    log.info(
        "Note this only dumps the merged configuration as read from the files. "
        "It does not validate the configuration and ignores any environment variables."
    )
