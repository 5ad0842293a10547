"""Command for determining the number of possible CPUs."""

import json
import logging
import sys
from pathlib import Path

import click
import pydantic
import rich.console
import rich.table

from ..cpus import resolve_possible_cpus
from ..exceptions import PossibleCpusError
from ..models.cpus import PossibleCpus
from ..utils.config import load_resolver_config
from .common import config_file, config_files_or_default, output_json, show_details

log = logging.getLogger(__name__)


@click.command()
@config_file
@click.option(
    "--possible-file",
    metavar="PATH",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read the possible-CPU bitmap list from this file instead of the configured one.",
)
@output_json
@show_details
def count(config_files, possible_file, output_json, show_details):
    """
    Print the number of possible CPUs.

    Reads /sys/devices/system/cpu/possible, or runs 'nproc --all' if that file does not exist.
    """
    try:
        config = load_resolver_config(config_files_or_default(config_files))
        if possible_file is not None:
            config.possible_cpus_file = possible_file
    except (RuntimeError, pydantic.ValidationError) as e:
        log.error(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        result = resolve_possible_cpus(config)
    except PossibleCpusError as e:
        log.error(f"Unable to determine the number of possible CPUs: {e}")
        sys.exit(1)

    if not show_details:
        click.echo(json.dumps(result.count) if output_json else str(result.count))
    elif output_json:
        click.echo(result.model_dump_json())
    else:
        _print_rich_table(result)


def _print_rich_table(result: PossibleCpus):
    console = rich.console.Console()
    table = rich.table.Table()
    table.add_column("Possible CPUs", no_wrap=True, justify="right")
    table.add_column("Source", no_wrap=True)
    table.add_column("Origin", overflow="fold")
    table.add_row(str(result.count), result.source.value, result.origin)
    console.print(table)
