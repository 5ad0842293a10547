"""Command for parsing a CPU bitmap list string."""

import json
import logging
import sys

import click

from ..cpus import parse_cpus
from ..exceptions import CpuSpecError
from .common import output_json

log = logging.getLogger(__name__)


@click.command()
@click.argument("spec")
@output_json
def parse(spec: str, output_json: bool):
    """
    Print the number of CPUs described by SPEC, e.g. '0-7'.

    Use '-' to read SPEC from stdin. Only a single range starting at CPU 0 is accepted.
    """
    if spec == "-":
        spec = click.get_text_stream("stdin").read()

    try:
        n = parse_cpus(spec)
    except CpuSpecError as e:
        log.error(str(e))
        sys.exit(1)

    click.echo(json.dumps(n) if output_json else str(n))
