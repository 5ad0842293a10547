"""
Common click options for the CLI commands.
"""

from pathlib import Path

import click
import platformdirs

DEFAULT_CONFIG_PATH = Path(platformdirs.user_config_dir("possible-cpus")) / "config.yaml"

# Aliases for path types for click options
# Naming convention: {DIR,FILE}_{Read,Write}_{Exists,Create}
FILE_R_E = click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, resolve_path=True, path_type=Path)

config_file = click.option(
    "--config-file",
    "config_files",
    metavar="PATH",
    type=FILE_R_E,
    multiple=True,
    help=f"Path to config file, can be given multiple times. Defaults to {DEFAULT_CONFIG_PATH} if it exists.",
)

output_json = click.option("--json", "output_json", is_flag=True, help="Output JSON for machine-readability.")

show_details = click.option("--details", "show_details", is_flag=True, help="Show more detailed output.")


def config_files_or_default(config_files: tuple[Path, ...]) -> list[Path]:
    """Return the given config files, or the default config file if none were given and it exists."""
    if config_files:
        return list(config_files)
    return [DEFAULT_CONFIG_PATH] if DEFAULT_CONFIG_PATH.is_file() else []
