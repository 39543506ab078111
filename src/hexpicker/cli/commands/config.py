"""Config command implementations."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from hexpicker.exceptions import HexPickerError
from hexpicker.models.config import DEFAULT_CONFIG_PATH, AppConfig


@click.group(name="config")
def config():
    """Inspect the configuration file."""
    pass


@config.command(name="show")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
)
@click.option("--field", "-f", type=str, default=None, help="Show a single field")
def show(config_file: Optional[Path], field: Optional[str]):
    """Display the configuration (defaults if the file doesn't exist)."""
    path = config_file or DEFAULT_CONFIG_PATH
    try:
        cfg = AppConfig.load(path) if path.exists() else AppConfig()
    except HexPickerError as e:
        click.echo(f"Error: {e.get_full_message()}", err=True)
        sys.exit(1)

    values = cfg.model_dump(mode="json")
    if field:
        if field not in values:
            raise click.BadParameter(
                f"Unknown field '{field}'. Available: {', '.join(values)}", param_hint="--field"
            )
        click.echo(f"{field}: {values[field]}")
        return

    click.echo(f"Configuration ({path}{'' if path.exists() else ', not created yet'}):")
    click.echo(json.dumps(values, indent=2))


@config.command(name="path")
def path():
    """Print the default config file location."""
    click.echo(str(DEFAULT_CONFIG_PATH))
