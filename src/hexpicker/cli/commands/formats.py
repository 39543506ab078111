"""Print the copyable text for a color."""

import click

from hexpicker.exceptions import HexPickerError
from hexpicker.formatting import output_lines
from hexpicker.models import Color, OutputFormat


@click.command(name="formats")
@click.argument("color")
@click.option(
    "--output",
    "-o",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.CSS.value,
    help="Output format (default: css)",
)
@click.option("--copied", is_flag=True, help="Print the clipboard text instead of the aligned display text")
def formats(color: str, output: str, copied: bool):
    """Show hsl/hsv/rgb/hex text for COLOR (a '#rrggbb' hex string)."""
    try:
        parsed = Color.from_hex(color.strip())
    except HexPickerError as e:
        raise click.BadParameter(e.get_full_message(), param_hint="COLOR") from e

    for line in output_lines(parsed, OutputFormat(output.lower())):
        click.echo(line.copied if copied else line.shown)
