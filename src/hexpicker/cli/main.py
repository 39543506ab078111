"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from hexpicker import __version__
from hexpicker.exceptions import ErrorContext, HexPickerError, format_error_for_display
from hexpicker.models import AppConfig, Color, OutputFormat, Theme

from .commands import config, formats

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".hexpicker" / "logs"
DEBUG_LOG_NAME = "hexpicker-debug.log"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log records go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / DEBUG_LOG_NAME
    return DEFAULT_LOG_DIR / "hexpicker.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    The TUI owns the terminal, so records only go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        The log file path
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for a custom log file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def _validate_color(ctx, param, value: Optional[str]) -> Optional[str]:
    """Click callback: accept '#rrggbb' and normalize it to lowercase."""
    if value is None:
        return None
    try:
        return Color.from_hex(value.strip()).to_hex()
    except HexPickerError as e:
        raise click.BadParameter(e.get_full_message()) from e


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="hexpicker")
@click.option(
    '--color',
    '-c',
    type=str,
    default=None,
    callback=_validate_color,
    help="Initial color as '#rrggbb' (default: from config, else #000000)"
)
@click.option(
    '--theme',
    type=click.Choice([t.value for t in Theme], case_sensitive=False),
    default=None,
    help='Start-up theme (default: from config)'
)
@click.option(
    '--output',
    '-o',
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help='Start-up output format (default: from config)'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.hexpicker/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help=f'Enable debug mode (DEBUG level, logs to ./{DEBUG_LOG_NAME})'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    color: Optional[str],
    theme: Optional[str],
    output: Optional[str],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Hex Picker - pick a color with the mouse, copy it as CSS or literals.

    \b
    Drag on the square to pick saturation and value, drag on the strip
    to pick the hue. Click a row's copy button to put its text on the
    clipboard, or paste a hex code into the input at the bottom.

    \b
    Keys:
      t        toggle dark/light theme
      o        switch between CSS and literal output
      esc, q   close

    \b
    Examples:
      # Start with the saved settings
      hexpicker

      # Start from a color, with literal output
      hexpicker --color '#cc85c5' --output literal

      # Print the text for a color without opening the picker
      hexpicker formats '#cc85c5'

      # Enable debug logging
      hexpicker --debug
    """
    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports to keep subcommands free of the TUI stack
    from hexpicker.tui import HexPickerApp

    log_path = setup_logging(verbose, debug, log_file, log_level)
    logger.info("Starting Hex Picker")

    try:
        with ErrorContext("load configuration"):
            config_obj = AppConfig.load_or_default(config_file)

        overrides = {}
        if color is not None:
            overrides["initial_color"] = color
        if theme is not None:
            overrides["theme"] = theme.lower()
        if output is not None:
            overrides["output"] = output.lower()
        if overrides:
            # Command line overrides apply to this session only
            config_obj = AppConfig.model_validate({**config_obj.model_dump(), **overrides})

        HexPickerApp(config=config_obj).run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "="*70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("="*70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        click.echo("For logging options, run: hexpicker --help", err=True)
        sys.exit(1)


# Register utility commands
cli.add_command(formats)
cli.add_command(config)

if __name__ == "__main__":
    cli()
