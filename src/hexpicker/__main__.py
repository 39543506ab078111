"""Allow `python -m hexpicker`."""

from hexpicker.cli.main import cli

if __name__ == "__main__":
    cli()
