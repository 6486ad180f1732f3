"""Command line entry points for fsfind."""

from typer import Typer

from .find import find_files
from ..configuration.cli import config_app


cli = Typer(help="Search a directory tree for file paths matching a pattern")
cli.command("find")(find_files)
cli.add_typer(config_app, name="config")

__all__ = ["cli", "config_app", "find_files"]


if __name__ == "__main__":
    cli()
