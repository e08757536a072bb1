"""commitchain CLI entry point.

Orchestrator for the commitchain command-line interface. Registers all
command modules and provides the main entry point.

Execution Context:
    CLI application - run via `python -m commitchain_cli.main` or `commitchain` command

Dependencies:
    - click: CLI framework
    - commitchain_core: Core library
    - commitchain_cli.settings: .env and environment settings

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

import logging
import sys

import click

from commitchain_cli import __version__
from commitchain_cli.commands.run import run
from commitchain_cli.commands.shell import shell
from commitchain_cli.settings import load_settings


# ---- CLI Group ----------------------------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="commitchain")
def cli() -> None:
    """commitchain - In-memory linear version control.

    Create repositories, commit, inspect history, drop commits and
    synchronize two repositories in timestamp order.
    """
    try:
        settings = load_settings()
    except RuntimeError as config_error:
        raise click.ClickException(str(config_error)) from config_error

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# ---- Register Commands --------------------------------------------------------------------------------------


cli.add_command(shell)
cli.add_command(run)


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for commitchain CLI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        cli()
        return 0
    except Exception as cli_error:
        click.echo(f"Error: {cli_error}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
