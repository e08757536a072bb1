"""commitchain shell command.

Interactive loop that creates and manipulates repositories.

Execution Context:
    CLI command - invoked via `commitchain shell`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - commitchain_cli.session: Command dispatch

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

import click
from rich.console import Console

from commitchain_cli.commands.utils import run_line
from commitchain_cli.session import Session

console = Console()


# ---- Shell Command ------------------------------------------------------------------------------------------


@click.command()
def shell() -> None:
    """Start an interactive repository session.

    Repositories live only for the duration of the session. Type
    'help' for the list of commands and 'quit' to leave.

    Examples:
        commitchain shell
    """
    session = Session()
    console.print("[bold]commitchain[/bold] - type 'help' for commands, 'quit' to leave")

    try:
        while True:
            try:
                line = click.prompt("Enter a command", default="", show_default=False)
            except click.Abort:
                # End of input
                break
            if run_line(console, session, line):
                break
    except Exception as shell_error:
        msg = f"Shell failed: {shell_error}"
        raise click.ClickException(msg) from shell_error
