"""commitchain run command.

Executes session commands from a script file.

Execution Context:
    CLI command - invoked via `commitchain run SCRIPT`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - commitchain_cli.session: Command dispatch

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from commitchain_cli.commands.utils import run_line
from commitchain_cli.session import Session

console = Console()


# ---- Run Command --------------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "script",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--echo/--no-echo",
    default=True,
    help="Print each command before its output.",
)
def run(
        script: Path,
        echo: bool,
) -> None:
    """Run session commands from a file.

    One command per line. Blank lines and lines starting with '#' are
    skipped. Execution stops at 'quit' or the end of the file.

    Examples:
        commitchain run demo.txt
        commitchain run demo.txt --no-echo
    """
    try:
        lines = script.read_text(encoding="utf-8").splitlines()
    except OSError as read_error:
        msg = f"Run failed: cannot read {script}: {read_error}"
        raise click.ClickException(msg) from read_error

    session = Session()
    try:
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if echo:
                console.print(f"[dim]> {escape(stripped)}[/dim]")
            if run_line(console, session, stripped):
                break
    except Exception as run_error:
        msg = f"Run failed: {run_error}"
        raise click.ClickException(msg) from run_error
