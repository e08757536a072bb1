"""Utility functions for commitchain CLI commands.

Execution Context:
    CLI command utilities - imported by command modules

Dependencies:
    - rich: Terminal output and tables

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from commitchain_cli.session import CommandOutcome
from commitchain_cli.session import Session
from commitchain_cli.session import SessionError
from commitchain_core.models import Commit
from commitchain_core.models import format_timestamp
from commitchain_core.repository import InvalidArgumentError


def build_log_table(
        commits: list[Commit],
        head_id: str | None = None,
) -> Table:
    """Build a table of commits, newest first.

    Args:
        commits: Commits to show.
        head_id: Id of the repository head, marked in the table.

    Returns:
        Rich Table with id, date and message columns.
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    table.add_column("Message")

    for commit in commits:
        commit_id = f"{commit.id} *" if commit.id == head_id else commit.id
        table.add_row(commit_id, format_timestamp(commit.timestamp), escape(commit.message))

    return table


def print_outcome(
        console: Console,
        session: Session,
        outcome: CommandOutcome,
) -> None:
    """Print a command outcome, followed by every repository after a change.

    Args:
        console: Console to write to.
        session: Session the command ran in.
        outcome: Result of the command.
    """
    if outcome.text:
        console.print(escape(outcome.text))

    if outcome.commits:
        console.print(build_log_table(outcome.commits, head_id=outcome.commits[0].id))

    if outcome.mutated:
        console.print()
        console.print("[bold]Current repositories:[/bold]")
        for line in session.describe_all().splitlines():
            console.print(f"  {escape(line)}")


def run_line(
        console: Console,
        session: Session,
        line: str,
) -> bool:
    """Execute one command line and print its result.

    User errors are printed and do not stop the session.

    Args:
        console: Console to write to.
        session: Session holding the repositories.
        line: Raw command text.

    Returns:
        True if the session should end.
    """
    try:
        outcome = session.execute(line)
    except SessionError as session_error:
        console.print(f"[red]Error:[/red] {escape(str(session_error))}")
        return False
    except InvalidArgumentError as argument_error:
        console.print(f"[red]Invalid argument:[/red] {escape(str(argument_error))}")
        return False

    print_outcome(console, session, outcome)
    return outcome.quit
