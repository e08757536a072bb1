"""Command session for the commitchain CLI.

Holds the named repositories created during one CLI run and turns a
textual command line into calls on the core Repository API.

Execution Context:
    CLI support module - imported by shell and run commands

Dependencies:
    - commitchain_core: Repository management

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Callable

from commitchain_core.config import get_settings
from commitchain_core.merge import format_sync_summary
from commitchain_core.models import Commit
from commitchain_core.models import CommitIdGenerator
from commitchain_core.repository import Repository

logger = logging.getLogger(__name__)


HELP_TEXT = """Commands:
  create <name>                 Create an empty repository
  head <name>                   Show the id of the head commit
  size <name>                   Show the number of commits
  history <name> [n]            Show the n most recent commits
  contains <name> <id>          Check whether a commit is in the repository
  commit <name> [message...]    Record a new commit
  drop <name> <id>              Remove a commit
  synchronize <name> <other>    Move all commits of <other> into <name>
  repos                         List every repository
  help                          Show this help
  quit                          Leave the session"""


# ---- Exceptions and Results ---------------------------------------------------------------------------------


class SessionError(Exception):
    """Raised when a session command is malformed or names an unknown repository."""


@dataclass
class CommandOutcome:
    """Result of one session command.

    Attributes:
        text: Text to show the user (may be empty).
        mutated: Whether any repository changed.
        quit: Whether the session should end.
        commits: Commits to render as a log table, newest first.
    """

    text: str = ""
    mutated: bool = False
    quit: bool = False
    commits: list[Commit] = field(default_factory=list)


# ---- Session Class ------------------------------------------------------------------------------------------


class Session:
    """Named repositories plus command dispatch.

    Attributes:
        repositories: Repositories keyed by name, in creation order.
        generator: Id and clock source shared by every repository of the session.
    """

    def __init__(
            self,
            generator: CommitIdGenerator | None = None,
    ) -> None:
        self.repositories: dict[str, Repository] = {}
        self.generator = generator
        self._handlers: dict[str, Callable[[list[str]], CommandOutcome]] = {
            "create": self._create,
            "head": self._head,
            "size": self._size,
            "history": self._history,
            "contains": self._contains,
            "commit": self._commit,
            "drop": self._drop,
            "synchronize": self._synchronize,
            "repos": self._repos,
            "help": self._help,
            "quit": self._quit,
        }

    # ---- Dispatch -------------------------------------------------------------------------------------------

    def execute(
            self,
            line: str,
    ) -> CommandOutcome:
        """Run one command line.

        Args:
            line: Raw command text, e.g. "commit main fix typo".

        Returns:
            CommandOutcome for the command (empty for blank lines).

        Raises:
            SessionError: If the command is unknown or malformed.
            InvalidArgumentError: If the repository rejects an argument.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return CommandOutcome()

        verb = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        handler = self._handlers.get(verb)
        if handler is None:
            msg = f"Unknown command '{parts[0]}'. Type 'help' for a list of commands."
            raise SessionError(msg)

        logger.debug(f"Executing {verb} {rest!r}")
        if verb == "commit":
            # The message keeps its internal spacing
            args = rest.split(maxsplit=1)
        else:
            args = rest.split()
        return handler(args)

    def get_repository(
            self,
            name: str,
    ) -> Repository:
        """Look up a repository by name.

        Raises:
            SessionError: If no repository has that name.
        """
        try:
            return self.repositories[name]
        except KeyError:
            msg = f"Repository '{name}' does not exist"
            raise SessionError(msg) from None

    def describe_all(
            self,
    ) -> str:
        """Describe every repository, one per line."""
        if not self.repositories:
            return "No repositories"
        return "\n".join(repo.describe() for repo in self.repositories.values())

    # ---- Helpers --------------------------------------------------------------------------------------------

    @staticmethod
    def _require(
            args: list[str],
            count: int,
            usage: str,
    ) -> None:
        if len(args) < count:
            msg = f"Usage: {usage}"
            raise SessionError(msg)

    @staticmethod
    def _parse_count(
            value: str,
    ) -> int:
        try:
            return int(value)
        except ValueError:
            msg = f"Expected an integer, got '{value}'"
            raise SessionError(msg) from None

    # ---- Handlers -------------------------------------------------------------------------------------------

    def _create(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 1, "create <name>")
        name = args[0]
        if name in self.repositories:
            msg = f"Repository '{name}' already exists"
            raise SessionError(msg)
        self.repositories[name] = Repository(name, generator=self.generator)
        return CommandOutcome(f"Created repository {name}", mutated=True)

    def _head(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 1, "head <name>")
        repo = self.get_repository(args[0])
        head_id = repo.current_head_id()
        if head_id is None:
            return CommandOutcome(f"{repo.name} has no commits")
        return CommandOutcome(f"{repo.name} head: {head_id}")

    def _size(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 1, "size <name>")
        repo = self.get_repository(args[0])
        return CommandOutcome(f"{repo.name} has {repo.size()} commit(s)")

    def _history(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 1, "history <name> [n]")
        repo = self.get_repository(args[0])
        count = self._parse_count(args[1]) if len(args) > 1 else get_settings().default_history
        entries = repo.log_entries(count)
        if not entries:
            return CommandOutcome(f"{repo.name} has no commits")
        return CommandOutcome(
            f"History of {repo.name} ({len(entries)} of {repo.size()} commit(s))",
            commits=entries,
        )

    def _contains(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 2, "contains <name> <id>")
        repo = self.get_repository(args[0])
        if repo.contains(args[1]):
            return CommandOutcome(f"Commit {args[1]} is in {repo.name}")
        return CommandOutcome(f"Commit {args[1]} is not in {repo.name}")

    def _commit(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 1, "commit <name> [message...]")
        repo = self.get_repository(args[0])
        message = args[1] if len(args) > 1 else ""
        commit_id = repo.commit(message)
        return CommandOutcome(f"New commit: {commit_id}", mutated=True)

    def _drop(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 2, "drop <name> <id>")
        repo = self.get_repository(args[0])
        if repo.drop(args[1]):
            return CommandOutcome(f"Dropped commit {args[1]} from {repo.name}", mutated=True)
        return CommandOutcome(f"No commit {args[1]} in {repo.name}")

    def _synchronize(
            self,
            args: list[str],
    ) -> CommandOutcome:
        self._require(args, 2, "synchronize <name> <other>")
        repo = self.get_repository(args[0])
        other = self.get_repository(args[1])
        result = repo.synchronize(other)
        return CommandOutcome(format_sync_summary(result), mutated=result.changed)

    def _repos(
            self,
            args: list[str],
    ) -> CommandOutcome:
        return CommandOutcome(self.describe_all())

    def _help(
            self,
            args: list[str],
    ) -> CommandOutcome:
        return CommandOutcome(HELP_TEXT)

    def _quit(
            self,
            args: list[str],
    ) -> CommandOutcome:
        return CommandOutcome("Goodbye!", quit=True)
