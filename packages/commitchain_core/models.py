"""Data models for commitchain.

Defines the Commit record and the generator that hands out commit
identifiers and timestamps.

Execution Context:
    Library module - imported by other commitchain_core modules

Dependencies:
    - dataclasses: Data class decorators
    - commitchain_core.config: Timestamp format

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import FrozenInstanceError
from dataclasses import field
from datetime import datetime
from typing import Callable

from commitchain_core.config import get_settings

logger = logging.getLogger(__name__)


# ---- Id Generation ------------------------------------------------------------------------------------------


def _local_now() -> datetime:
    return datetime.now().astimezone()


class CommitIdGenerator:
    """Source of commit identifiers and creation times.

    Identifiers are the decimal strings "0", "1", "2", ... handed out in
    order. The clock is injectable so tests can control timestamps.

    Attributes:
        clock: Callable returning the current timezone-aware datetime.
    """

    def __init__(
            self,
            clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.clock = clock or _local_now
        self._counter = 0

    @property
    def counter(
            self,
    ) -> int:
        """Next identifier that will be issued."""
        return self._counter

    def next_id(
            self,
    ) -> str:
        """Issue the next identifier and advance the counter."""
        commit_id = str(self._counter)
        self._counter += 1
        return commit_id

    def now(
            self,
    ) -> datetime:
        """Current time according to this generator's clock."""
        return self.clock()

    def reset(
            self,
    ) -> None:
        """Restore the counter to its initial value."""
        self._counter = 0


_default_generator = CommitIdGenerator()


def default_generator() -> CommitIdGenerator:
    """Return the process-wide generator used when none is supplied."""
    return _default_generator


# ---- Formatting ---------------------------------------------------------------------------------------------


def format_timestamp(
        timestamp: datetime,
        fmt: str | None = None,
) -> str:
    """Format a commit timestamp for display.

    Args:
        timestamp: Commit creation time.
        fmt: strftime pattern. Defaults to the configured timestamp format.

    Returns:
        Formatted timestamp string.
    """
    return timestamp.strftime(fmt or get_settings().timestamp_format)


# ---- Data Model Classes -------------------------------------------------------------------------------------


_READ_ONLY_FIELDS = frozenset({"id", "message", "timestamp"})


@dataclass
class Commit:
    """One recorded change event in a repository chain.

    Only ``predecessor`` changes after creation, and only when a
    Repository splices the chain. Reassigning ``id``, ``message`` or
    ``timestamp`` raises FrozenInstanceError.

    Attributes:
        id: Unique commit identifier.
        message: Commit message, may be empty.
        timestamp: Creation time.
        predecessor: The chronologically previous commit (None for the oldest).
    """

    id: str
    message: str
    timestamp: datetime
    predecessor: Commit | None = field(default=None, repr=False, compare=False)

    def __setattr__(
            self,
            name: str,
            value: object,
    ) -> None:
        if name in _READ_ONLY_FIELDS and name in self.__dict__:
            msg = f"cannot assign to field '{name}'"
            raise FrozenInstanceError(msg)
        super().__setattr__(name, value)

    @classmethod
    def create(
            cls,
            message: str,
            predecessor: Commit | None = None,
            generator: CommitIdGenerator | None = None,
    ) -> Commit:
        """Create a new commit with a fresh id and the current time.

        Args:
            message: Commit message.
            predecessor: Commit made immediately before this one.
            generator: Id and clock source. Defaults to the process-wide generator.

        Returns:
            New Commit instance.
        """
        generator = generator or default_generator()
        commit = cls(
            id=generator.next_id(),
            message=message,
            timestamp=generator.now(),
            predecessor=predecessor,
        )
        logger.debug(f"Created commit {commit.id} at {commit.timestamp.isoformat()}")
        return commit

    def describe(
            self,
            fmt: str | None = None,
    ) -> str:
        """Describe the commit as "<id> at <timestamp>: <message>".

        Args:
            fmt: Optional strftime pattern overriding the configured one.

        Returns:
            One-line description.
        """
        return f"{self.id} at {format_timestamp(self.timestamp, fmt)}: {self.message}"

    def __str__(
            self,
    ) -> str:
        return self.describe()

    @staticmethod
    def reset_ids(
            generator: CommitIdGenerator | None = None,
    ) -> None:
        """Reset commit ids so the next commit is "0". Primarily for testing."""
        (generator or default_generator()).reset()
