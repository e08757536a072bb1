"""In-memory repository management for commitchain.

A Repository owns a most-recent-first chain of commits reachable from
its head. It supports committing, inspecting, dropping single commits
and absorbing another repository's history in timestamp order.

Execution Context:
    Library module - imported by the CLI session

Dependencies:
    - commitchain_core.models: Commit model
    - commitchain_core.merge: Chain merge

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

import logging
from typing import Iterator

from commitchain_core.merge import SyncResult
from commitchain_core.merge import merge_chains
from commitchain_core.merge import walk_chain
from commitchain_core.models import Commit
from commitchain_core.models import CommitIdGenerator

logger = logging.getLogger(__name__)


# ---- Exceptions ---------------------------------------------------------------------------------------------


class InvalidArgumentError(ValueError):
    """Raised when a repository operation is called with an invalid argument."""


# ---- Repository Class ---------------------------------------------------------------------------------------


class Repository:
    """Named, linear, most-recent-first history of commits.

    Attributes:
        name: Repository name, fixed at construction.
        head: Most recent commit, or None when the repository is empty.
        generator: Id and clock source for new commits (None uses the default).
    """

    def __init__(
            self,
            name: str | None,
            generator: CommitIdGenerator | None = None,
    ) -> None:
        """Create an empty repository.

        Args:
            name: Repository name.
            generator: Optional id and clock source for commits made here.

        Raises:
            InvalidArgumentError: If name is empty or None.
        """
        if not name:
            logger.debug("Rejected repository with empty name")
            msg = "Repository name must be a non-empty string"
            raise InvalidArgumentError(msg)
        self.name = name
        self.head: Commit | None = None
        self.generator = generator

    # ---- Inspection -----------------------------------------------------------------------------------------

    def iter_commits(
            self,
    ) -> Iterator[Commit]:
        """Iterate commits from head to the oldest."""
        return walk_chain(self.head)

    def __iter__(
            self,
    ) -> Iterator[Commit]:
        return self.iter_commits()

    def current_head_id(
            self,
    ) -> str | None:
        """Return the id of the head commit, or None if there are no commits."""
        if self.head is None:
            return None
        return self.head.id

    def size(
            self,
    ) -> int:
        """Count the commits reachable from head."""
        return sum(1 for _ in self.iter_commits())

    def __len__(
            self,
    ) -> int:
        return self.size()

    def describe(
            self,
    ) -> str:
        """Describe the repository and its current head.

        Returns:
            "<name> - No commits" or "<name> - Current head: <commit>".
        """
        if self.head is None:
            return f"{self.name} - No commits"
        return f"{self.name} - Current head: {self.head.describe()}"

    def __str__(
            self,
    ) -> str:
        return self.describe()

    def __repr__(
            self,
    ) -> str:
        return f"Repository(name={self.name!r}, head={self.current_head_id()!r})"

    def contains(
            self,
            target_id: str,
    ) -> bool:
        """Check whether a commit with the given id is in the chain."""
        return any(commit.id == target_id for commit in self.iter_commits())

    def __contains__(
            self,
            target_id: object,
    ) -> bool:
        return self.contains(target_id)

    def log_entries(
            self,
            n: int,
    ) -> list[Commit]:
        """Return the n most recent commits, newest first.

        Args:
            n: Number of commits wanted. Clamped to the repository size.

        Returns:
            List of at most n commits.

        Raises:
            InvalidArgumentError: If n is not positive.
        """
        if n <= 0:
            logger.debug(f"Rejected history request for {n} commits on {self.name}")
            msg = f"History count must be positive, got {n}"
            raise InvalidArgumentError(msg)

        entries = []
        for commit in self.iter_commits():
            if len(entries) == n:
                break
            entries.append(commit)
        return entries

    def history(
            self,
            n: int,
    ) -> str:
        """Describe the n most recent commits, one per line, newest first.

        Args:
            n: Number of commits wanted. Clamped to the repository size.

        Returns:
            Newline-joined commit descriptions, empty for an empty repository.

        Raises:
            InvalidArgumentError: If n is not positive.
        """
        return "\n".join(commit.describe() for commit in self.log_entries(n))

    # ---- Mutation -------------------------------------------------------------------------------------------

    def commit(
            self,
            message: str,
    ) -> str:
        """Record a new commit on top of the current head.

        Args:
            message: Commit message.

        Returns:
            Id of the new head commit.
        """
        self.head = Commit.create(message, predecessor=self.head, generator=self.generator)
        logger.debug(f"{self.name}: head is now {self.head.id}")
        return self.head.id

    def drop(
            self,
            target_id: str,
    ) -> bool:
        """Remove the commit with the given id, keeping the rest of the chain.

        The removed commit's successor is relinked to its predecessor.
        Dropping the head moves head to its predecessor.

        Args:
            target_id: Id of the commit to remove.

        Returns:
            True if a commit was removed, False if no commit matched.
        """
        if self.head is None:
            return False

        if self.head.id == target_id:
            self.head = self.head.predecessor
            logger.debug(f"{self.name}: dropped head {target_id}")
            return True

        current = self.head
        while current.predecessor is not None:
            if current.predecessor.id == target_id:
                current.predecessor = current.predecessor.predecessor
                logger.debug(f"{self.name}: dropped commit {target_id}")
                return True
            current = current.predecessor

        return False

    def synchronize(
            self,
            other: Repository,
    ) -> SyncResult:
        """Move every commit of another repository into this one.

        The two histories are interleaved by timestamp, newest first. On
        equal timestamps this repository's commit stays ahead. The other
        repository is left empty.

        Args:
            other: Repository to drain.

        Returns:
            SyncResult describing the transfer.
        """
        result = SyncResult(target=self.name, source=other.name)
        if other is self:
            result.size = self.size()
            return result

        result.received = other.size()
        self.head = merge_chains(self.head, other.head)
        other.head = None
        result.size = self.size()

        logger.debug(
            f"Synchronized {result.received} commit(s) from {other.name} into {self.name}"
        )
        return result
