"""Chronological chain merge for commitchain.

Provides the timestamp-ordered interleave used when one repository
absorbs another's history.

Execution Context:
    Library module - imported by repository

Dependencies:
    - commitchain_core.models: Commit model

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from commitchain_core.models import Commit

logger = logging.getLogger(__name__)


# ---- Data Classes -------------------------------------------------------------------------------------------


@dataclass
class SyncResult:
    """Result of synchronizing one repository into another.

    Attributes:
        target: Name of the repository that received the commits.
        source: Name of the repository that was drained.
        received: Number of commits moved out of the source.
        size: Size of the target after the merge.
    """

    target: str
    source: str
    received: int = 0
    size: int = 0

    @property
    def changed(
            self,
    ) -> bool:
        """Check if any commits were transferred."""
        return self.received > 0


# ---- Chain Functions ----------------------------------------------------------------------------------------


def walk_chain(
        head: Commit | None,
) -> Iterator[Commit]:
    """Yield commits from head following predecessor links."""
    current = head
    while current is not None:
        yield current
        current = current.predecessor


def relink(
        commits: list[Commit],
) -> Commit | None:
    """Chain commits together in list order.

    Each commit's predecessor becomes the next one in the list and the
    last commit's predecessor becomes None.

    Args:
        commits: Commits ordered newest first.

    Returns:
        The first commit (new head), or None for an empty list.
    """
    for newer, older in zip(commits, commits[1:]):
        newer.predecessor = older
    if commits:
        commits[-1].predecessor = None
        return commits[0]
    return None


def merge_chains(
        ours: Commit | None,
        theirs: Commit | None,
) -> Commit | None:
    """Merge two newest-first chains into one newest-first chain.

    Two-pointer interleave over both chains. A commit from ``theirs`` is
    placed ahead of the current commit from ``ours`` only when its
    timestamp is strictly greater, so equal timestamps keep ``ours``
    first. The relative order inside each source chain never changes.
    Nodes are reused and their predecessor links rewritten; no commit is
    copied.

    Args:
        ours: Head of the receiving chain.
        theirs: Head of the chain being absorbed.

    Returns:
        Head of the merged chain.
    """
    if ours is None:
        return theirs
    if theirs is None:
        return ours

    # Collect before relinking, rewriting links mid-walk would corrupt traversal
    ordered: list[Commit] = []
    left = ours
    right = theirs
    while left is not None and right is not None:
        if right.timestamp > left.timestamp:
            ordered.append(right)
            right = right.predecessor
        else:
            ordered.append(left)
            left = left.predecessor

    ordered.extend(walk_chain(left))
    ordered.extend(walk_chain(right))

    logger.debug(f"Merged chains into {len(ordered)} commits")
    return relink(ordered)


# ---- Formatting Functions -----------------------------------------------------------------------------------


def format_sync_summary(
        result: SyncResult,
) -> str:
    """Format synchronize result as human-readable summary.

    Args:
        result: SyncResult object.

    Returns:
        Formatted string summary.
    """
    if not result.changed:
        return f"Nothing to synchronize from {result.source} into {result.target}."

    lines = [
        f"Synchronized {result.source} into {result.target}.",
        f"Received commits: {result.received}",
        f"{result.target} now has {result.size} commit(s); {result.source} is empty.",
    ]
    return "\n".join(lines)
