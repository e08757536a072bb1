"""commitchain Core Library.

Provides an in-memory, linear version-control model: commits chained
from a repository head, with history inspection, selective removal and
chronological merging of two repositories.

Execution Context:
    Library package - imported by CLI and other applications

Dependencies:
    - dataclasses: Commit and settings records

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

from commitchain_core.merge import SyncResult
from commitchain_core.models import Commit
from commitchain_core.models import CommitIdGenerator
from commitchain_core.repository import InvalidArgumentError
from commitchain_core.repository import Repository

__version__ = "0.1.0"

__all__ = [
    "Commit",
    "CommitIdGenerator",
    "InvalidArgumentError",
    "Repository",
    "SyncResult",
    "__version__",
]
