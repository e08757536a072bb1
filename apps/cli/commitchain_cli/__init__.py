"""commitchain CLI Application.

Command-line interface for working with in-memory commitchain
repositories.

Execution Context:
    CLI application - invoked from terminal

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - commitchain_core: Core library

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

__version__ = "0.1.0"
