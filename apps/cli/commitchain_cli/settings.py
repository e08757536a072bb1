"""Settings resolution for the commitchain CLI.

Merges a .env file with the process environment and installs the
result as the core settings.

Execution Context:
    CLI support module - imported by main.py

Dependencies:
    - python-dotenv: Read .env files
    - commitchain_core.config: Settings model

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values

from commitchain_core.config import DEFAULT_HISTORY
from commitchain_core.config import DEFAULT_LOG_LEVEL
from commitchain_core.config import DEFAULT_TIMESTAMP_FORMAT
from commitchain_core.config import Settings
from commitchain_core.config import configure


# ---- Constants ----------------------------------------------------------------------------------------------


ENV_TIMESTAMP_FORMAT = "COMMITCHAIN_TIMESTAMP_FORMAT"
ENV_LOG_LEVEL = "COMMITCHAIN_LOG_LEVEL"
ENV_DEFAULT_HISTORY = "COMMITCHAIN_DEFAULT_HISTORY"

ENV_FILE_NAME = ".env"
ENV_SEARCH_DEPTH = 3


# ---- .env Discovery -----------------------------------------------------------------------------------------


def find_env_file(
        start: Path | None = None,
) -> Path | None:
    """Locate the nearest .env file.

    Looks in ``start`` (default: the working directory) and then in up to
    three of its parents.

    Args:
        start: Directory to start from.

    Returns:
        Path to the first .env file found, or None.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in [directory, *directory.parents][:ENV_SEARCH_DEPTH + 1]:
        candidate = candidate_dir / ENV_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def read_environment(
        env_path: Path | None = None,
) -> dict[str, str]:
    """Combine .env values with the process environment.

    The process environment wins over the file, and os.environ itself
    is left untouched.

    Args:
        env_path: Explicit .env file. When omitted, find_env_file() is used.

    Returns:
        Merged variable mapping.
    """
    path = env_path if env_path is not None else find_env_file()
    values: dict[str, str] = {}
    if path is not None and path.is_file():
        values.update({key: value for key, value in dotenv_values(path).items() if value is not None})
    values.update(os.environ)
    return values


# ---- Settings Resolution ------------------------------------------------------------------------------------


def settings_from_mapping(
        environ: Mapping[str, str],
) -> Settings:
    """Build settings from environment-style variables.

    Args:
        environ: Variables to read.

    Returns:
        Settings instance.

    Raises:
        RuntimeError: If COMMITCHAIN_DEFAULT_HISTORY is not a positive integer.
    """
    raw_history = environ.get(ENV_DEFAULT_HISTORY)
    default_history = DEFAULT_HISTORY
    if raw_history:
        try:
            default_history = int(raw_history)
        except ValueError as parse_error:
            msg = f"{ENV_DEFAULT_HISTORY} must be an integer, got {raw_history!r}"
            raise RuntimeError(msg) from parse_error
        if default_history <= 0:
            msg = f"{ENV_DEFAULT_HISTORY} must be positive, got {default_history}"
            raise RuntimeError(msg)

    return Settings(
        timestamp_format=environ.get(ENV_TIMESTAMP_FORMAT) or DEFAULT_TIMESTAMP_FORMAT,
        log_level=(environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
        default_history=default_history,
    )


def load_settings(
        env_path: Path | None = None,
) -> Settings:
    """Resolve settings from .env and environment and install them in the core.

    Args:
        env_path: Explicit .env file (optional).

    Returns:
        The installed settings.

    Raises:
        RuntimeError: If a variable holds an invalid value.
    """
    return configure(settings_from_mapping(read_environment(env_path)))
