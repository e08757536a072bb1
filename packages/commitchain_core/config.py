"""Runtime settings for commitchain.

Holds the settings the core consults when rendering commits. The core
never reads files or the environment; a front end resolves settings
and installs them with configure().

Execution Context:
    Library module - imported by models and the CLI

Dependencies:
    - dataclasses: Data class decorators

Metadata:
    Version: 0.1.0
    Author: commitchain Team
"""
from __future__ import annotations

from dataclasses import dataclass


# ---- Constants ----------------------------------------------------------------------------------------------


DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d at %H:%M:%S %Z"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HISTORY = 5


# ---- Settings -----------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class Settings:
    """Resolved commitchain settings.

    Attributes:
        timestamp_format: strftime pattern used when describing commits.
        log_level: Logging level name for the CLI.
        default_history: Commit count shown by the CLI when none is given.
    """

    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL
    default_history: int = DEFAULT_HISTORY


_DEFAULT_SETTINGS = Settings()
_settings: Settings | None = None


def configure(
        settings: Settings,
) -> Settings:
    """Install settings for the rest of the process.

    Args:
        settings: Settings to use from now on.

    Returns:
        The installed settings.
    """
    global _settings
    _settings = settings
    return _settings


def get_settings() -> Settings:
    """Return the installed settings, or the defaults when none were installed."""
    if _settings is None:
        return _DEFAULT_SETTINGS
    return _settings


def reset_settings() -> None:
    """Return to default settings. Primarily for tests."""
    global _settings
    _settings = None
