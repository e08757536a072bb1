"""Shared fixtures for commitchain CLI tests."""
from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone

import pytest

from commitchain_cli.settings import ENV_DEFAULT_HISTORY
from commitchain_cli.settings import ENV_LOG_LEVEL
from commitchain_cli.settings import ENV_TIMESTAMP_FORMAT
from commitchain_core.config import reset_settings
from commitchain_core.models import CommitIdGenerator
from commitchain_core.models import default_generator


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch):
    """Reset the default id generator and settings cache around every test."""
    for name in (ENV_TIMESTAMP_FORMAT, ENV_LOG_LEVEL, ENV_DEFAULT_HISTORY):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    default_generator().reset()
    yield
    reset_settings()
    default_generator().reset()


@pytest.fixture
def generator() -> CommitIdGenerator:
    """Generator whose clock ticks one second per commit."""
    state = {"now": datetime(2026, 1, 30, 12, 0, 0, tzinfo=timezone.utc)}

    def clock() -> datetime:
        value = state["now"]
        state["now"] = value + timedelta(seconds=1)
        return value

    return CommitIdGenerator(clock=clock)
