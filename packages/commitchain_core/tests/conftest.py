"""Shared test configuration and fixtures for commitchain_core tests.

Provides:
- FakeClock: a steppable clock so commit timestamps are deterministic.
- Automatic reset of the process-wide id generator and settings cache
  so tests do not depend on execution order.
"""
from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone

import pytest

from commitchain_core.config import reset_settings
from commitchain_core.models import CommitIdGenerator
from commitchain_core.models import default_generator

START_TIME = datetime(2026, 1, 30, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock returning start, start + step, start + 2 * step, ..."""

    def __init__(
            self,
            start: datetime = START_TIME,
            step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture(autouse=True)
def clean_state():
    """Reset global counters and configuration around every test."""
    reset_settings()
    default_generator().reset()
    yield
    reset_settings()
    default_generator().reset()


@pytest.fixture
def clock() -> FakeClock:
    """Clock ticking one second per commit."""
    return FakeClock()


@pytest.fixture
def generator(clock: FakeClock) -> CommitIdGenerator:
    """Generator backed by the fake clock."""
    return CommitIdGenerator(clock=clock)


@pytest.fixture
def frozen_generator() -> CommitIdGenerator:
    """Generator whose clock never advances, so every commit ties."""
    return CommitIdGenerator(clock=FakeClock(step=timedelta(0)))
