"""Shared fixtures: a controllable clock so age decay is testable without sleeping."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from elvis.memory.store import WorkingMemory


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 2, 18, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory(clock: FakeClock) -> WorkingMemory:
    return WorkingMemory(clock=clock)
