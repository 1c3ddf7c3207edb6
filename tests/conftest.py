"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

import pytest

from wellness_tracker.services.clock import Clock
from wellness_tracker.services.storage import InMemoryKeyValueStorage, KeyValueStorage
from wellness_tracker.services.store import HealthStore

NOW = datetime(2024, 3, 15, 9, 30, tzinfo=UTC)


@dataclass
class FixedClock(Clock):
    """Clock frozen at a settable instant."""

    current: datetime = NOW

    def now(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()

    def advance(self, days: int = 0, hours: int = 0) -> None:
        self.current = self.current + timedelta(days=days, hours=hours)


@dataclass
class FailingStorage(KeyValueStorage):
    """Storage whose reads and writes always fail."""

    attempts: list[str] = field(default_factory=list)

    async def get_item(self, key: str) -> str | None:
        self.attempts.append(f"get:{key}")
        raise RuntimeError("disk unavailable")

    async def set_item(self, key: str, value: str) -> None:
        self.attempts.append(f"set:{key}")
        raise RuntimeError("disk full")


@dataclass
class RecordingStorage(KeyValueStorage):
    """In-memory storage that records every write."""

    items: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    async def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append(value)


@pytest.fixture(autouse=True)
def reset_app_logger():
    logger = logging.getLogger("wellness_tracker")
    yield
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(storage: InMemoryKeyValueStorage, clock: FixedClock) -> HealthStore:
    return HealthStore(storage=storage, clock=clock)
