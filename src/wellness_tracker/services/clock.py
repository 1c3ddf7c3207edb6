"""Clock abstraction for local time."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> datetime:
        """Return the current timezone-aware local time."""

    def today(self) -> date:
        """Return the current local calendar day."""


@dataclass
class SystemClock(Clock):
    """Clock backed by the system time in a given timezone."""

    timezone_name: str | None = None

    def now(self) -> datetime:
        """Return now in the configured timezone, or system local time."""
        if self.timezone_name:
            return datetime.now(tz=ZoneInfo(self.timezone_name))
        return datetime.now().astimezone()

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return self.now().date()
