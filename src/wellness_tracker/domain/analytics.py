"""Domain models for weekly analytics."""

from dataclasses import dataclass
from enum import Enum


class Metric(str, Enum):
    """Metrics with a daily goal and weekly history."""

    WATER = "water"
    STEPS = "steps"
    SLEEP = "sleep"


@dataclass(frozen=True)
class DayValue:
    """A metric value for one calendar day."""

    date: str
    value: float
    day: str


@dataclass(frozen=True)
class WeeklySummary:
    """Aggregates over a seven day window."""

    metric: Metric
    days: list[DayValue]
    average: float
    best: float
    goals_met: int
    completion_percent: float
