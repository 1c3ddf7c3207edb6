"""Domain models for the wellness tracker."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Theme(str, Enum):
    """Color theme preference."""

    LIGHT = "light"
    DARK = "dark"


class Units(str, Enum):
    """Measurement system preference."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Frequency(str, Enum):
    """How often a medication is taken."""

    ONCE_DAILY = "Once daily"
    TWICE_DAILY = "Twice daily"
    THREE_TIMES_DAILY = "Three times daily"
    AS_NEEDED = "As needed"


@dataclass(frozen=True)
class DailyGoals:
    """Daily targets for each tracked metric."""

    water: int = 2000
    steps: int = 10000
    sleep: float = 8


@dataclass(frozen=True)
class Preferences:
    """User preferences."""

    notifications: bool = True
    theme: Theme = Theme.LIGHT
    units: Units = Units.METRIC


@dataclass(frozen=True)
class UserProfile:
    """The single user of the app."""

    name: str = "User"
    daily_goals: DailyGoals = field(default_factory=DailyGoals)
    preferences: Preferences = field(default_factory=Preferences)


@dataclass(frozen=True)
class WaterEntry:
    """A logged amount of water in millilitres."""

    id: str
    amount: int
    timestamp: datetime
    date: str


@dataclass(frozen=True)
class StepEntry:
    """A logged step count with derived distance and calories."""

    id: str
    steps: int
    distance: float
    calories: int
    date: str


@dataclass(frozen=True)
class SleepEntry:
    """A logged sleep session; duration is in hours."""

    id: str
    bedtime: datetime
    wake_time: datetime
    duration: float
    quality: int
    date: str


@dataclass(frozen=True)
class Medication:
    """A medication the user takes."""

    id: str
    name: str
    dosage: str
    frequency: Frequency
    time: str
    notes: str
    is_active: bool
    created_at: datetime
    reminders: bool = True


@dataclass(frozen=True)
class MedicationLog:
    """A record of a medication being taken or skipped."""

    id: str
    medication_id: str
    taken_at: datetime
    skipped: bool
    date: str


@dataclass(frozen=True)
class MedicationStatus:
    """An active medication paired with today's taken flag."""

    medication: Medication
    taken: bool


@dataclass(frozen=True)
class HealthState:
    """The complete persisted state tree."""

    user: UserProfile = field(default_factory=UserProfile)
    water_entries: tuple[WaterEntry, ...] = ()
    step_entries: tuple[StepEntry, ...] = ()
    sleep_entries: tuple[SleepEntry, ...] = ()
    medications: tuple[Medication, ...] = ()
    medication_logs: tuple[MedicationLog, ...] = ()
