"""State transition actions.

Entries are built by the store (ids, timestamps, derived fields) before the
action is dispatched, so applying an action never depends on the clock.
"""

from dataclasses import dataclass

from wellness_tracker.domain.models import (
    DailyGoals,
    Frequency,
    Medication,
    MedicationLog,
    Preferences,
    SleepEntry,
    StepEntry,
    UserProfile,
    WaterEntry,
)


@dataclass(frozen=True)
class SetUser:
    """Replace the provided user fields, keeping the others."""

    name: str | None = None
    daily_goals: DailyGoals | None = None
    preferences: Preferences | None = None


@dataclass(frozen=True)
class AddWaterEntry:
    entry: WaterEntry


@dataclass(frozen=True)
class AddStepEntry:
    entry: StepEntry


@dataclass(frozen=True)
class AddSleepEntry:
    entry: SleepEntry


@dataclass(frozen=True)
class AddMedication:
    medication: Medication


@dataclass(frozen=True)
class MedicationChanges:
    """Partial medication fields; None leaves a field unchanged."""

    name: str | None = None
    dosage: str | None = None
    frequency: Frequency | None = None
    time: str | None = None
    notes: str | None = None
    is_active: bool | None = None
    reminders: bool | None = None


@dataclass(frozen=True)
class UpdateMedication:
    medication_id: str
    changes: MedicationChanges


@dataclass(frozen=True)
class DeleteMedication:
    medication_id: str


@dataclass(frozen=True)
class LogMedication:
    log: MedicationLog


@dataclass(frozen=True)
class LoadData:
    """A full or partial snapshot; None fields keep the current value."""

    user: UserProfile | None = None
    water_entries: tuple[WaterEntry, ...] | None = None
    step_entries: tuple[StepEntry, ...] | None = None
    sleep_entries: tuple[SleepEntry, ...] | None = None
    medications: tuple[Medication, ...] | None = None
    medication_logs: tuple[MedicationLog, ...] | None = None


@dataclass(frozen=True)
class ResetData:
    """Return to the default state."""


Action = (
    SetUser
    | AddWaterEntry
    | AddStepEntry
    | AddSleepEntry
    | AddMedication
    | UpdateMedication
    | DeleteMedication
    | LogMedication
    | LoadData
    | ResetData
)
