"""JSON snapshot format for the persisted state tree.

Field names are camelCase on the wire (``dailyGoals``, ``waterEntries``,
``wakeTime``) so snapshots stay readable by the mobile app that first wrote
them. Every top-level field is optional: a partial snapshot only replaces the
fields it carries.
"""

from dataclasses import asdict
from datetime import datetime

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from wellness_tracker.domain.actions import LoadData
from wellness_tracker.domain.models import (
    DailyGoals,
    Frequency,
    HealthState,
    Medication,
    MedicationLog,
    Preferences,
    SleepEntry,
    StepEntry,
    Theme,
    UserProfile,
    Units,
    WaterEntry,
)


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be decoded."""


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class DailyGoalsModel(_WireModel):
    """Daily goals payload."""

    water: int = 2000
    steps: int = 10000
    sleep: float = 8


class PreferencesModel(_WireModel):
    """Preferences payload."""

    notifications: bool = True
    theme: Theme = Theme.LIGHT
    units: Units = Units.METRIC


class UserModel(_WireModel):
    """User payload."""

    name: str = "User"
    daily_goals: DailyGoalsModel = DailyGoalsModel()
    preferences: PreferencesModel = PreferencesModel()


class WaterEntryModel(_WireModel):
    """Water entry payload."""

    id: str
    amount: int
    timestamp: datetime
    date: str


class StepEntryModel(_WireModel):
    """Step entry payload; older snapshots store distance as a string."""

    id: str
    steps: int
    distance: float
    calories: int
    date: str


class SleepEntryModel(_WireModel):
    """Sleep entry payload."""

    id: str
    bedtime: datetime
    wake_time: datetime
    duration: float
    quality: int
    date: str


class MedicationModel(_WireModel):
    """Medication payload."""

    id: str
    name: str
    dosage: str
    frequency: Frequency
    time: str
    notes: str = ""
    is_active: bool = True
    created_at: datetime
    reminders: bool = True


class MedicationLogModel(_WireModel):
    """Medication log payload."""

    id: str
    medication_id: str
    taken_at: datetime
    skipped: bool
    date: str


class SnapshotModel(_WireModel):
    """The serialized state tree."""

    user: UserModel | None = None
    water_entries: list[WaterEntryModel] | None = None
    step_entries: list[StepEntryModel] | None = None
    sleep_entries: list[SleepEntryModel] | None = None
    medications: list[MedicationModel] | None = None
    medication_logs: list[MedicationLogModel] | None = None


def encode_state(state: HealthState) -> str:
    """Serialize the full state to JSON text."""
    return SnapshotModel.model_validate(asdict(state)).model_dump_json(by_alias=True)


def decode_snapshot(raw: str) -> LoadData:
    """Parse JSON text into a LoadData action carrying the provided fields."""
    try:
        snapshot = SnapshotModel.model_validate_json(raw)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot: {exc.error_count()} error(s)") from exc
    return LoadData(
        user=_user(snapshot.user) if snapshot.user is not None else None,
        water_entries=_optional_tuple(snapshot.water_entries, WaterEntry),
        step_entries=_optional_tuple(snapshot.step_entries, StepEntry),
        sleep_entries=_optional_tuple(snapshot.sleep_entries, SleepEntry),
        medications=_optional_tuple(snapshot.medications, Medication),
        medication_logs=_optional_tuple(snapshot.medication_logs, MedicationLog),
    )


def _user(model: UserModel) -> UserProfile:
    return UserProfile(
        name=model.name,
        daily_goals=DailyGoals(**model.daily_goals.model_dump()),
        preferences=Preferences(**model.preferences.model_dump()),
    )


def _optional_tuple(models: list[_WireModel] | None, record_type: type) -> tuple | None:
    if models is None:
        return None
    return tuple(record_type(**model.model_dump()) for model in models)
