"""State holder for the wellness tracker."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from wellness_tracker.adapters.snapshot_codec import (
    SnapshotError,
    decode_snapshot,
    encode_state,
)
from wellness_tracker.domain.actions import (
    Action,
    AddMedication,
    AddSleepEntry,
    AddStepEntry,
    AddWaterEntry,
    DeleteMedication,
    LogMedication,
    MedicationChanges,
    ResetData,
    SetUser,
    UpdateMedication,
)
from wellness_tracker.domain.analytics import DayValue, Metric, WeeklySummary
from wellness_tracker.domain.models import (
    DailyGoals,
    Frequency,
    HealthState,
    Medication,
    MedicationLog,
    MedicationStatus,
    Preferences,
    SleepEntry,
    StepEntry,
    WaterEntry,
)
from wellness_tracker.services import queries
from wellness_tracker.services.clock import Clock
from wellness_tracker.services.reducer import reduce
from wellness_tracker.services.storage import KeyValueStorage

DEFAULT_STORAGE_KEY = "myhealth-data"
KM_PER_STEP = 0.0008
KCAL_PER_STEP = 0.04

_logger = logging.getLogger(__name__)

Listener = Callable[[HealthState], None]


def generate_id() -> str:
    """Return a new unique entity id."""
    return str(uuid4())


@dataclass
class HealthStore:
    """Holds the current state, applies actions and persists snapshots.

    Every transition that yields a new state is followed by a save of the whole
    snapshot. Saves run as tasks on the running event loop and are not ordered
    against each other; the last one to finish wins. Storage failures are
    logged and never reach the caller.
    """

    storage: KeyValueStorage
    clock: Clock
    storage_key: str = DEFAULT_STORAGE_KEY
    state: HealthState = field(default_factory=HealthState)
    _listeners: list[Listener] = field(
        default_factory=list, init=False, repr=False
    )
    _pending: set[asyncio.Task[None]] = field(
        default_factory=set, init=False, repr=False
    )

    def dispatch(self, action: Action) -> HealthState:
        """Apply an action, schedule a save and notify listeners.

        The save is scheduled before listeners run, so a failing listener
        cannot keep the new state from being persisted.
        """
        next_state = reduce(self.state, action)
        if next_state is self.state:
            return self.state
        self.state = next_state
        self._schedule_save(next_state)
        for listener in list(self._listeners):
            listener(next_state)
        return next_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for new states and return an unsubscribe hook."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def load(self) -> None:
        """Merge the persisted snapshot into the state, if one exists."""
        try:
            raw = await self.storage.get_item(self.storage_key)
        except Exception:
            _logger.exception("Failed to read saved data")
            return
        if raw is None:
            _logger.info("No saved data found, using defaults")
            return
        try:
            action = decode_snapshot(raw)
        except SnapshotError:
            _logger.exception("Failed to decode saved data")
            return
        self.dispatch(action)

    async def flush(self) -> None:
        """Wait for in-flight saves to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def export_snapshot(self) -> str:
        """Return the current state as snapshot text."""
        return encode_state(self.state)

    def import_snapshot(self, raw: str) -> HealthState:
        """Replace state with the fields of a snapshot. Raises SnapshotError."""
        return self.dispatch(decode_snapshot(raw))

    def set_user(
        self,
        name: str | None = None,
        daily_goals: DailyGoals | None = None,
        preferences: Preferences | None = None,
    ) -> HealthState:
        """Replace the provided user fields."""
        return self.dispatch(
            SetUser(name=name, daily_goals=daily_goals, preferences=preferences)
        )

    def add_water_entry(self, amount: int) -> WaterEntry:
        """Log an amount of water in ml."""
        now = self.clock.now()
        entry = WaterEntry(
            id=generate_id(), amount=amount, timestamp=now, date=_day(now)
        )
        self.dispatch(AddWaterEntry(entry))
        return entry

    def add_step_entry(self, steps: int) -> StepEntry:
        """Log a step count with estimated distance and calories."""
        entry = StepEntry(
            id=generate_id(),
            steps=steps,
            distance=round(steps * KM_PER_STEP, 2),
            calories=round(steps * KCAL_PER_STEP),
            date=_day(self.clock.now()),
        )
        self.dispatch(AddStepEntry(entry))
        return entry

    def add_sleep_entry(
        self, bedtime: datetime, wake_time: datetime, quality: int
    ) -> SleepEntry:
        """Log a sleep session; negative durations are clamped to zero."""
        hours = (wake_time - bedtime).total_seconds() / 3600
        entry = SleepEntry(
            id=generate_id(),
            bedtime=bedtime,
            wake_time=wake_time,
            duration=max(0.0, hours),
            quality=quality,
            date=_day(self.clock.now()),
        )
        self.dispatch(AddSleepEntry(entry))
        return entry

    def add_medication(  # noqa: PLR0913
        self,
        name: str,
        dosage: str,
        frequency: Frequency,
        time: str,
        notes: str = "",
        reminders: bool = True,
    ) -> Medication:
        """Add an active medication."""
        medication = Medication(
            id=generate_id(),
            name=name,
            dosage=dosage,
            frequency=frequency,
            time=time,
            notes=notes,
            is_active=True,
            created_at=self.clock.now(),
            reminders=reminders,
        )
        self.dispatch(AddMedication(medication))
        return medication

    def update_medication(
        self, medication_id: str, changes: MedicationChanges
    ) -> HealthState:
        """Merge changes into a medication; unknown ids are ignored."""
        return self.dispatch(UpdateMedication(medication_id, changes))

    def delete_medication(self, medication_id: str) -> HealthState:
        """Remove a medication. Its logs are kept."""
        return self.dispatch(DeleteMedication(medication_id))

    def log_medication(self, medication_id: str, taken: bool = True) -> MedicationLog:
        """Record a medication as taken, or skipped when taken is False."""
        now = self.clock.now()
        log = MedicationLog(
            id=generate_id(),
            medication_id=medication_id,
            taken_at=now,
            skipped=not taken,
            date=_day(now),
        )
        self.dispatch(LogMedication(log))
        return log

    def reset(self) -> HealthState:
        """Drop all data and restore default settings."""
        return self.dispatch(ResetData())

    def get_today_water(self) -> int:
        """Return today's total water in ml."""
        return queries.today_water(self.state, self.clock.today())

    def get_today_water_entries(self, limit: int | None = None) -> list[WaterEntry]:
        """Return today's water entries, newest first."""
        return queries.today_water_entries(self.state, self.clock.today(), limit)

    def get_today_steps(self) -> int:
        """Return today's step count."""
        return queries.today_steps(self.state, self.clock.today())

    def get_last_sleep(self) -> SleepEntry | None:
        """Return the last logged sleep session."""
        return queries.last_sleep(self.state)

    def get_today_medications(self) -> list[MedicationStatus]:
        """Return active medications with today's taken flag."""
        return queries.today_medications(self.state, self.clock.today())

    def get_weekly_data(self, metric: Metric) -> list[DayValue]:
        """Return the last seven days of a metric, oldest first."""
        return queries.weekly_data(self.state, metric, self.clock.today())

    def get_weekly_summary(self, metric: Metric) -> WeeklySummary:
        """Return weekly aggregates measured against the user's goal."""
        goal = getattr(self.state.user.daily_goals, metric.value)
        return queries.summarize_week(self.state, metric, goal, self.clock.today())

    def _schedule_save(self, state: HealthState) -> None:
        payload = encode_state(state)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._save(payload))
            return
        task = loop.create_task(self._save(payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _save(self, payload: str) -> None:
        try:
            await self.storage.set_item(self.storage_key, payload)
        except Exception:
            _logger.exception("Failed to save data")


def _day(moment: datetime) -> str:
    return moment.date().isoformat()
