"""Derived queries over the health state."""

from datetime import date, timedelta

from wellness_tracker.domain.analytics import DayValue, Metric, WeeklySummary
from wellness_tracker.domain.models import (
    HealthState,
    MedicationStatus,
    SleepEntry,
    WaterEntry,
)

WEEK_DAYS = 7
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def today_water(state: HealthState, today: date) -> int:
    """Return the total water logged today in ml."""
    return _water_on(state, today.isoformat())


def today_water_entries(
    state: HealthState, today: date, limit: int | None = None
) -> list[WaterEntry]:
    """Return today's water entries, newest first."""
    day = today.isoformat()
    entries = [entry for entry in reversed(state.water_entries) if entry.date == day]
    return entries if limit is None else entries[:limit]


def today_steps(state: HealthState, today: date) -> int:
    """Return the steps of the first entry logged today."""
    return _steps_on(state, today.isoformat())


def last_sleep(state: HealthState) -> SleepEntry | None:
    """Return the most recently logged sleep session."""
    if not state.sleep_entries:
        return None
    return state.sleep_entries[-1]


def today_medications(state: HealthState, today: date) -> list[MedicationStatus]:
    """Return active medications with whether they were taken today."""
    day = today.isoformat()
    taken_ids = {
        log.medication_id
        for log in state.medication_logs
        if log.date == day and not log.skipped
    }
    return [
        MedicationStatus(medication=med, taken=med.id in taken_ids)
        for med in state.medications
        if med.is_active
    ]


def weekly_data(state: HealthState, metric: Metric, today: date) -> list[DayValue]:
    """Return per-day values for the seven days ending today, oldest first."""
    days = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        days.append(
            DayValue(
                date=day.isoformat(),
                value=_value_on(state, metric, day.isoformat()),
                day=WEEKDAY_NAMES[day.weekday()],
            )
        )
    return days


def summarize_week(
    state: HealthState, metric: Metric, goal: float, today: date
) -> WeeklySummary:
    """Return averages and goal completion for the last seven days."""
    days = weekly_data(state, metric, today)
    goals_met = sum(1 for day in days if day.value >= goal)
    return WeeklySummary(
        metric=metric,
        days=days,
        average=sum(day.value for day in days) / WEEK_DAYS,
        best=max(day.value for day in days),
        goals_met=goals_met,
        completion_percent=goals_met / WEEK_DAYS * 100,
    )


def progress_percent(value: float, goal: float) -> float:
    """Return value as a percentage of goal."""
    if goal <= 0:
        return 0.0
    return value / goal * 100


def _value_on(state: HealthState, metric: Metric, day: str) -> float:
    if metric is Metric.WATER:
        return _water_on(state, day)
    if metric is Metric.STEPS:
        return _steps_on(state, day)
    if metric is Metric.SLEEP:
        entry = next((e for e in state.sleep_entries if e.date == day), None)
        return entry.duration if entry else 0
    raise ValueError(f"Unknown metric: {metric}")


def _water_on(state: HealthState, day: str) -> int:
    return sum(entry.amount for entry in state.water_entries if entry.date == day)


def _steps_on(state: HealthState, day: str) -> int:
    # First entry for the day wins; entries are not summed.
    entry = next((e for e in state.step_entries if e.date == day), None)
    return entry.steps if entry else 0
