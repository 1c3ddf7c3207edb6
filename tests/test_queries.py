"""Tests for derived queries."""

from datetime import date, timedelta

from wellness_tracker.domain.analytics import Metric
from wellness_tracker.domain.models import (
    HealthState,
    SleepEntry,
    StepEntry,
    WaterEntry,
)
from wellness_tracker.services import queries
from tests.conftest import NOW

TODAY = date(2024, 3, 15)


def _steps(entry_id: str, steps: int, day: date) -> StepEntry:
    return StepEntry(
        id=entry_id, steps=steps, distance=0.0, calories=0, date=day.isoformat()
    )


def test_today_steps_uses_first_entry_for_the_day() -> None:
    state = HealthState(
        step_entries=(
            _steps("a", 4000, TODAY - timedelta(days=1)),
            _steps("b", 6000, TODAY),
            _steps("c", 9000, TODAY),
        )
    )

    assert queries.today_steps(state, TODAY) == 6000


def test_today_steps_defaults_to_zero() -> None:
    assert queries.today_steps(HealthState(), TODAY) == 0


def test_weekly_steps_fills_missing_days_with_zero() -> None:
    state = HealthState(
        step_entries=(
            _steps("a", 8000, TODAY - timedelta(days=6)),
            _steps("b", 5000, TODAY - timedelta(days=3)),
            _steps("old", 9999, TODAY - timedelta(days=7)),
        )
    )

    week = queries.weekly_data(state, Metric.STEPS, TODAY)

    assert [day.value for day in week] == [8000, 0, 0, 5000, 0, 0, 0]
    assert week[0].date == "2024-03-09"
    assert week[-1].date == "2024-03-15"
    assert week[0].day == "Sat"
    assert week[-1].day == "Fri"


def test_weekly_water_sums_each_day() -> None:
    state = HealthState(
        water_entries=(
            WaterEntry(id="a", amount=500, timestamp=NOW, date="2024-03-14"),
            WaterEntry(id="b", amount=250, timestamp=NOW, date="2024-03-14"),
            WaterEntry(id="c", amount=750, timestamp=NOW, date="2024-03-15"),
        )
    )

    week = queries.weekly_data(state, Metric.WATER, TODAY)

    assert [day.value for day in week][-2:] == [750, 750]


def test_weekly_sleep_uses_duration() -> None:
    state = HealthState(
        sleep_entries=(
            SleepEntry(
                id="s",
                bedtime=NOW - timedelta(hours=7),
                wake_time=NOW,
                duration=7.0,
                quality=4,
                date="2024-03-15",
            ),
        )
    )

    week = queries.weekly_data(state, Metric.SLEEP, TODAY)

    assert week[-1].value == 7.0
    assert sum(day.value for day in week) == 7.0


def test_summarize_week_counts_goals_met() -> None:
    state = HealthState(
        water_entries=(
            WaterEntry(id="a", amount=2000, timestamp=NOW, date="2024-03-15"),
            WaterEntry(id="b", amount=1500, timestamp=NOW, date="2024-03-14"),
        )
    )

    summary = queries.summarize_week(state, Metric.WATER, 2000, TODAY)

    assert summary.goals_met == 1
    assert summary.best == 2000
    assert summary.average == 500
    assert round(summary.completion_percent, 2) == 14.29


def test_today_water_entries_are_newest_first() -> None:
    state = HealthState(
        water_entries=(
            WaterEntry(id="a", amount=100, timestamp=NOW, date="2024-03-15"),
            WaterEntry(id="b", amount=200, timestamp=NOW, date="2024-03-14"),
            WaterEntry(id="c", amount=300, timestamp=NOW, date="2024-03-15"),
        )
    )

    entries = queries.today_water_entries(state, TODAY, limit=5)

    assert [entry.id for entry in entries] == ["c", "a"]


def test_progress_percent_handles_zero_goal() -> None:
    assert round(queries.progress_percent(12000, 10000)) == 120
    assert queries.progress_percent(5, 0) == 0
