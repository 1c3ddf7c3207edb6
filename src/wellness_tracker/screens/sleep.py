"""Sleep tracker view-model."""

from dataclasses import dataclass
from datetime import datetime

from wellness_tracker.domain.analytics import DayValue, Metric
from wellness_tracker.domain.models import SleepEntry
from wellness_tracker.screens.forms import validate_sleep
from wellness_tracker.services.store import HealthStore

QUALITY_LABELS = {1: "Poor", 2: "Fair", 3: "Good", 4: "Great", 5: "Excellent"}
CHART_MAX_HOURS = 12


@dataclass(frozen=True)
class SleepView:
    """Sleep screen contents."""

    last_sleep: SleepEntry | None
    last_quality: str | None
    goal_hours: float
    week: list[DayValue]
    bar_heights: list[float]


@dataclass
class SleepTrackerScreen:
    """Log sleep sessions and show the weekly pattern."""

    store: HealthStore

    def view(self) -> SleepView:
        """Build the sleep screen."""
        last = self.store.get_last_sleep()
        week = self.store.get_weekly_data(Metric.SLEEP)
        return SleepView(
            last_sleep=last,
            last_quality=QUALITY_LABELS.get(last.quality) if last else None,
            goal_hours=self.store.state.user.daily_goals.sleep,
            week=week,
            bar_heights=[
                min(day.value / CHART_MAX_HOURS * 100, 100) for day in week
            ],
        )

    def log_sleep(self, bedtime: datetime, wake_time: datetime, quality: int) -> str:
        """Log a sleep session. Raises FormError for an invalid window."""
        hours = validate_sleep(bedtime, wake_time, quality)
        self.store.add_sleep_entry(bedtime, wake_time, quality)
        return f"Logged {hours:.1f} hours of sleep!"
