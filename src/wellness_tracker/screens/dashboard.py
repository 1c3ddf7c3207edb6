"""Dashboard view-model."""

from dataclasses import dataclass

from wellness_tracker.domain.models import MedicationStatus
from wellness_tracker.screens.navigation import Route
from wellness_tracker.services.queries import progress_percent
from wellness_tracker.services.store import HealthStore

NOON = 12
EVENING = 18
UPCOMING_LIMIT = 2


@dataclass(frozen=True)
class StatCard:
    """A metric tile on the dashboard."""

    title: str
    value: str
    unit: str
    progress: float
    route: Route


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard renders."""

    greeting: str
    date_label: str
    cards: list[StatCard]
    upcoming_medications: list[MedicationStatus]
    quick_actions: list[Route]


@dataclass
class DashboardScreen:
    """Today's overview across all metrics."""

    store: HealthStore

    def view(self) -> DashboardView:
        """Build the dashboard for the current state."""
        goals = self.store.state.user.daily_goals
        now = self.store.clock.now()
        water = self.store.get_today_water()
        steps = self.store.get_today_steps()
        sleep = self.store.get_last_sleep()
        medications = self.store.get_today_medications()
        taken = sum(1 for status in medications if status.taken)

        cards = [
            StatCard(
                title="Water",
                value=f"{water}ml",
                unit=f"/ {goals.water}ml",
                progress=progress_percent(water, goals.water),
                route=Route.WATER_TRACKER,
            ),
            StatCard(
                title="Steps",
                value=f"{steps:,}",
                unit=f"/ {goals.steps:,}",
                progress=progress_percent(steps, goals.steps),
                route=Route.STEP_TRACKER,
            ),
            StatCard(
                title="Sleep",
                value=f"{sleep.duration:.1f}h" if sleep else "0h",
                unit=f"/ {goals.sleep:g}h",
                progress=progress_percent(sleep.duration, goals.sleep) if sleep else 0,
                route=Route.SLEEP_TRACKER,
            ),
            StatCard(
                title="Medications",
                value=str(taken),
                unit=f"/ {len(medications)}",
                progress=taken / len(medications) * 100 if medications else 100,
                route=Route.MEDICATIONS,
            ),
        ]
        return DashboardView(
            greeting=greeting_for_hour(now.hour),
            date_label=f"{now:%A, %B} {now.day}, {now.year}",
            cards=cards,
            upcoming_medications=[s for s in medications if not s.taken][
                :UPCOMING_LIMIT
            ],
            quick_actions=[
                Route.WATER_TRACKER,
                Route.STEP_TRACKER,
                Route.SLEEP_TRACKER,
                Route.MEDICATIONS,
            ],
        )


def greeting_for_hour(hour: int) -> str:
    """Return a greeting for the hour of day."""
    if hour < NOON:
        return "Good Morning!"
    if hour < EVENING:
        return "Good Afternoon!"
    return "Good Evening!"
