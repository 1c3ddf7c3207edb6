"""Step tracker view-model."""

from dataclasses import dataclass

from wellness_tracker.screens.forms import parse_steps
from wellness_tracker.services.queries import progress_percent
from wellness_tracker.services.store import KCAL_PER_STEP, KM_PER_STEP, HealthStore


@dataclass(frozen=True)
class StepsView:
    """Step screen contents."""

    steps: int
    goal: int
    progress: int
    remaining: int
    distance_km: float
    calories: int
    status: str


@dataclass
class StepTrackerScreen:
    """Log steps and show progress toward the step goal."""

    store: HealthStore

    def view(self) -> StepsView:
        """Build the step screen for today."""
        steps = self.store.get_today_steps()
        goal = self.store.state.user.daily_goals.steps
        remaining = max(0, goal - steps)
        return StepsView(
            steps=steps,
            goal=goal,
            progress=round(progress_percent(steps, goal)),
            remaining=remaining,
            distance_km=round(steps * KM_PER_STEP, 2),
            calories=round(steps * KCAL_PER_STEP),
            status=(
                f"{remaining:,} steps to go!" if remaining > 0 else "Goal achieved!"
            ),
        )

    def log_steps(self, raw_steps: str) -> str:
        """Log a typed step count. Raises FormError for out-of-range input."""
        steps = parse_steps(raw_steps)
        self.store.add_step_entry(steps)
        return f"Logged {steps:,} steps!"
