"""Water tracker view-model."""

from dataclasses import dataclass

from wellness_tracker.domain.models import WaterEntry
from wellness_tracker.screens.forms import parse_water_amount
from wellness_tracker.services.queries import progress_percent
from wellness_tracker.services.store import HealthStore

QUICK_AMOUNTS = (250, 500, 750, 1000)
HISTORY_LIMIT = 5


@dataclass(frozen=True)
class WaterView:
    """Water screen contents."""

    total_ml: int
    goal_ml: int
    progress: int
    fill_percent: float
    remaining_ml: int
    history: list[WaterEntry]
    quick_amounts: tuple[int, ...] = QUICK_AMOUNTS


@dataclass
class WaterTrackerScreen:
    """Log water and show today's intake."""

    store: HealthStore

    def view(self) -> WaterView:
        """Build the water screen for today."""
        total = self.store.get_today_water()
        goal = self.store.state.user.daily_goals.water
        progress = progress_percent(total, goal)
        return WaterView(
            total_ml=total,
            goal_ml=goal,
            progress=round(progress),
            fill_percent=min(progress, 100),
            remaining_ml=max(0, goal - total),
            history=self.store.get_today_water_entries(limit=HISTORY_LIMIT),
        )

    def add_quick(self, amount: int) -> str:
        """Log one of the preset amounts."""
        if amount not in QUICK_AMOUNTS:
            raise ValueError(f"Not a quick amount: {amount}")
        return self._add(amount)

    def add_custom(self, raw_amount: str) -> str:
        """Log a typed amount. Raises FormError for out-of-range input."""
        return self._add(parse_water_amount(raw_amount))

    def _add(self, amount: int) -> str:
        self.store.add_water_entry(amount)
        return f"Added {amount}ml of water!"
