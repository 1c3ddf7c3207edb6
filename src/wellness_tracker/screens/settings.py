"""Settings view-model."""

from dataclasses import dataclass, replace

from wellness_tracker.adapters.snapshot_codec import SnapshotError
from wellness_tracker.domain.models import DailyGoals, Theme, Units, UserProfile
from wellness_tracker.screens.forms import FormError, parse_goals
from wellness_tracker.services.store import HealthStore


@dataclass
class SettingsScreen:
    """Edit goals and preferences, and manage stored data."""

    store: HealthStore

    def view(self) -> UserProfile:
        """Return the user profile being edited."""
        return self.store.state.user

    def goals_subtitle(self) -> str:
        """Summarize the daily goals in one line."""
        goals = self.store.state.user.daily_goals
        return (
            f"Water: {goals.water}ml • Steps: {goals.steps:,} • "
            f"Sleep: {goals.sleep:g}h"
        )

    def save_goals(self, water: str, steps: str, sleep: str) -> str:
        """Replace all daily goals. Raises FormError for non-positive input."""
        water_goal, steps_goal, sleep_goal = parse_goals(water, steps, sleep)
        self.store.set_user(
            daily_goals=DailyGoals(water=water_goal, steps=steps_goal, sleep=sleep_goal)
        )
        return "Daily goals updated successfully!"

    def set_name(self, name: str) -> None:
        """Rename the user."""
        cleaned = name.strip()
        if not cleaned:
            raise FormError("Error", "Please enter your name")
        self.store.set_user(name=cleaned)

    def toggle_notifications(self, enabled: bool) -> None:
        """Turn reminder notifications on or off."""
        self._update_preferences(notifications=enabled)

    def set_theme(self, theme: Theme) -> None:
        self._update_preferences(theme=theme)

    def set_units(self, units: Units) -> None:
        self._update_preferences(units=units)

    def export_data(self) -> str:
        """Return all data as snapshot text."""
        return self.store.export_snapshot()

    def import_data(self, raw: str) -> str:
        """Load data from snapshot text. Raises FormError for bad input."""
        try:
            self.store.import_snapshot(raw)
        except SnapshotError as exc:
            raise FormError("Import Failed", "The selected file is not valid") from exc
        return "Data imported successfully."

    def reset_data(self) -> str:
        """Delete all entries and restore default settings."""
        self.store.reset()
        return "All data has been reset successfully."

    def _update_preferences(self, **changes: object) -> None:
        preferences = replace(self.store.state.user.preferences, **changes)
        self.store.set_user(preferences=preferences)
