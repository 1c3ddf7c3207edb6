"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from wellness_tracker.adapters.file_storage import FileKeyValueStorage
from wellness_tracker.config import Settings, parse_timezone
from wellness_tracker.screens.analytics import AnalyticsScreen
from wellness_tracker.screens.dashboard import DashboardScreen
from wellness_tracker.screens.medications import MedicationScreen
from wellness_tracker.screens.settings import SettingsScreen
from wellness_tracker.screens.sleep import SleepTrackerScreen
from wellness_tracker.screens.steps import StepTrackerScreen
from wellness_tracker.screens.water import WaterTrackerScreen
from wellness_tracker.services.clock import Clock, SystemClock
from wellness_tracker.services.storage import KeyValueStorage
from wellness_tracker.services.store import HealthStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStorage
    store: HealthStore
    dashboard: DashboardScreen
    water_tracker: WaterTrackerScreen
    step_tracker: StepTrackerScreen
    sleep_tracker: SleepTrackerScreen
    medications: MedicationScreen
    analytics: AnalyticsScreen
    settings_screen: SettingsScreen
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
    clock: Clock | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_storage = storage or FileKeyValueStorage.create(
        resolved_settings.storage_dir
    )
    store = HealthStore(
        storage=resolved_storage,
        clock=clock or SystemClock(parse_timezone(resolved_settings.timezone)),
        storage_key=resolved_settings.storage_key,
    )

    async def close_resources() -> None:
        await store.flush()

    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        store=store,
        dashboard=DashboardScreen(store),
        water_tracker=WaterTrackerScreen(store),
        step_tracker=StepTrackerScreen(store),
        sleep_tracker=SleepTrackerScreen(store),
        medications=MedicationScreen(store),
        analytics=AnalyticsScreen(store),
        settings_screen=SettingsScreen(store),
        close_resources=close_resources,
    )
