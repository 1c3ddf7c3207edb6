"""Screen routes and tab layout."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ScreenRoute:
    """Declarative route definition."""

    name: str
    title: str
    tab: str


class Route(Enum):
    """Enum of routes (single source of truth)."""

    DASHBOARD = ScreenRoute("Dashboard", "Dashboard", "Dashboard")
    TRACKING_HUB = ScreenRoute("TrackingHub", "Track Activities", "Track")
    WATER_TRACKER = ScreenRoute("WaterTracker", "Water Tracker", "Track")
    STEP_TRACKER = ScreenRoute("StepTracker", "Step Tracker", "Track")
    SLEEP_TRACKER = ScreenRoute("SleepTracker", "Sleep Tracker", "Track")
    MEDICATIONS = ScreenRoute("Medications", "Medications", "Track")
    ANALYTICS = ScreenRoute("Analytics", "Analytics", "Analytics")
    SETTINGS = ScreenRoute("Settings", "Settings", "Settings")


def tabs() -> list[str]:
    """Return the bottom tab names in display order."""
    names: list[str] = []
    for route in Route:
        if route.value.tab not in names:
            names.append(route.value.tab)
    return names


def tab_routes(tab: str) -> list[Route]:
    """Return the routes stacked under a tab, root first."""
    return [route for route in Route if route.value.tab == tab]
