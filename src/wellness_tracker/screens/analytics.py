"""Analytics view-model."""

from dataclasses import dataclass

from wellness_tracker.domain.analytics import Metric, WeeklySummary
from wellness_tracker.services.store import HealthStore

UNITS = {Metric.WATER: "ml", Metric.STEPS: "steps", Metric.SLEEP: "h"}


@dataclass(frozen=True)
class AnalyticsView:
    """Weekly analytics for every metric."""

    summaries: dict[Metric, WeeklySummary]

    def goals_met(self, metric: Metric) -> int:
        """Return how many of the last seven days met the goal."""
        return self.summaries[metric].goals_met

    def completion(self, metric: Metric) -> float:
        """Return the share of the last seven days that met the goal."""
        return self.summaries[metric].completion_percent


@dataclass
class AnalyticsScreen:
    """Weekly trends measured against the daily goals."""

    store: HealthStore

    def view(self) -> AnalyticsView:
        """Build weekly summaries for all metrics."""
        return AnalyticsView(
            summaries={
                metric: self.store.get_weekly_summary(metric) for metric in Metric
            }
        )


def format_value(metric: Metric, value: float) -> str:
    """Format a metric value the way chart labels show it."""
    unit = UNITS[metric]
    if metric is Metric.WATER and value > 1000:
        return f"{value / 1000:.1f}L"
    if metric is Metric.STEPS and value > 1000:
        return f"{value / 1000:.1f}k"
    if metric is Metric.SLEEP:
        return f"{value:.1f}{unit}"
    return f"{_plain_number(value)}{unit}"


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
