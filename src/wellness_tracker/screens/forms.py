"""Input validation for screen forms."""

import re
from datetime import datetime

MAX_WATER_ML = 2000
MAX_STEPS = 50000
MAX_SLEEP_HOURS = 24
MIN_QUALITY = 1
MAX_QUALITY = 5

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


class FormError(ValueError):
    """Rejected user input; the message is shown to the user."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


def parse_water_amount(raw: str) -> int:
    """Parse a custom water amount in ml."""
    amount = _parse_int(raw)
    if amount is None or not 0 < amount <= MAX_WATER_ML:
        raise FormError(
            "Invalid Amount",
            f"Please enter a valid amount between 1-{MAX_WATER_ML}ml",
        )
    return amount


def parse_steps(raw: str) -> int:
    """Parse a manually entered step count."""
    steps = _parse_int(raw)
    if steps is None or not 0 < steps <= MAX_STEPS:
        raise FormError(
            "Invalid Steps",
            f"Please enter a valid number of steps (1-{MAX_STEPS:,})",
        )
    return steps


def validate_sleep(bedtime: datetime, wake_time: datetime, quality: int) -> float:
    """Check a sleep window and quality rating; return the duration in hours."""
    hours = (wake_time - bedtime).total_seconds() / 3600
    if not 0 < hours <= MAX_SLEEP_HOURS:
        raise FormError("Invalid Time", "Please check your bedtime and wake time")
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise FormError(
            "Invalid Quality",
            f"Please rate your sleep from {MIN_QUALITY} to {MAX_QUALITY}",
        )
    return hours


def parse_goals(water: str, steps: str, sleep: str) -> tuple[int, int, float]:
    """Parse the three daily goals; all must be positive."""
    water_goal = _parse_int(water)
    steps_goal = _parse_int(steps)
    sleep_goal = _parse_float(sleep)
    if (
        water_goal is None
        or steps_goal is None
        or sleep_goal is None
        or water_goal <= 0
        or steps_goal <= 0
        or sleep_goal <= 0
    ):
        raise FormError("Error", "Please enter valid goals")
    return water_goal, steps_goal, sleep_goal


def require_text(*values: str) -> list[str]:
    """Strip values and fail if any is blank."""
    cleaned = [value.strip() for value in values]
    if not all(cleaned):
        raise FormError("Error", "Please fill in medication name and dosage")
    return cleaned


def validate_time(raw: str) -> str:
    """Validate a 24-hour HH:MM time."""
    value = raw.strip()
    if not _TIME_PATTERN.match(value):
        raise FormError("Invalid Time", "Please enter a time as HH:MM")
    return value


def _parse_int(raw: str) -> int | None:
    """Read the leading integer of raw: "12.5" gives 12, "1_000" gives 1."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def _parse_float(raw: str) -> float | None:
    """Read the leading decimal number of raw; "nan" and "inf" are rejected."""
    match = _LEADING_FLOAT.match(raw)
    return float(match.group(1)) if match else None
