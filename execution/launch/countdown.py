"""
execution/launch/countdown.py

Time remaining until the academy launch instant.

Pure functions of (now, target). Nothing is persisted: callers recompute
from the wall clock on every tick, so the result is correct across reloads.
"""

import os
from datetime import datetime, timezone

# Overrides the default launch instant when set (ISO 8601; naive = UTC).
LAUNCH_DATE_ENV_VAR = "DGA_LAUNCH_DATE"

DEFAULT_LAUNCH_DATE = datetime(2026, 3, 1, 0, 0, 0, tzinfo=timezone.utc)

# Display labels paired with the keys of compute_time_left().
DISPLAY_UNITS: tuple[tuple[str, str], ...] = (
    ("Days", "days"),
    ("Hrs", "hours"),
    ("Mins", "minutes"),
    ("Secs", "seconds"),
)

_SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_launch_date() -> datetime:
    """Return the configured launch instant as an aware UTC datetime.

    Raises:
        ValueError: If DGA_LAUNCH_DATE is set but is not ISO 8601.
    """
    raw = os.environ.get(LAUNCH_DATE_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_LAUNCH_DATE
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {LAUNCH_DATE_ENV_VAR}: {raw!r}") from exc
    return _as_utc(parsed)


def compute_time_left(now: datetime, target: datetime) -> dict[str, int]:
    """Split the interval from *now* to *target* into whole units.

    Every component is floored. Once *target* has passed, all four are zero.

    Args:
        now:    Current instant.
        target: Countdown target instant.

    Returns:
        dict with int keys 'days', 'hours', 'minutes', 'seconds'.
    """
    remaining = int((_as_utc(target) - _as_utc(now)).total_seconds())
    if remaining <= 0:
        return {"days": 0, "hours": 0, "minutes": 0, "seconds": 0}

    days, rest = divmod(remaining, _SECONDS_PER_DAY)
    hours, rest = divmod(rest, 60 * 60)
    minutes, seconds = divmod(rest, 60)
    return {"days": days, "hours": hours, "minutes": minutes, "seconds": seconds}


def format_time_left(time_left: dict[str, int]) -> list[tuple[str, str]]:
    """Return (label, two-digit value) pairs in display order."""
    return [
        (label, str(max(0, time_left[key])).zfill(2))
        for label, key in DISPLAY_UNITS
    ]


def time_left_until_launch(now: datetime | None = None) -> dict[str, int]:
    """compute_time_left() against the configured launch date."""
    if now is None:
        now = datetime.now(timezone.utc)
    return compute_time_left(now, get_launch_date())
