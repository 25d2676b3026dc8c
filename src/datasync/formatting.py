from __future__ import annotations

from datetime import UTC, datetime

_UNITS = ("KB", "MB", "GB", "TB", "PB")


def format_bytes(size: int) -> str:
    """Human readable size in binary units, never smaller than KB."""
    value = size / 1024
    for unit in _UNITS[:-1]:
        if value < 1024:
            return f"{value:.2f} {unit}"
        value /= 1024
    return f"{value:.2f} {_UNITS[-1]}"


_AGE_STEPS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def _time_ago(seconds: float) -> str:
    seconds = int(seconds)
    if seconds <= 0:
        return "now"
    for label, step in _AGE_STEPS:
        amount = seconds // step
        if amount:
            return f"{amount} {label}{'' if amount == 1 else 's'} ago"
    return "now"


def format_mod_time(mod_time: datetime, now: datetime | None = None) -> str:
    if mod_time.tzinfo is None:
        mod_time = mod_time.replace(tzinfo=UTC)
    now = now or datetime.now(tz=UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    local_time = mod_time.astimezone()
    hour = local_time.hour % 12 or 12
    timestamp = f"{local_time:%Y-%m-%d} {hour:2d}:{local_time:%M%p}"
    return f"{timestamp} ({_time_ago((now - mod_time).total_seconds())})"
