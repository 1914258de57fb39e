from __future__ import annotations

from datetime import datetime, time


class ValidationError(Exception):
    """Raised when a caller hands the engine malformed input."""


def parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"unparsable timestamp: {value!r}") from exc


def parse_time_of_day(value: str | time) -> time:
    """Accept ``HH:MM`` or ``HH:MM:SS`` strings as stored by the data layer."""

    if isinstance(value, time):
        return value
    parts = str(value).strip().split(":")
    if len(parts) not in (2, 3):
        raise ValidationError(f"unparsable time of day: {value!r}")
    try:
        numbers = [int(part) for part in parts]
        return time(*numbers)
    except ValueError as exc:
        raise ValidationError(f"unparsable time of day: {value!r}") from exc


def minutes_of_day(value: time | datetime) -> int:
    return value.hour * 60 + value.minute


def validate_window_bounds(start: time, end: time) -> None:
    if minutes_of_day(end) <= minutes_of_day(start):
        raise ValidationError(
            f"work hours window must end after it starts (got {start.isoformat()}-{end.isoformat()})"
        )
