"""Public-holiday calendar used by the temporal classifier.

The calendar is an immutable value: it is loaded once from a YAML table and
passed explicitly to whoever classifies sessions.  Holiday tables are curated
per year; lunar-calendar holidays are stored as fixed Gregorian dates and a
date outside the curated years is simply "not a holiday".
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

import yaml

from session_engine.core.validation import ValidationError

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
DEFAULT_HOLIDAY_TABLE = CONFIG_DIR / "holidays.kr.yaml"

SATURDAY = 5
SUNDAY = 6

logger = logging.getLogger(__name__)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def is_weekend(value: date | datetime) -> bool:
    return _as_date(value).weekday() in (SATURDAY, SUNDAY)


@dataclass(frozen=True)
class HolidayCalendar:
    dates: frozenset[date]
    years: frozenset[int]
    names: Mapping[date, str] = field(default_factory=dict, compare=False, hash=False)
    tentative: frozenset[date] = frozenset()
    region: str | None = None

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    @classmethod
    def from_dates(cls, dates: Iterable[date], years: Iterable[int] | None = None) -> "HolidayCalendar":
        """Build a synthetic calendar, mostly useful in tests."""

        collected = frozenset(_as_date(item) for item in dates)
        covered = frozenset(years) if years is not None else frozenset(item.year for item in collected)
        return cls(dates=collected, years=covered)

    @classmethod
    def empty(cls) -> "HolidayCalendar":
        return cls(dates=frozenset(), years=frozenset())

    def is_holiday(self, value: date | datetime) -> bool:
        return _as_date(value) in self.dates

    @staticmethod
    def is_weekend(value: date | datetime) -> bool:
        return is_weekend(value)

    def covers(self, year: int) -> bool:
        return year in self.years

    def holiday_name(self, value: date | datetime) -> str | None:
        return self.names.get(_as_date(value))

    def is_tentative(self, value: date | datetime) -> bool:
        return _as_date(value) in self.tentative

    def merge(self, other: "HolidayCalendar") -> "HolidayCalendar":
        names = dict(self.names)
        names.update(other.names)
        return HolidayCalendar(
            dates=self.dates | other.dates,
            years=self.years | other.years,
            names=names,
            tentative=self.tentative | other.tentative,
            region=self.region or other.region,
        )


def _parse_entry_date(raw: object, year: int) -> date:
    if isinstance(raw, datetime):
        parsed = raw.date()
    elif isinstance(raw, date):
        parsed = raw
    else:
        try:
            parsed = date.fromisoformat(str(raw))
        except ValueError as exc:
            raise ValidationError(f"invalid holiday date {raw!r} in {year}") from exc
    if parsed.year != year:
        raise ValidationError(f"holiday {parsed.isoformat()} listed under year {year}")
    return parsed


def calendar_from_mapping(data: dict) -> HolidayCalendar:
    years_section = data.get("years") or {}
    if not isinstance(years_section, dict):
        raise ValidationError("holiday table must map years to entry lists")

    dates: set[date] = set()
    names: dict[date, str] = {}
    tentative: set[date] = set()
    years: set[int] = set()
    for raw_year, entries in years_section.items():
        try:
            year = int(raw_year)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"invalid holiday year {raw_year!r}") from exc
        years.add(year)
        for entry in entries or []:
            if not isinstance(entry, dict):
                entry = {"date": entry}
            day = _parse_entry_date(entry.get("date"), year)
            dates.add(day)
            if entry.get("name"):
                names[day] = str(entry["name"])
            if entry.get("tentative"):
                tentative.add(day)

    return HolidayCalendar(
        dates=frozenset(dates),
        years=frozenset(years),
        names=names,
        tentative=frozenset(tentative),
        region=data.get("region"),
    )


def load_holiday_calendar(path: Path | None = None) -> HolidayCalendar:
    path = Path(path) if path is not None else DEFAULT_HOLIDAY_TABLE
    if not path.exists():
        raise ValidationError(f"holiday table not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValidationError(f"holiday table {path} must be a mapping")
    calendar = calendar_from_mapping(data)
    logger.info(
        "loaded %d holidays for years %s from %s",
        len(calendar.dates),
        sorted(calendar.years),
        path.name,
    )
    return calendar
