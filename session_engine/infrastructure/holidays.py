"""Holiday calendar providers.

The classifier never reads holiday data on its own; a provider hands it an
immutable :class:`HolidayCalendar`.  Tests and callers with a custom calendar
use :class:`StaticHolidayProvider`, deployments point
:class:`YamlHolidayProvider` at a curated table.
"""
from __future__ import annotations

from pathlib import Path
from typing import Protocol

from session_engine.core.holidays import DEFAULT_HOLIDAY_TABLE, HolidayCalendar, load_holiday_calendar


class HolidayProvider(Protocol):
    """Source of the holiday calendar used for classification."""

    def calendar(self) -> HolidayCalendar: ...


class StaticHolidayProvider:
    """Serve a calendar constructed in memory."""

    def __init__(self, calendar: HolidayCalendar) -> None:
        self._calendar = calendar

    def calendar(self) -> HolidayCalendar:
        return self._calendar


class YamlHolidayProvider:
    """Load one or more YAML holiday tables, merged into a single calendar."""

    def __init__(self, *paths: Path) -> None:
        self._paths = [Path(path) for path in paths] or [DEFAULT_HOLIDAY_TABLE]
        self._calendar: HolidayCalendar | None = None

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def calendar(self) -> HolidayCalendar:
        if self._calendar is None:
            merged = HolidayCalendar.empty()
            for path in self._paths:
                merged = merged.merge(load_holiday_calendar(path))
            self._calendar = merged
        return self._calendar
