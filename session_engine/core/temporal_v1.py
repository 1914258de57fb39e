"""Calendar / time-of-day labelling of work sessions.

Precedence is fixed: a public holiday wins over a weekend, and a weekend wins
over the business-hours comparison.  Without a work-hours window a weekday
session counts as ``inside``.
"""
from __future__ import annotations

import logging
from datetime import datetime

from session_engine.core.holidays import HolidayCalendar
from session_engine.core.schema import TemporalLabel, WorkHoursWindow
from session_engine.core.validation import parse_timestamp

CLASSIFIER_VERSION = "temporal_v1"

DISPLAY_NAMES: dict[str, str] = {
    "inside": "근무내",
    "outside": "근무외",
    "weekend": "주말",
    "holiday": "공휴일",
}

logger = logging.getLogger(__name__)


def classify_schedule_type(
    start_time: str | datetime,
    window: WorkHoursWindow | None = None,
    *,
    calendar: HolidayCalendar,
) -> TemporalLabel:
    moment = parse_timestamp(start_time)
    day = moment.date()

    if not calendar.covers(day.year):
        logger.debug("holiday table has no entries for %s; %s treated as non-holiday", day.year, day)

    if calendar.is_holiday(day):
        return "holiday"
    if calendar.is_weekend(day):
        return "weekend"
    if window is None:
        return "inside"
    return "inside" if window.contains(moment) else "outside"


def temporal_label_display(label: str) -> str:
    return DISPLAY_NAMES.get(label, label)
