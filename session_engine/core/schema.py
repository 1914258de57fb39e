from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from session_engine.core.validation import (
    minutes_of_day,
    parse_time_of_day,
    validate_window_bounds,
)

TemporalLabel = Literal["inside", "outside", "weekend", "holiday"]
KeywordLabel = Literal["PT", "OT", "Consulting", "Other"]

TEMPORAL_LABELS: tuple[str, ...] = ("inside", "outside", "weekend", "holiday")
KEYWORD_LABELS: tuple[str, ...] = ("PT", "OT", "Consulting", "Other")
SPECIAL_LABELS: tuple[str, ...] = ("bc", "body_challenge")


class WorkSession(BaseModel):
    """A staff member's appointment slot as handed over by the data layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | int | None = None
    staff_id: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    title: str = ""
    temporal_label: str | None = Field(default=None, alias="schedule_type")
    salary_eligible: bool | None = Field(default=None, alias="counted_for_salary")
    status: str | None = None
    classifier_version: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _blank_title(cls, value: object) -> object:
        return "" if value is None else value


@dataclass(frozen=True)
class WorkHoursWindow:
    """Half-open ``[start_of_day, end_of_day)`` business-hours interval."""

    start_of_day: time
    end_of_day: time

    def __post_init__(self) -> None:
        validate_window_bounds(self.start_of_day, self.end_of_day)

    @classmethod
    def parse(cls, start: str | time, end: str | time) -> "WorkHoursWindow":
        return cls(parse_time_of_day(start), parse_time_of_day(end))

    @classmethod
    def from_bounds(cls, start: str | time | None, end: str | time | None) -> "WorkHoursWindow | None":
        # A staff row with only one bound set has no usable window.
        if not start or not end:
            return None
        return cls.parse(start, end)

    def contains(self, moment: time | datetime) -> bool:
        minutes = minutes_of_day(moment)
        return minutes_of_day(self.start_of_day) <= minutes < minutes_of_day(self.end_of_day)


class PayrollStats(BaseModel):
    """Completed, salary-eligible session counts per stored temporal label."""

    inside: int = 0
    outside: int = 0
    weekend: int = 0
    holiday: int = 0
    bc: int = 0
    total: int = 0
    unrecognized: dict[str, int] = Field(default_factory=dict)

    def to_salary_fields(self) -> dict[str, int]:
        return {
            "pt_total_count": self.total,
            "pt_inside_count": self.inside,
            "pt_outside_count": self.outside,
            "pt_weekend_count": self.weekend,
            "pt_holiday_count": self.holiday,
            "bc_count": self.bc,
        }


class ReportStats(BaseModel):
    """Keyword-derived session counts shown on the staff monthly report."""

    model_config = ConfigDict(populate_by_name=True)

    pt: int = Field(default=0, alias="PT")
    ot: int = Field(default=0, alias="OT")
    consulting: int = Field(default=0, alias="Consulting")
    other: int = Field(default=0, alias="Other")
    total: int = 0
    scope: Literal["all", "salary"] = "all"


class ChartPoint(BaseModel):
    label: str
    value: int
    color: str
