"""Payroll and staff-report statistics built on :func:`aggregate`.

Payroll counts answer "what was paid for": only completed, salary-eligible
sessions count, bucketed by the temporal label stored at write time.  Report
counts answer "what was scheduled": every session (or every salary-eligible
one) counts, bucketed by title keyword regardless of completion status.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping, Sequence, Union

from session_engine.core.aggregate import aggregate
from session_engine.core.keywords import KEYWORD_RULES, KeywordRule, classify_title, rule_labels
from session_engine.core.schema import (
    KEYWORD_LABELS,
    TEMPORAL_LABELS,
    ChartPoint,
    PayrollStats,
    ReportStats,
    WorkSession,
)

PAYROLL_LABELS: tuple[str, ...] = TEMPORAL_LABELS + ("bc",)
PAYROLL_LABEL_ALIASES: dict[str, str] = {"body_challenge": "bc"}
COMPLETED_STATUS = "completed"

CHART_SERIES: tuple[tuple[str, str, str], ...] = (
    ("PT", "pt", "#3B82F6"),
    ("OT", "ot", "#8B5CF6"),
    ("상담", "consulting", "#10B981"),
)

SessionLike = Union[WorkSession, Mapping[str, object]]


def as_sessions(rows: Iterable[SessionLike]) -> list[WorkSession]:
    return [row if isinstance(row, WorkSession) else WorkSession.model_validate(row) for row in rows]


# ----------------------------------------------------------------------
# predicates and classifiers
# ----------------------------------------------------------------------
def is_salary_eligible(session: WorkSession) -> bool:
    return session.salary_eligible is not False


def is_completed(session: WorkSession) -> bool:
    return session.status == COMPLETED_STATUS


def stored_temporal_label(session: WorkSession) -> str | None:
    label = session.temporal_label
    if label is None:
        return None
    return PAYROLL_LABEL_ALIASES.get(label, label)


def title_label(session: WorkSession) -> str:
    return classify_title(session.title)


# ----------------------------------------------------------------------
# named aggregations
# ----------------------------------------------------------------------
def payroll_stats(sessions: Iterable[SessionLike]) -> PayrollStats:
    tally = aggregate(
        as_sessions(sessions),
        stored_temporal_label,
        is_salary_eligible,
        is_completed,
        labels=PAYROLL_LABELS,
    )
    return PayrollStats(**tally.counts, total=tally.total, unrecognized=tally.unrecognized)


def report_stats(sessions: Iterable[SessionLike], *, salary_only: bool = False) -> ReportStats:
    predicates = (is_salary_eligible,) if salary_only else ()
    tally = aggregate(as_sessions(sessions), title_label, *predicates, labels=KEYWORD_LABELS)
    return ReportStats(
        **tally.counts,
        total=tally.total,
        scope="salary" if salary_only else "all",
    )


def salary_report_stats(sessions: Iterable[SessionLike]) -> ReportStats:
    return report_stats(sessions, salary_only=True)


# ----------------------------------------------------------------------
# grouping helpers
# ----------------------------------------------------------------------
def day_key(value: str | datetime) -> str:
    if isinstance(value, datetime):
        value = value.isoformat()
    return value[:10]


def month_key(value: str | datetime) -> str:
    if isinstance(value, datetime):
        value = value.isoformat()
    return value[:7]


def filter_by_month(sessions: Iterable[SessionLike], year_month: str) -> list[WorkSession]:
    return [
        session
        for session in as_sessions(sessions)
        if session.start_time is not None and month_key(session.start_time) == year_month
    ]


def filter_by_date_range(sessions: Iterable[SessionLike], start_date: str, end_date: str) -> list[WorkSession]:
    """Keep sessions whose start day lies in ``[start_date, end_date]``.

    Rows without a start time never match a date filter.
    """

    return [
        session
        for session in as_sessions(sessions)
        if session.start_time is not None and start_date <= day_key(session.start_time) <= end_date
    ]


def group_by_category(
    sessions: Iterable[SessionLike],
    rules: Sequence[KeywordRule] = KEYWORD_RULES,
) -> dict[str, list[WorkSession]]:
    groups: dict[str, list[WorkSession]] = {label: [] for label in rule_labels(rules)}
    for session in as_sessions(sessions):
        groups[classify_title(session.title, rules)].append(session)
    return groups


def count_by_day(sessions: Iterable[SessionLike]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for session in as_sessions(sessions):
        if session.start_time is None:
            continue
        key = day_key(session.start_time)
        counts[key] = counts.get(key, 0) + 1
    return counts


def chart_data(stats: ReportStats) -> list[ChartPoint]:
    return [
        ChartPoint(label=label, value=getattr(stats, attr), color=color)
        for label, attr, color in CHART_SERIES
    ]
