"""Application service for session classification and statistics."""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

from session_engine.core.holidays import HolidayCalendar
from session_engine.core.schema import SPECIAL_LABELS, PayrollStats, ReportStats, WorkHoursWindow, WorkSession
from session_engine.core.stats_v1 import (
    SessionLike,
    as_sessions,
    filter_by_month,
    payroll_stats,
    report_stats,
)
from session_engine.core.temporal_v1 import CLASSIFIER_VERSION, classify_schedule_type
from session_engine.core.validation import ValidationError
from session_engine.domain import LabelChange, ReclassificationReport
from session_engine.infrastructure import HolidayProvider, YamlHolidayProvider
from session_engine.settings import EngineSettings

logger = logging.getLogger(__name__)


class SessionStatsService:
    """Classifies sessions on write and aggregates them on read."""

    def __init__(self, provider: HolidayProvider) -> None:
        self._provider = provider

    @property
    def calendar(self) -> HolidayCalendar:
        return self._provider.calendar()

    # ------------------------------------------------------------------
    # write path
    # ------------------------------------------------------------------
    def classify_on_write(self, session: SessionLike, window: WorkHoursWindow | None = None) -> WorkSession:
        (current,) = as_sessions([session])
        if current.start_time is None:
            raise ValidationError(f"session {current.id!r} has no start time to classify")
        label = classify_schedule_type(current.start_time, window, calendar=self.calendar)
        return current.model_copy(update={"temporal_label": label, "classifier_version": CLASSIFIER_VERSION})

    # ------------------------------------------------------------------
    # read path
    # ------------------------------------------------------------------
    def payroll_stats(self, sessions: Iterable[SessionLike], month: str | None = None) -> PayrollStats:
        rows = filter_by_month(sessions, month) if month else as_sessions(sessions)
        return payroll_stats(rows)

    def staff_report(
        self,
        sessions: Iterable[SessionLike],
        month: str | None = None,
        *,
        salary_only: bool = False,
    ) -> ReportStats:
        rows = filter_by_month(sessions, month) if month else as_sessions(sessions)
        return report_stats(rows, salary_only=salary_only)

    # ------------------------------------------------------------------
    # backfill
    # ------------------------------------------------------------------
    def reclassify(
        self,
        sessions: Iterable[SessionLike],
        windows: Mapping[str, WorkHoursWindow | None] | None = None,
        default_window: WorkHoursWindow | None = None,
        *,
        only_stale: bool = False,
    ) -> ReclassificationReport:
        """Re-derive stored temporal labels with the current rules and calendar.

        Sessions carrying a special label (body challenge) keep it, and with
        ``only_stale`` sessions already tagged with the current classifier
        version are left untouched.  Rows without a start time are kept as they
        are and counted as skipped.  Returns new session objects; the input is
        never modified.
        """

        windows = windows or {}
        calendar = self.calendar
        report = ReclassificationReport(classifier_version=CLASSIFIER_VERSION)

        for session in as_sessions(sessions):
            if session.temporal_label in SPECIAL_LABELS or (
                only_stale and session.classifier_version == CLASSIFIER_VERSION
            ):
                report.sessions.append(session)
                report.skipped += 1
                continue
            if session.start_time is None:
                logger.warning("session %r has no start time; stored label kept", session.id)
                report.sessions.append(session)
                report.skipped += 1
                continue

            window = windows.get(session.staff_id, default_window) if session.staff_id else default_window
            label = classify_schedule_type(session.start_time, window, calendar=calendar)
            if label != session.temporal_label:
                report.changes.append(LabelChange(session_id=session.id, before=session.temporal_label, after=label))
            report.sessions.append(
                session.model_copy(update={"temporal_label": label, "classifier_version": CLASSIFIER_VERSION})
            )

        logger.info(
            "reclassified %d session(s) with %s: %d changed, %d skipped",
            len(report.sessions) - report.skipped,
            CLASSIFIER_VERSION,
            report.changed,
            report.skipped,
        )
        return report


def create_session_stats_service(settings: EngineSettings | None = None) -> SessionStatsService:
    """Build a service whose calendar comes from the configured YAML table."""

    settings = settings or EngineSettings.from_env()
    return SessionStatsService(YamlHolidayProvider(settings.holiday_calendar_path))
