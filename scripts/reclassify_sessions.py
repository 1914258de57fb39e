#!/usr/bin/env python
"""Backfill stored temporal labels for an exported session CSV."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from session_engine.application import SessionStatsService
from session_engine.core.csvio import read_session_rows, write_records_to_csv
from session_engine.core.schema import WorkHoursWindow
from session_engine.infrastructure import YamlHolidayProvider
from session_engine.logging_config import setup_logging
from session_engine.settings import EngineSettings

logger = logging.getLogger("reclassify_sessions")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Re-derive temporal labels with the current rules")
    parser.add_argument("--input", required=True, help="session CSV exported from the data layer")
    parser.add_argument("--output", required=True, help="where to write the relabelled CSV")
    parser.add_argument("--work-start", help="business hours start, HH:MM")
    parser.add_argument("--work-end", help="business hours end, HH:MM")
    parser.add_argument(
        "--holidays",
        action="append",
        type=Path,
        help="holiday table (YAML); repeat to merge several tables",
    )
    parser.add_argument("--only-stale", action="store_true", help="skip rows already on the current version")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = EngineSettings.from_env()
    setup_logging(settings.log_level)

    provider = YamlHolidayProvider(*(args.holidays or [settings.holiday_calendar_path]))
    service = SessionStatsService(provider)
    window = WorkHoursWindow.from_bounds(args.work_start, args.work_end)

    rows = read_session_rows(Path(args.input))
    report = service.reclassify(rows, default_window=window, only_stale=args.only_stale)
    for change in report.changes:
        logger.info("session %s: %s -> %s", change.session_id, change.before, change.after)

    write_records_to_csv(
        Path(args.output),
        [session.model_dump(mode="json", by_alias=True) for session in report.sessions],
    )
    print(f"{report.changed} of {len(report.sessions)} session(s) relabelled: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
