#!/usr/bin/env python
from __future__ import annotations

import argparse
import csv
from pathlib import Path


HEADER = [
    "id",
    "staff_id",
    "start_time",
    "end_time",
    "title",
    "schedule_type",
    "counted_for_salary",
    "status",
    "classifier_version",
]

SAMPLE_SLOTS = [
    ("01", "10:00", "PT 수업", "completed"),
    ("01", "19:00", "PT 개인", "completed"),
    ("02", "07:00", "OT 세션", "completed"),
    ("03", "14:00", "상담 예약", "scheduled"),
    ("06", "11:00", "PT 수업", "completed"),
    ("08", "15:00", "미팅", "completed"),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Write a sample work-session CSV for the backfill job")
    parser.add_argument("--month", required=True, help="month of the sessions, YYYY-MM")
    parser.add_argument("--output", required=True, help="output file path (.csv)")
    parser.add_argument("--staff", default="trainer-1", help="staff identifier")
    args = parser.parse_args()

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", newline="", encoding="utf-8") as fp:
        writer = csv.writer(fp)
        writer.writerow(HEADER)
        for index, (day, start, title, status) in enumerate(SAMPLE_SLOTS, start=1):
            hour = int(start[:2]) + 1
            writer.writerow([
                f"{args.month}-s{index:03d}",
                args.staff,
                f"{args.month}-{day}T{start}:00",
                f"{args.month}-{day}T{hour:02d}:{start[3:]}:00",
                title,
                "",
                "true",
                status,
                "",
            ])
    print(f"sample sessions written: {output}")


if __name__ == "__main__":
    main()
