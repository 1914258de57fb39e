from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pydantic
import pytest

from session_engine.core.schema import ReportStats, WorkSession
from session_engine.core.stats_v1 import (
    as_sessions,
    chart_data,
    count_by_day,
    day_key,
    filter_by_date_range,
    filter_by_month,
    group_by_category,
    month_key,
    payroll_stats,
    report_stats,
    salary_report_stats,
)


def _session(**overrides) -> dict:
    row = {
        "id": "s-1",
        "title": "PT 수업",
        "start_time": "2025-12-17T10:00:00",
        "end_time": "2025-12-17T11:00:00",
        "schedule_type": "inside",
        "counted_for_salary": True,
        "status": "completed",
    }
    row.update(overrides)
    return row


def test_payroll_excludes_ineligible_sessions():
    stats = payroll_stats([
        _session(schedule_type="inside", counted_for_salary=True),
        _session(schedule_type="inside", counted_for_salary=False),
    ])
    assert stats.inside == 1
    assert stats.total == 1


def test_payroll_counts_only_completed_sessions():
    stats = payroll_stats([
        _session(status="completed"),
        _session(status="scheduled"),
        _session(status="no_show"),
        _session(status=None),
    ])
    assert stats.inside == 1
    assert stats.total == 1


def test_payroll_missing_eligibility_defaults_to_eligible():
    row = _session()
    del row["counted_for_salary"]
    assert payroll_stats([row, _session(counted_for_salary=None)]).inside == 2


def test_payroll_buckets_and_body_challenge_aliases():
    stats = payroll_stats([
        _session(schedule_type="inside"),
        _session(schedule_type="outside"),
        _session(schedule_type="outside"),
        _session(schedule_type="weekend"),
        _session(schedule_type="holiday"),
        _session(schedule_type="bc"),
        _session(schedule_type="body_challenge"),
    ])
    assert (stats.inside, stats.outside, stats.weekend, stats.holiday, stats.bc) == (1, 2, 1, 1, 2)
    assert stats.total == 7
    assert stats.to_salary_fields() == {
        "pt_total_count": 7,
        "pt_inside_count": 1,
        "pt_outside_count": 2,
        "pt_weekend_count": 1,
        "pt_holiday_count": 1,
        "bc_count": 2,
    }


def test_payroll_reports_zero_buckets():
    stats = payroll_stats([])
    assert stats.model_dump() == {
        "inside": 0,
        "outside": 0,
        "weekend": 0,
        "holiday": 0,
        "bc": 0,
        "total": 0,
        "unrecognized": {},
    }


def test_payroll_surfaces_unknown_labels():
    stats = payroll_stats([_session(schedule_type="night"), _session(schedule_type=None), _session()])
    assert stats.inside == 1
    assert stats.total == 1
    assert stats.unrecognized == {"night": 1, "None": 1}


def test_payroll_trusts_stored_label():
    # A Saturday session stored as inside stays inside; labels are not re-derived.
    stats = payroll_stats([_session(start_time="2025-12-20T10:00:00", schedule_type="inside")])
    assert stats.inside == 1
    assert stats.weekend == 0


def test_report_stats_by_title():
    rows = [_session(title=title) for title in ["PT 수업", "PT 개인", "OT 세션", "상담 예약", "미팅"]]
    stats = report_stats(rows)
    assert stats.model_dump(by_alias=True) == {
        "PT": 2,
        "OT": 1,
        "Consulting": 1,
        "Other": 1,
        "total": 5,
        "scope": "all",
    }


def test_report_stats_ignore_completion_status():
    rows = [_session(status="scheduled"), _session(status="cancelled"), _session(status=None)]
    assert report_stats(rows).pt == 3
    assert payroll_stats(rows).total == 0


def test_salary_report_filters_eligibility_only():
    rows = [
        _session(counted_for_salary=True),
        _session(counted_for_salary=False),
        _session(counted_for_salary=True, status="scheduled"),
    ]
    stats = salary_report_stats(rows)
    assert stats.pt == 2
    assert stats.total == 2
    assert stats.scope == "salary"
    assert report_stats(rows, salary_only=True) == stats


def test_empty_report():
    assert report_stats([]) == ReportStats(PT=0, OT=0, Consulting=0, Other=0, total=0)


def test_key_helpers_are_prefixes():
    assert day_key("2025-12-17T10:00:00+09:00") == "2025-12-17"
    assert month_key("2025-12-17T10:00:00") == "2025-12"
    session = as_sessions([_session(start_time="2025-12-31T23:30:00+09:00")])[0]
    assert day_key(session.start_time) == "2025-12-31"
    assert month_key(session.start_time) == "2025-12"


def test_filter_by_month():
    rows = [
        _session(id="a", start_time="2025-11-30T10:00:00"),
        _session(id="b", start_time="2025-12-01T10:00:00"),
        _session(id="c", start_time="2025-12-31T22:00:00"),
        _session(id="d", start_time="2026-01-01T10:00:00"),
    ]
    assert [session.id for session in filter_by_month(rows, "2025-12")] == ["b", "c"]


def test_filter_by_date_range_is_inclusive():
    rows = [_session(id=str(day), start_time=f"2025-12-{day:02d}T10:00:00") for day in (14, 15, 16, 17, 18)]
    selected = filter_by_date_range(rows, "2025-12-15", "2025-12-17")
    assert [session.id for session in selected] == ["15", "16", "17"]


def test_group_by_category_keeps_every_bucket():
    rows = [_session(id="1", title="PT 수업"), _session(id="2", title="미팅"), _session(id="3", title="PT 상담")]
    groups = group_by_category(rows)
    assert list(groups) == ["PT", "OT", "Consulting", "Other"]
    assert [session.id for session in groups["PT"]] == ["1", "3"]
    assert groups["OT"] == []
    assert [session.id for session in groups["Other"]] == ["2"]


def test_count_by_day():
    rows = [
        _session(start_time="2025-12-17T10:00:00"),
        _session(start_time="2025-12-17T15:00:00"),
        _session(start_time="2025-12-18T09:00:00"),
    ]
    assert count_by_day(rows) == {"2025-12-17": 2, "2025-12-18": 1}


def test_chart_data():
    points = chart_data(ReportStats(PT=3, OT=2, Consulting=1, Other=4, total=10))
    assert [(point.label, point.value, point.color) for point in points] == [
        ("PT", 3, "#3B82F6"),
        ("OT", 2, "#8B5CF6"),
        ("상담", 1, "#10B981"),
    ]


def test_sessions_are_not_mutated():
    session = WorkSession.model_validate(_session())
    before = session.model_dump()
    payroll_stats([session])
    report_stats([session])
    group_by_category([session])
    assert session.model_dump() == before


def test_malformed_row_fails_at_the_boundary():
    with pytest.raises(pydantic.ValidationError):
        payroll_stats([_session(start_time="yesterday")])


def test_payroll_rows_without_start_time():
    # Column set selected by the salary screen: no timestamps at all.
    rows = [
        {"staff_id": "a", "schedule_type": "inside", "counted_for_salary": True, "status": "completed"},
        {"staff_id": "a", "schedule_type": "inside", "counted_for_salary": False, "status": "completed"},
    ]
    stats = payroll_stats(rows)
    assert stats.inside == 1
    assert stats.total == 1


def test_report_rows_with_title_only():
    rows = [{"title": "PT 수업"}, {"title": "PT 개인"}, {"title": "OT 세션"}, {"title": "상담 예약"}, {"title": "미팅"}]
    stats = report_stats(rows)
    assert stats.model_dump(by_alias=True, exclude={"scope"}) == {
        "PT": 2,
        "OT": 1,
        "Consulting": 1,
        "Other": 1,
        "total": 5,
    }


def test_salary_report_rows_without_start_time():
    rows = [
        {"title": "PT 수업", "counted_for_salary": True},
        {"title": "PT 수업", "counted_for_salary": False},
        {"title": "OT 세션"},
    ]
    stats = salary_report_stats(rows)
    assert (stats.pt, stats.ot, stats.total) == (1, 1, 2)


def test_date_helpers_skip_rows_without_start_time():
    rows = [{"id": "undated", "title": "PT 수업"}, _session(id="dated")]
    assert [session.id for session in filter_by_month(rows, "2025-12")] == ["dated"]
    assert [session.id for session in filter_by_date_range(rows, "2025-12-01", "2025-12-31")] == ["dated"]
    assert count_by_day(rows) == {"2025-12-17": 1}
    assert [session.id for session in group_by_category(rows)["PT"]] == ["undated", "dated"]
