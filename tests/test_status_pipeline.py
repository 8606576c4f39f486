"""Tests for the jobs status pipeline summary."""

import pytest

from job_vault.db.tables import JobStatus
from job_vault.utils.status_pipeline import summarize_pipeline, width_class


def test_counts_sum_to_total_in_pipeline_order():
    jobs = [{"status": s} for s in ["APPLIED", "APPLIED", "BOOKMARKED", "interviewing", "ACCEPTED"]]

    stages = summarize_pipeline(jobs)

    assert [s.status for s in stages] == [s.value for s in JobStatus]
    assert sum(s.count for s in stages) == len(jobs)
    counts = {s.status: s.count for s in stages}
    assert counts["APPLIED"] == 2
    assert counts["INTERVIEWING"] == 1
    assert counts["NEGOTIATING"] == 0


def test_labels_are_title_case():
    stages = summarize_pipeline([])
    assert stages[0].label == "Bookmarked"


def test_empty_pipeline_has_zero_widths():
    assert all(s.width_class == "w-0" for s in summarize_pipeline([]))


def test_accepts_enum_statuses():
    stages = summarize_pipeline([{"status": JobStatus.NEGOTIATING}])
    assert {s.status: s.count for s in stages}["NEGOTIATING"] == 1


@pytest.mark.parametrize(
    "count,total,expected",
    [(0, 10, "w-0"), (1, 10, "w-1/4"), (3, 10, "w-1/2"), (5, 10, "w-1/2"), (6, 10, "w-3/4"), (10, 10, "w-full")],
)
def test_width_rounds_up_to_quartile(count, total, expected):
    assert width_class(count, total) == expected


def test_unknown_status_rejected():
    with pytest.raises(ValueError):
        summarize_pipeline([{"status": "GHOSTED"}])
