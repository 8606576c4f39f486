"""
Status pipeline summary for the jobs board.

Counts jobs per fixed status and gives each bucket a bar width class,
rounded up to the nearest quartile of the total.
"""

import math
from collections.abc import Iterable

from pydantic import BaseModel

from job_vault.db.tables import JobStatus

WIDTH_CLASSES = ("w-0", "w-1/4", "w-1/2", "w-3/4", "w-full")


class StageSummary(BaseModel):
    status: str
    label: str
    count: int
    width_class: str


def width_class(count: int, total: int) -> str:
    """Quartile width class for ``count`` out of ``total``."""
    if total <= 0 or count <= 0:
        return WIDTH_CLASSES[0]
    quartile = math.ceil(4 * count / total)
    return WIDTH_CLASSES[min(quartile, 4)]


def summarize_pipeline(jobs: Iterable) -> list[StageSummary]:
    """Tally jobs (objects or dicts with a ``status``) per pipeline stage."""
    counts = {status.value: 0 for status in JobStatus}
    for job in jobs:
        status = job["status"] if isinstance(job, dict) else job.status
        if isinstance(status, JobStatus):
            status = status.value
        key = status.upper()
        if key not in counts:
            raise ValueError(f"Unknown job status: {status}")
        counts[key] += 1

    total = sum(counts.values())
    return [
        StageSummary(
            status=status,
            label=status.title(),
            count=count,
            width_class=width_class(count, total),
        )
        for status, count in counts.items()
    ]
