"""Jobs service."""

from job_vault.db.tables import Job, JobStatus, utcnow
from job_vault.errors import ErrorKind, ServiceError, service_boundary
from job_vault.services.base import UserOwnedService
from job_vault.utils.status_pipeline import StageSummary, summarize_pipeline

STATUSES = frozenset(status.value for status in JobStatus)


class JobService(UserOwnedService):
    """Jobs the user is tracking, newest first."""

    model = Job
    label = "JOB"
    entity_name = "Job"
    order_by = (Job.created_at.desc(), Job.id.desc())

    def _owner_fields(self) -> dict:
        fields = super()._owner_fields()
        fields["date_saved"] = utcnow()
        return fields

    def _before_write(self, values: dict) -> None:
        """Normalize ``status`` to its upper-case pipeline value."""
        if "status" not in values:
            return
        status = values["status"]
        if isinstance(status, JobStatus):
            status = status.value
        if not isinstance(status, str) or status.upper() not in STATUSES:
            raise ServiceError(ErrorKind.VALIDATION_FAILED, f"Unknown job status: {status}")
        values["status"] = status.upper()

    @service_boundary("pipeline")
    def pipeline(self) -> list[StageSummary]:
        """Status counts across all of the user's jobs."""
        return summarize_pipeline(self.list())
