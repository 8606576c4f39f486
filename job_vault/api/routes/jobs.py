"""Job tracking endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import JobCreate, JobResponse, JobUpdate, PipelineResponse
from job_vault.services import JobService

router = APIRouter()

get_service = provide(JobService)


@router.get("", response_model=list[JobResponse])
def list_jobs(service: JobService = Depends(get_service)):
    """List the user's jobs, newest first."""
    return [JobResponse.model_validate(job) for job in service.list()]


@router.post("", response_model=JobResponse, status_code=201)
def create_job(job: JobCreate, service: JobService = Depends(get_service)):
    return JobResponse.model_validate(service.create(job.model_dump()))


@router.get("/pipeline", response_model=PipelineResponse)
def job_pipeline(service: JobService = Depends(get_service)):
    """Counts per status with bar width classes."""
    stages = service.pipeline()
    return PipelineResponse(total=sum(stage.count for stage in stages), stages=stages)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, service: JobService = Depends(get_service)):
    return JobResponse.model_validate(service.get(job_id))


@router.put("/{job_id}", response_model=JobResponse)
def update_job(job_id: int, job: JobUpdate, service: JobService = Depends(get_service)):
    return JobResponse.model_validate(service.update(job_id, job.model_dump(exclude_unset=True)))


@router.delete("/{job_id}", status_code=204)
def delete_job(job_id: int, service: JobService = Depends(get_service)):
    service.delete(job_id)
    return Response(status_code=204)
