"""Work experience endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import WorkExperienceCreate, WorkExperienceResponse, WorkExperienceUpdate
from job_vault.services import WorkExperienceService

router = APIRouter()

get_service = provide(WorkExperienceService)


@router.get("", response_model=list[WorkExperienceResponse])
def list_work_experiences(service: WorkExperienceService = Depends(get_service)):
    """Work experiences with their achievements, most recent start first."""
    return [WorkExperienceResponse.model_validate(w) for w in service.list()]


@router.post("", response_model=WorkExperienceResponse, status_code=201)
def create_work_experience(experience: WorkExperienceCreate, service: WorkExperienceService = Depends(get_service)):
    return WorkExperienceResponse.model_validate(service.create(experience.model_dump()))


@router.put("/{experience_id}", response_model=WorkExperienceResponse)
def update_work_experience(
    experience_id: str,
    experience: WorkExperienceUpdate,
    service: WorkExperienceService = Depends(get_service),
):
    updated = service.update(experience_id, experience.model_dump(exclude_unset=True))
    return WorkExperienceResponse.model_validate(updated)


@router.delete("/{experience_id}", status_code=204)
def delete_work_experience(experience_id: str, service: WorkExperienceService = Depends(get_service)):
    service.delete(experience_id)
    return Response(status_code=204)
