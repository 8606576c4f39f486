"""Education endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import EducationCreate, EducationResponse, EducationUpdate
from job_vault.services import EducationService

router = APIRouter()

get_service = provide(EducationService)


@router.get("", response_model=list[EducationResponse])
def list_education(service: EducationService = Depends(get_service)):
    return [EducationResponse.model_validate(e) for e in service.list()]


@router.post("", response_model=EducationResponse, status_code=201)
def create_education(education: EducationCreate, service: EducationService = Depends(get_service)):
    return EducationResponse.model_validate(service.create(education.model_dump()))


@router.put("/{education_id}", response_model=EducationResponse)
def update_education(education_id: str, education: EducationUpdate, service: EducationService = Depends(get_service)):
    return EducationResponse.model_validate(service.update(education_id, education.model_dump(exclude_unset=True)))


@router.delete("/{education_id}", status_code=204)
def delete_education(education_id: str, service: EducationService = Depends(get_service)):
    service.delete(education_id)
    return Response(status_code=204)
