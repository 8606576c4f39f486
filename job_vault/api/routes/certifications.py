"""Certification endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import CertificationCreate, CertificationResponse, CertificationUpdate
from job_vault.services import CertificationService

router = APIRouter()

get_service = provide(CertificationService)


@router.get("", response_model=list[CertificationResponse])
def list_certifications(service: CertificationService = Depends(get_service)):
    """Certifications, most recently issued first."""
    return [CertificationResponse.model_validate(c) for c in service.list()]


@router.post("", response_model=CertificationResponse, status_code=201)
def create_certification(certification: CertificationCreate, service: CertificationService = Depends(get_service)):
    return CertificationResponse.model_validate(service.create(certification.model_dump()))


@router.put("/{certification_id}", response_model=CertificationResponse)
def update_certification(
    certification_id: str,
    certification: CertificationUpdate,
    service: CertificationService = Depends(get_service),
):
    updated = service.update(certification_id, certification.model_dump(exclude_unset=True))
    return CertificationResponse.model_validate(updated)


@router.delete("/{certification_id}", status_code=204)
def delete_certification(certification_id: str, service: CertificationService = Depends(get_service)):
    service.delete(certification_id)
    return Response(status_code=204)
