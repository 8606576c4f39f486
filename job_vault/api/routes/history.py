"""Professional history overview."""

from fastapi import APIRouter, Depends

from job_vault.api.deps import provide
from job_vault.api.schemas import HistoryResponse
from job_vault.services import ProfessionalHistoryService

router = APIRouter()


@router.get("", response_model=HistoryResponse)
def get_history(service: ProfessionalHistoryService = Depends(provide(ProfessionalHistoryService))):
    """The caller's history with every record type. Created on first access."""
    return HistoryResponse.model_validate(service.overview(), from_attributes=True)
