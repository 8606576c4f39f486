"""Skill context endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import SkillContextCreate, SkillContextResponse
from job_vault.services import SkillContextService

router = APIRouter()

get_service = provide(SkillContextService)


@router.post("", response_model=SkillContextResponse, status_code=201)
def create_skill_context(context: SkillContextCreate, service: SkillContextService = Depends(get_service)):
    return SkillContextResponse.model_validate(service.create(context.model_dump()))


@router.delete("/{context_id}", status_code=204)
def delete_skill_context(context_id: str, service: SkillContextService = Depends(get_service)):
    service.delete(context_id)
    return Response(status_code=204)
