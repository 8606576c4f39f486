"""Skill endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import SkillCreate, SkillResponse, SkillUpdate
from job_vault.services import SkillService

router = APIRouter()

get_service = provide(SkillService)


@router.get("", response_model=list[SkillResponse])
def list_skills(service: SkillService = Depends(get_service)):
    """Skills by name, with the contexts they were used in."""
    return [SkillResponse.model_validate(s) for s in service.list()]


@router.post("", response_model=SkillResponse, status_code=201)
def create_skill(skill: SkillCreate, service: SkillService = Depends(get_service)):
    return SkillResponse.model_validate(service.create(skill.model_dump()))


@router.put("/{skill_id}", response_model=SkillResponse)
def update_skill(skill_id: str, skill: SkillUpdate, service: SkillService = Depends(get_service)):
    return SkillResponse.model_validate(service.update(skill_id, skill.model_dump(exclude_unset=True)))


@router.delete("/{skill_id}", status_code=204)
def delete_skill(skill_id: str, service: SkillService = Depends(get_service)):
    service.delete(skill_id)
    return Response(status_code=204)
