"""Achievement endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import AchievementCreate, AchievementResponse, AchievementUpdate
from job_vault.services import AchievementService

router = APIRouter()

get_service = provide(AchievementService)


@router.post("", response_model=AchievementResponse, status_code=201)
def create_achievement(achievement: AchievementCreate, service: AchievementService = Depends(get_service)):
    """Add an achievement to one of the caller's work experiences."""
    return AchievementResponse.model_validate(service.create(achievement.model_dump()))


@router.put("/{achievement_id}", response_model=AchievementResponse)
def update_achievement(
    achievement_id: str,
    achievement: AchievementUpdate,
    service: AchievementService = Depends(get_service),
):
    updated = service.update(achievement_id, achievement.model_dump(exclude_unset=True))
    return AchievementResponse.model_validate(updated)


@router.delete("/{achievement_id}", status_code=204)
def delete_achievement(achievement_id: str, service: AchievementService = Depends(get_service)):
    service.delete(achievement_id)
    return Response(status_code=204)
