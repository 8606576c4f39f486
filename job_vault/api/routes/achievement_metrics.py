"""Achievement metric endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import AchievementMetricCreate, AchievementMetricResponse
from job_vault.services import AchievementMetricService

router = APIRouter()

get_service = provide(AchievementMetricService)


@router.post("", response_model=AchievementMetricResponse, status_code=201)
def create_metric(metric: AchievementMetricCreate, service: AchievementMetricService = Depends(get_service)):
    return AchievementMetricResponse.model_validate(service.create(metric.model_dump()))


@router.delete("/{metric_id}", status_code=204)
def delete_metric(metric_id: str, service: AchievementMetricService = Depends(get_service)):
    service.delete(metric_id)
    return Response(status_code=204)
