"""Project endpoints."""

from fastapi import APIRouter, Depends, Response

from job_vault.api.deps import provide
from job_vault.api.schemas import ProjectCreate, ProjectResponse, ProjectUpdate
from job_vault.services import ProjectService

router = APIRouter()

get_service = provide(ProjectService)


@router.get("", response_model=list[ProjectResponse])
def list_projects(service: ProjectService = Depends(get_service)):
    """Projects, most recently added first."""
    return [ProjectResponse.model_validate(p) for p in service.list()]


@router.post("", response_model=ProjectResponse, status_code=201)
def create_project(project: ProjectCreate, service: ProjectService = Depends(get_service)):
    return ProjectResponse.model_validate(service.create(project.model_dump()))


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(project_id: str, project: ProjectUpdate, service: ProjectService = Depends(get_service)):
    return ProjectResponse.model_validate(service.update(project_id, project.model_dump(exclude_unset=True)))


@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: str, service: ProjectService = Depends(get_service)):
    service.delete(project_id)
    return Response(status_code=204)
