"""Resume endpoints: resumes, sections, items, preview and export records."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import HTMLResponse

from job_vault.api.deps import provide
from job_vault.api.schemas import (
    ExportResponse,
    ItemCreate,
    ItemResponse,
    ItemUpdate,
    ReorderRequest,
    ResumeCreate,
    ResumeDetailResponse,
    ResumeResponse,
    ResumeUpdate,
    SectionCreate,
    SectionResponse,
    SectionUpdate,
)
from job_vault.resume import ResumeLayout, build_layout, render_resume_html
from job_vault.services import ResumeService

router = APIRouter()

get_service = provide(ResumeService)


@router.get("", response_model=list[ResumeResponse])
def list_resumes(service: ResumeService = Depends(get_service)):
    """List the user's resumes, most recently updated first."""
    return [ResumeResponse.model_validate(r) for r in service.list()]


@router.post("", response_model=ResumeResponse, status_code=201)
def create_resume(resume: ResumeCreate, service: ResumeService = Depends(get_service)):
    return ResumeResponse.model_validate(service.create(resume.model_dump()))


@router.get("/{resume_id}", response_model=ResumeDetailResponse)
def get_resume(resume_id: str, service: ResumeService = Depends(get_service)):
    """A resume with its sections in display order."""
    return ResumeDetailResponse.model_validate(service.get(resume_id))


@router.put("/{resume_id}", response_model=ResumeResponse)
def update_resume(resume_id: str, resume: ResumeUpdate, service: ResumeService = Depends(get_service)):
    return ResumeResponse.model_validate(service.update(resume_id, resume.model_dump(exclude_unset=True)))


@router.delete("/{resume_id}", status_code=204)
def delete_resume(resume_id: str, service: ResumeService = Depends(get_service)):
    service.delete(resume_id)
    return Response(status_code=204)


# Sections


@router.post("/{resume_id}/sections", response_model=SectionResponse, status_code=201)
def create_section(resume_id: str, section: SectionCreate, service: ResumeService = Depends(get_service)):
    """Append a section to the end of the resume."""
    return SectionResponse.model_validate(service.create_section(resume_id, section.model_dump()))


@router.post("/{resume_id}/sections/reorder", response_model=list[SectionResponse])
def reorder_sections(resume_id: str, move: ReorderRequest, service: ResumeService = Depends(get_service)):
    """Move one section; every section is renumbered in a single transaction."""
    sections = service.reorder_sections(resume_id, move.source_index, move.destination_index)
    return [SectionResponse.model_validate(s) for s in sections]


@router.put("/{resume_id}/sections/{section_id}", response_model=SectionResponse)
def update_section(
    resume_id: str,
    section_id: str,
    section: SectionUpdate,
    service: ResumeService = Depends(get_service),
):
    updated = service.update_section(resume_id, section_id, section.model_dump(exclude_unset=True))
    return SectionResponse.model_validate(updated)


@router.delete("/{resume_id}/sections/{section_id}", status_code=204)
def delete_section(resume_id: str, section_id: str, service: ResumeService = Depends(get_service)):
    service.delete_section(resume_id, section_id)
    return Response(status_code=204)


# Items


@router.post("/{resume_id}/sections/{section_id}/items", response_model=ItemResponse, status_code=201)
def create_item(
    resume_id: str,
    section_id: str,
    item: ItemCreate,
    service: ResumeService = Depends(get_service),
):
    """Link a professional-history record into a section."""
    return ItemResponse.model_validate(service.create_item(resume_id, section_id, item.model_dump(exclude_none=True)))


@router.put("/{resume_id}/items/{item_id}", response_model=ItemResponse)
def update_item(resume_id: str, item_id: str, item: ItemUpdate, service: ResumeService = Depends(get_service)):
    return ItemResponse.model_validate(service.update_item(resume_id, item_id, item.model_dump(exclude_unset=True)))


@router.delete("/{resume_id}/items/{item_id}", status_code=204)
def delete_item(resume_id: str, item_id: str, service: ResumeService = Depends(get_service)):
    service.delete_item(resume_id, item_id)
    return Response(status_code=204)


# Preview


@router.get("/{resume_id}/preview", response_model=ResumeLayout)
def preview_resume(resume_id: str, service: ResumeService = Depends(get_service)):
    """Layout description the preview renders."""
    resume = service.get(resume_id)
    return build_layout(resume, resume.sections)


@router.get("/{resume_id}/preview.html", response_class=HTMLResponse)
def preview_resume_html(resume_id: str, service: ResumeService = Depends(get_service)):
    """The same HTML the PDF export rasterizes."""
    resume = service.get(resume_id)
    return HTMLResponse(render_resume_html(build_layout(resume, resume.sections)))


# Export records


@router.get("/{resume_id}/exports", response_model=list[ExportResponse])
def list_exports(resume_id: str, service: ResumeService = Depends(get_service)):
    return [ExportResponse.model_validate(e) for e in service.list_exports(resume_id)]


@router.post("/{resume_id}/exports", response_model=ExportResponse, status_code=201)
def create_export(resume_id: str, service: ResumeService = Depends(get_service)):
    """Record an export; fetch the PDF from ``/api/resume/export/{id}``."""
    return ExportResponse.model_validate(service.create_export(resume_id))
