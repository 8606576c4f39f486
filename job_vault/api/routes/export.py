"""PDF export and sample resume seeding."""

import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from job_vault.api.deps import get_current_user, get_db, get_pdf_renderer, provide
from job_vault.api.limiter import export_limit, limiter, seed_limit
from job_vault.api.schemas import ResumeDetailResponse
from job_vault.auth import AuthUser
from job_vault.resume.export import PdfRenderer, export_resume
from job_vault.services import ResumeService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/export/{export_id}")
@limiter.limit(export_limit)
async def export_pdf(
    request: Request,
    export_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(get_current_user),
    renderer: PdfRenderer = Depends(get_pdf_renderer),
):
    """Render an export record's resume as an A4 PDF download."""
    result = await export_resume(db, user, export_id, renderer)
    return Response(
        content=result.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


@router.post("/seed", response_model=ResumeDetailResponse, status_code=201)
@limiter.limit(seed_limit)
def seed_resume(request: Request, service: ResumeService = Depends(provide(ResumeService))):
    """Create the sample resume for the current user."""
    resume = service.seed_sample()
    logger.info(f"Seeded sample resume {resume.id} for user {service.user.id}")
    return ResumeDetailResponse.model_validate(resume)
