"""
PDF export of a resume.

Flow: load the export record and its resume (scoped to the caller), build the
layout, render HTML, rasterize with a headless browser. The browser is opened
per export and closed on every exit path. Any failure surfaces as a
ServiceError, so a partial PDF is never returned.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from sqlalchemy.orm import Session

from job_vault.auth import AuthUser
from job_vault.errors import ErrorKind, ServiceError, map_exception
from job_vault.resume.html import render_resume_html
from job_vault.resume.layout import build_layout

logger = logging.getLogger(__name__)

PDF_FORMAT = "A4"
PDF_MARGIN = "0.4in"


class PdfRenderer(Protocol):
    async def render(self, html: str) -> bytes: ...


class PlaywrightPdfRenderer:
    """Rasterize HTML with headless Chromium via Playwright."""

    def __init__(self, timeout_ms: int = 30000, headless: bool = True):
        self.timeout_ms = timeout_ms
        self.headless = headless

    async def render(self, html: str) -> bytes:
        from playwright.async_api import async_playwright

        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=self.headless)
            try:
                page = await browser.new_page()
                page.set_default_timeout(self.timeout_ms)
                await page.set_content(html, wait_until="load")
                return await page.pdf(
                    format=PDF_FORMAT,
                    print_background=True,
                    margin={
                        "top": PDF_MARGIN,
                        "right": PDF_MARGIN,
                        "bottom": PDF_MARGIN,
                        "left": PDF_MARGIN,
                    },
                )
            finally:
                await browser.close()


@dataclass
class ExportResult:
    filename: str
    content: bytes


def export_filename(resume_name: str, on: date | None = None) -> str:
    """``<slugified name>-<YYYY-MM-DD>.pdf``"""
    slug = re.sub(r"\s+", "-", resume_name.strip().lower())
    slug = re.sub(r"[^a-z0-9._-]", "", slug) or "resume"
    return f"{slug}-{(on or date.today()).isoformat()}.pdf"


async def export_resume(db: Session, user: AuthUser | None, export_id: str, renderer: PdfRenderer) -> ExportResult:
    """Produce the PDF for an export record the caller owns."""
    from job_vault.services.resumes import ResumeService

    service = ResumeService(db, user)
    record = service.get_export(export_id)
    resume = service.get(record.resume_id)

    html = render_resume_html(build_layout(resume, resume.sections))
    try:
        content = await renderer.render(html)
    except Exception as e:
        error = map_exception(e)
        logger.exception(f"[RESUME_EXPORT] {export_id}: {error.dev_message}")
        raise ServiceError(ErrorKind.UPSTREAM_FAILURE, f"Failed to generate PDF: {error.dev_message}") from e

    if not content:
        raise ServiceError(ErrorKind.UPSTREAM_FAILURE, "Failed to generate PDF: renderer returned no data")

    logger.info(f"[RESUME_EXPORT] {export_id}: {len(content)} bytes")
    return ExportResult(filename=record.file_path, content=content)
