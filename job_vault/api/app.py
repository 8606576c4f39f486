"""FastAPI application."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from time import perf_counter
from urllib.parse import quote

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded

from job_vault.api.limiter import configure_limiter, limiter
from job_vault.config import Settings, settings
from job_vault.db import PersistenceClient, create_client
from job_vault.errors import ErrorKind, ServiceError
from job_vault.resume.export import PdfRenderer, PlaywrightPdfRenderer

logger = logging.getLogger("job_vault.api")

AUTH_COOKIE = "job-vault-auth"
PUBLIC_ROUTES = ("/login", "/signup", "/auth/callback", "/reset-password")
# Served without the page session check
UNGUARDED_PREFIXES = ("/api/", "/health", "/docs", "/redoc", "/openapi.json", "/assets/", "/favicon.ico")


def _is_guarded_page(path: str) -> bool:
    if path in PUBLIC_ROUTES:
        return False
    return not path.startswith(UNGUARDED_PREFIXES)


def create_app(
    client: PersistenceClient | None = None,
    pdf_renderer: PdfRenderer | None = None,
    config: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or settings
    client = client or create_client(config)
    pdf_renderer = pdf_renderer or PlaywrightPdfRenderer(timeout_ms=config.pdf_timeout_ms)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize database on startup."""
        try:
            client.create_all()
        except ValueError:
            logger.warning("DATABASE_URL not configured, skipping table creation")
        yield
        client.dispose()

    app = FastAPI(
        title="Job Vault API",
        description="Job application tracking, professional history and resumes",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.persistence = client
    app.state.pdf_renderer = pdf_renderer
    app.state.settings = config
    configure_limiter(config)
    app.state.limiter = limiter

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(show_detailed=config.show_detailed_errors),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Render request validation failures in the service error shape."""
        error = ServiceError(ErrorKind.VALIDATION_FAILED, str(exc.errors()))
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_dict(show_detailed=config.show_detailed_errors),
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        """Return 429 with a clear message when rate limit is exceeded."""
        return JSONResponse(
            status_code=429,
            content={"detail": f"Rate limit exceeded: {exc.detail}"},
        )

    @app.middleware("http")
    async def page_auth_middleware(request: Request, call_next):
        """Send unauthenticated page requests to the login page."""
        path = request.url.path
        if not _is_guarded_page(path):
            return await call_next(request)

        token = request.cookies.get(AUTH_COOKIE)
        if token:
            try:
                client.get_user(token)
                return await call_next(request)
            except ServiceError as e:
                logger.info(f"[AUTH_MIDDLEWARE] {e.dev_message}")
        return RedirectResponse(url=f"/login?from={quote(path)}", status_code=307)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                500,
                duration_ms,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in config.cors_origins.split(",") if origin.strip()],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    from job_vault.api.routes import (
        achievement_metrics,
        achievements,
        auth,
        certifications,
        education,
        export,
        history,
        jobs,
        projects,
        resumes,
        skill_contexts,
        skills,
        work_experiences,
    )

    app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(jobs.router, prefix="/api/jobs", tags=["Jobs"])
    app.include_router(history.router, prefix="/api/history", tags=["History"])
    app.include_router(work_experiences.router, prefix="/api/work-experiences", tags=["History"])
    app.include_router(achievements.router, prefix="/api/achievements", tags=["History"])
    app.include_router(achievement_metrics.router, prefix="/api/achievement-metrics", tags=["History"])
    app.include_router(education.router, prefix="/api/education", tags=["History"])
    app.include_router(projects.router, prefix="/api/projects", tags=["Projects"])
    app.include_router(skills.router, prefix="/api/skills", tags=["History"])
    app.include_router(skill_contexts.router, prefix="/api/skill-contexts", tags=["History"])
    app.include_router(certifications.router, prefix="/api/certifications", tags=["History"])
    app.include_router(resumes.router, prefix="/api/resumes", tags=["Resumes"])
    app.include_router(export.router, prefix="/api/resume", tags=["Resumes"])

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    # Serve static files from frontend build
    frontend_dir = Path(config.frontend_dir) if config.frontend_dir else None
    if frontend_dir is not None and frontend_dir.exists():
        if (frontend_dir / "assets").exists():
            app.mount("/assets", StaticFiles(directory=frontend_dir / "assets"), name="assets")

        @app.get("/{full_path:path}", include_in_schema=False)
        async def serve_spa(full_path: str):
            """Serve the SPA for all non-API routes."""
            file_path = frontend_dir / full_path
            if file_path.exists() and file_path.is_file():
                return FileResponse(file_path)
            return FileResponse(frontend_dir / "index.html")

    return app


app = create_app()
