"""Request-scoped dependencies: persistence, identity, services."""

from collections.abc import Callable, Generator

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from job_vault.auth import AuthUser, parse_bearer
from job_vault.db import PersistenceClient
from job_vault.errors import ErrorKind, ServiceError
from job_vault.resume.export import PdfRenderer


def get_client(request: Request) -> PersistenceClient:
    return request.app.state.persistence


def get_db(client: PersistenceClient = Depends(get_client)) -> Generator[Session, None, None]:
    """Open a session for the request and always close it."""
    try:
        db = client.session()
    except ValueError as e:
        raise ServiceError(ErrorKind.UPSTREAM_FAILURE, str(e)) from e
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    authorization: str | None = Header(None),
    client: PersistenceClient = Depends(get_client),
) -> AuthUser:
    """Resolve the caller from ``Authorization: Bearer <token>``. 401 otherwise."""
    return client.get_user(parse_bearer(authorization))


def get_pdf_renderer(request: Request) -> PdfRenderer:
    return request.app.state.pdf_renderer


def provide(service_cls) -> Callable:
    """Dependency that builds ``service_cls`` for the current user."""

    def dependency(
        db: Session = Depends(get_db),
        user: AuthUser = Depends(get_current_user),
    ):
        return service_cls(db, user)

    return dependency
