"""
Error taxonomy and the single error-mapping step used at every service boundary.

Services raise :class:`ServiceError` only. Raw SQLAlchemy or pydantic errors are
translated by :func:`map_exception` and never reach API callers.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum

from pydantic import ValidationError
from sqlalchemy.exc import DataError, IntegrityError, NoResultFound, SQLAlchemyError

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "UNAUTHENTICATED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"


USER_MESSAGES = {
    ErrorKind.UNAUTHENTICATED: "You are not authorized to perform this action.",
    ErrorKind.NOT_FOUND: "The requested resource was not found.",
    ErrorKind.VALIDATION_FAILED: "Please check your input and try again.",
    ErrorKind.UPSTREAM_FAILURE: "An error occurred while processing your request.",
}

STATUS_CODES = {
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILED: 422,
    ErrorKind.UPSTREAM_FAILURE: 500,
}


class ServiceError(Exception):
    """Uniform error raised by domain services and the export pipeline."""

    def __init__(self, kind: ErrorKind, dev_message: str = "", message: str | None = None):
        self.kind = kind
        self.message = message or USER_MESSAGES[kind]
        self.dev_message = dev_message or self.message
        super().__init__(self.dev_message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    def to_dict(self, show_detailed: bool = False) -> dict:
        """Serialize for an HTTP response; ``devMessage`` only when detail is enabled."""
        body = {"code": self.kind.value, "message": self.message}
        if show_detailed:
            body["devMessage"] = self.dev_message
        return body


def not_found(what: str) -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, f"{what} not found")


def unauthenticated(detail: str = "Not authenticated") -> ServiceError:
    return ServiceError(ErrorKind.UNAUTHENTICATED, detail)


def map_exception(exc: BaseException) -> ServiceError:
    """Translate any exception into a ServiceError with a closed kind."""
    if isinstance(exc, ServiceError):
        return exc
    if isinstance(exc, NoResultFound):
        return ServiceError(ErrorKind.NOT_FOUND, str(exc))
    if isinstance(exc, (IntegrityError, DataError)):
        return ServiceError(ErrorKind.VALIDATION_FAILED, f"Database rejected input: {exc.orig}")
    if isinstance(exc, ValidationError):
        return ServiceError(ErrorKind.VALIDATION_FAILED, str(exc))
    if isinstance(exc, SQLAlchemyError):
        return ServiceError(ErrorKind.UPSTREAM_FAILURE, f"Database error: {exc}")
    return ServiceError(ErrorKind.UPSTREAM_FAILURE, f"{type(exc).__name__}: {exc}")


def service_boundary(operation: str):
    """Wrap a service method so every failure leaves as a ServiceError.

    The session (``self.db``) is rolled back before the error propagates.
    Log lines are tagged ``[<LABEL>_<OPERATION>]`` where LABEL comes from the
    service's ``label`` attribute.
    """

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except Exception as exc:
                db = getattr(self, "db", None)
                if db is not None:
                    db.rollback()
                error = map_exception(exc)
                tag = f"{getattr(self, 'label', 'SERVICE')}_{operation}".upper()
                if error.kind is ErrorKind.UPSTREAM_FAILURE:
                    logger.exception(f"[{tag}] {error.dev_message}")
                else:
                    logger.info(f"[{tag}] {error.dev_message}")
                if error is exc:
                    raise
                raise error from exc

        return wrapper

    return decorator
