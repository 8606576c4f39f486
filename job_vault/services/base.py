"""Shared CRUD behavior for the domain services."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Query, Session

from job_vault.auth import AuthUser
from job_vault.db.tables import utcnow
from job_vault.errors import ErrorKind, ServiceError, not_found, service_boundary, unauthenticated

# Never accepted from client input; owned or stamped by the service.
PROTECTED_FIELDS = frozenset({"id", "user_id", "history_id", "created_at", "updated_at", "date_saved"})


class EntityService:
    """list/get/create/update/delete over one table, scoped to the caller.

    Subclasses set ``model``, ``label``, ``entity_name`` and ``order_by`` and
    implement ``_scope`` (ownership filter) and ``_owner_fields`` (values
    stamped on insert).
    """

    model: Any = None
    label = "ENTITY"
    entity_name = "Record"
    order_by: tuple = ()

    def __init__(self, db: Session, user: AuthUser | None):
        self.db = db
        self.user = user

    def require_user(self) -> AuthUser:
        if self.user is None:
            raise unauthenticated()
        return self.user

    # Hooks

    def _scope(self, query: Query) -> Query:
        raise NotImplementedError

    def _owner_fields(self) -> dict:
        raise NotImplementedError

    def _before_write(self, values: dict) -> None:
        """Validate values about to be written. Raise ServiceError to reject."""

    # Helpers

    def _query(self) -> Query:
        self.require_user()
        return self._scope(self.db.query(self.model))

    def _find(self, entity_id):
        obj = self._query().filter(self.model.id == entity_id).first()
        if obj is None:
            raise not_found(self.entity_name)
        return obj

    def _clean(self, data: dict) -> dict:
        values = {}
        for key, value in data.items():
            if key in PROTECTED_FIELDS:
                continue
            if key not in self.model.__table__.columns:
                raise ServiceError(ErrorKind.VALIDATION_FAILED, f"Unknown field for {self.entity_name}: {key}")
            values[key] = value
        return values

    # Operations

    @service_boundary("list")
    def list(self) -> list:
        return self._query().order_by(*self.order_by).all()

    @service_boundary("get")
    def get(self, entity_id):
        return self._find(entity_id)

    @service_boundary("create")
    def create(self, data: dict):
        self.require_user()
        values = self._clean(data)
        self._before_write(values)
        now = utcnow()
        values.update(self._owner_fields())
        values.update(created_at=now, updated_at=now)

        obj = self.model(**values)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    @service_boundary("update")
    def update(self, entity_id, data: dict):
        obj = self._find(entity_id)
        values = self._clean(data)
        self._before_write(values)
        for key, value in values.items():
            setattr(obj, key, value)
        obj.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(obj)
        return obj

    @service_boundary("delete")
    def delete(self, entity_id) -> None:
        obj = self._find(entity_id)
        self.db.delete(obj)
        self.db.commit()


class UserOwnedService(EntityService):
    """Rows owned directly by a user via ``user_id``."""

    def _scope(self, query: Query) -> Query:
        return query.filter(self.model.user_id == self.user.id)

    def _owner_fields(self) -> dict:
        return {"user_id": self.require_user().id}
