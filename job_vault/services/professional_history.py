"""
Professional history: one container per user plus its career records.

Every record carries the owning ``history_id``. Child records (achievements,
their metrics, skill contexts) must point at a parent inside the same history.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, selectinload

from job_vault.auth import AuthUser
from job_vault.db.tables import (
    Achievement,
    AchievementMetric,
    Certification,
    Education,
    ProfessionalHistory,
    Project,
    Skill,
    SkillContext,
    WorkExperience,
)
from job_vault.errors import not_found, service_boundary, unauthenticated
from job_vault.services.base import EntityService

logger = logging.getLogger(__name__)


def ensure_history(db: Session, user_id: str) -> ProfessionalHistory:
    """Return the user's history, creating it on first access."""
    history = db.query(ProfessionalHistory).filter(ProfessionalHistory.user_id == user_id).first()
    if history is not None:
        return history

    history = ProfessionalHistory(user_id=user_id, is_complete=False)
    db.add(history)
    try:
        db.commit()
    except IntegrityError:
        # Another request created it first
        db.rollback()
        return db.query(ProfessionalHistory).filter(ProfessionalHistory.user_id == user_id).one()
    db.refresh(history)
    logger.info(f"Created professional history for user {user_id}")
    return history


class ProfessionalHistoryService:
    """Access to the caller's history container and a full overview."""

    label = "HISTORY"

    def __init__(self, db: Session, user: AuthUser | None):
        self.db = db
        self.user = user

    def _user_id(self) -> str:
        if self.user is None:
            raise unauthenticated()
        return self.user.id

    @service_boundary("get")
    def get_or_create(self) -> ProfessionalHistory:
        return ensure_history(self.db, self._user_id())

    @service_boundary("overview")
    def overview(self) -> dict:
        """The history with every record type, in display order."""
        history = ensure_history(self.db, self._user_id())
        hid = history.id
        return {
            "id": hid,
            "user_id": history.user_id,
            "is_complete": history.is_complete,
            "work_experiences": (
                self.db.query(WorkExperience)
                .options(selectinload(WorkExperience.achievements).selectinload(Achievement.metrics))
                .filter(WorkExperience.history_id == hid)
                .order_by(WorkExperience.start_date.desc())
                .all()
            ),
            "education": (
                self.db.query(Education)
                .filter(Education.history_id == hid)
                .order_by(Education.start_date.desc())
                .all()
            ),
            "projects": (
                self.db.query(Project)
                .filter(Project.history_id == hid)
                .order_by(Project.start_date.desc())
                .all()
            ),
            "skills": (
                self.db.query(Skill)
                .options(selectinload(Skill.contexts))
                .filter(Skill.history_id == hid)
                .order_by(Skill.name)
                .all()
            ),
            "certifications": (
                self.db.query(Certification)
                .filter(Certification.history_id == hid)
                .order_by(Certification.issue_date.desc())
                .all()
            ),
        }


class HistoryEntityService(EntityService):
    """Records scoped to the caller's professional history.

    ``parents`` maps a foreign-key field to the model it must reference
    within the same history.
    """

    parents: dict = {}

    def __init__(self, db: Session, user: AuthUser | None):
        super().__init__(db, user)
        self._history_id: str | None = None

    @property
    def history_id(self) -> str:
        if self._history_id is None:
            self._history_id = ensure_history(self.db, self.require_user().id).id
        return self._history_id

    def _scope(self, query: Query) -> Query:
        return query.filter(self.model.history_id == self.history_id)

    def _owner_fields(self) -> dict:
        return {"history_id": self.history_id}

    def _before_write(self, values: dict) -> None:
        for field, parent_model in self.parents.items():
            if field not in values:
                continue
            parent = (
                self.db.query(parent_model)
                .filter(parent_model.id == values[field], parent_model.history_id == self.history_id)
                .first()
            )
            if parent is None:
                raise not_found(parent_model.__name__)


class WorkExperienceService(HistoryEntityService):
    model = WorkExperience
    label = "WORK_EXPERIENCE"
    entity_name = "Work experience"
    order_by = (WorkExperience.start_date.desc(),)


class AchievementService(HistoryEntityService):
    model = Achievement
    label = "ACHIEVEMENT"
    entity_name = "Achievement"
    order_by = (Achievement.created_at,)
    parents = {"experience_id": WorkExperience}


class AchievementMetricService(HistoryEntityService):
    model = AchievementMetric
    label = "ACHIEVEMENT_METRIC"
    entity_name = "Achievement metric"
    order_by = (AchievementMetric.created_at,)
    parents = {"achievement_id": Achievement}


class EducationService(HistoryEntityService):
    model = Education
    label = "EDUCATION"
    entity_name = "Education"
    order_by = (Education.start_date.desc(),)


class SkillService(HistoryEntityService):
    model = Skill
    label = "SKILL"
    entity_name = "Skill"
    order_by = (Skill.name,)


class SkillContextService(HistoryEntityService):
    model = SkillContext
    label = "SKILL_CONTEXT"
    entity_name = "Skill context"
    order_by = (SkillContext.created_at,)
    parents = {"skill_id": Skill}


class CertificationService(HistoryEntityService):
    model = Certification
    label = "CERTIFICATION"
    entity_name = "Certification"
    order_by = (Certification.issue_date.desc(),)
