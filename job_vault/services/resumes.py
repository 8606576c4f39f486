"""
Resume service: resumes, their ordered sections, section items and exports.

Section ``order_index`` values stay contiguous (0..N-1) per resume. Every
operation that changes positions rewrites the affected indices inside a single
transaction.
"""

from sqlalchemy import func
from sqlalchemy.orm import Query, selectinload

from job_vault.db.tables import (
    Certification,
    Education,
    ItemType,
    Project,
    Resume,
    ResumeExport,
    ResumeItem,
    ResumeSection,
    Skill,
    WorkExperience,
    utcnow,
)
from job_vault.errors import ErrorKind, ServiceError, not_found, service_boundary
from job_vault.resume.export import export_filename
from job_vault.resume.ordering import move
from job_vault.resume.sample import SAMPLE_RESUME, SAMPLE_SECTIONS
from job_vault.services.base import UserOwnedService
from job_vault.services.professional_history import ensure_history

SECTION_FIELDS = ("type", "title", "content")

ITEM_MODELS = {
    ItemType.EXPERIENCE.value: WorkExperience,
    ItemType.EDUCATION.value: Education,
    ItemType.SKILL.value: Skill,
    ItemType.PROJECT.value: Project,
    ItemType.CERTIFICATION.value: Certification,
}


class ResumeService(UserOwnedService):
    model = Resume
    label = "RESUME"
    entity_name = "Resume"
    order_by = (Resume.updated_at.desc(),)

    def _query(self) -> Query:
        return super()._query().options(selectinload(Resume.sections).selectinload(ResumeSection.items))

    # Sections

    def _sections(self, resume_id: str) -> list[ResumeSection]:
        return (
            self.db.query(ResumeSection)
            .filter(ResumeSection.resume_id == resume_id)
            .order_by(ResumeSection.order_index)
            .all()
        )

    def _find_section(self, resume_id: str, section_id: str) -> ResumeSection:
        self._find(resume_id)
        section = (
            self.db.query(ResumeSection)
            .filter(ResumeSection.id == section_id, ResumeSection.resume_id == resume_id)
            .first()
        )
        if section is None:
            raise not_found("Resume section")
        return section

    def _write_order(self, sections: list[ResumeSection]) -> None:
        """Renumber sections 0..N-1 in list order without tripping the unique index."""
        for i, section in enumerate(sections):
            section.order_index = -(i + 1)
        self.db.flush()
        now = utcnow()
        for i, section in enumerate(sections):
            section.order_index = i
            section.updated_at = now
        self.db.flush()

    def _touch(self, resume: Resume) -> None:
        resume.updated_at = utcnow()

    @service_boundary("create_section")
    def create_section(self, resume_id: str, data: dict) -> ResumeSection:
        """Append a section at the end of the resume."""
        resume = self._find(resume_id)
        count = self.db.query(func.count(ResumeSection.id)).filter(ResumeSection.resume_id == resume_id).scalar()
        now = utcnow()
        section = ResumeSection(
            resume_id=resume_id,
            order_index=count,
            created_at=now,
            updated_at=now,
            **{k: v for k, v in data.items() if k in SECTION_FIELDS},
        )
        self.db.add(section)
        self._touch(resume)
        self.db.commit()
        self.db.refresh(section)
        return section

    @service_boundary("update_section")
    def update_section(self, resume_id: str, section_id: str, data: dict) -> ResumeSection:
        """Partial update of type/title/content. Position changes go through reorder."""
        section = self._find_section(resume_id, section_id)
        for key in SECTION_FIELDS:
            if key in data:
                setattr(section, key, data[key])
        section.updated_at = utcnow()
        self._touch(section.resume)
        self.db.commit()
        self.db.refresh(section)
        return section

    @service_boundary("delete_section")
    def delete_section(self, resume_id: str, section_id: str) -> None:
        section = self._find_section(resume_id, section_id)
        resume = section.resume
        resume.sections.remove(section)
        self.db.flush()
        self._write_order(self._sections(resume_id))
        self._touch(resume)
        self.db.commit()

    @service_boundary("reorder_sections")
    def reorder_sections(self, resume_id: str, source_index: int, destination_index: int) -> list[ResumeSection]:
        """Move one section and persist every new index in one transaction."""
        resume = self._find(resume_id)
        ordered = move(self._sections(resume_id), source_index, destination_index)
        self._write_order(ordered)
        self._touch(resume)
        self.db.commit()
        return self._sections(resume_id)

    # Items

    def _find_item(self, resume_id: str, item_id: str) -> ResumeItem:
        self._find(resume_id)
        item = (
            self.db.query(ResumeItem)
            .join(ResumeSection, ResumeItem.section_id == ResumeSection.id)
            .filter(ResumeItem.id == item_id, ResumeSection.resume_id == resume_id)
            .first()
        )
        if item is None:
            raise not_found("Resume item")
        return item

    def _check_history_record(self, item_type, record_id: str) -> None:
        """The referenced record must exist in the user's own professional history."""
        if isinstance(item_type, ItemType):
            item_type = item_type.value
        model = ITEM_MODELS.get(item_type)
        if model is None:
            raise ServiceError(ErrorKind.VALIDATION_FAILED, f"Unknown item type: {item_type}")
        history = ensure_history(self.db, self.require_user().id)
        exists = self.db.query(model.id).filter(model.id == record_id, model.history_id == history.id).first()
        if exists is None:
            raise not_found(model.__name__)

    @service_boundary("create_item")
    def create_item(self, resume_id: str, section_id: str, data: dict) -> ResumeItem:
        section = self._find_section(resume_id, section_id)
        self._check_history_record(data["item_type"], data["item_id"])
        count = self.db.query(func.count(ResumeItem.id)).filter(ResumeItem.section_id == section.id).scalar()
        now = utcnow()
        item = ResumeItem(
            section_id=section.id,
            item_type=data["item_type"],
            item_id=data["item_id"],
            order_index=data.get("order_index", count),
            created_at=now,
            updated_at=now,
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    @service_boundary("update_item")
    def update_item(self, resume_id: str, item_id: str, data: dict) -> ResumeItem:
        item = self._find_item(resume_id, item_id)
        if "item_type" in data or "item_id" in data:
            self._check_history_record(data.get("item_type", item.item_type), data.get("item_id", item.item_id))
        for key in ("item_type", "item_id", "order_index"):
            if key in data:
                setattr(item, key, data[key])
        item.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(item)
        return item

    @service_boundary("delete_item")
    def delete_item(self, resume_id: str, item_id: str) -> None:
        item = self._find_item(resume_id, item_id)
        self.db.delete(item)
        self.db.commit()

    # Exports

    @service_boundary("create_export")
    def create_export(self, resume_id: str, export_format: str = "pdf") -> ResumeExport:
        """Record an export attempt; version increments per resume."""
        resume = self._find(resume_id)
        latest = (
            self.db.query(func.max(ResumeExport.version)).filter(ResumeExport.resume_id == resume_id).scalar()
        )
        record = ResumeExport(
            resume_id=resume_id,
            format=export_format,
            file_path=export_filename(resume.name),
            version=(latest or 0) + 1,
            created_at=utcnow(),
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    @service_boundary("list_exports")
    def list_exports(self, resume_id: str) -> list[ResumeExport]:
        self._find(resume_id)
        return (
            self.db.query(ResumeExport)
            .filter(ResumeExport.resume_id == resume_id)
            .order_by(ResumeExport.created_at.desc(), ResumeExport.version.desc())
            .all()
        )

    @service_boundary("get_export")
    def get_export(self, export_id: str) -> ResumeExport:
        user = self.require_user()
        record = (
            self.db.query(ResumeExport)
            .join(Resume, ResumeExport.resume_id == Resume.id)
            .filter(ResumeExport.id == export_id, Resume.user_id == user.id)
            .first()
        )
        if record is None:
            raise not_found("Export")
        return record

    # Seeding

    @service_boundary("seed")
    def seed_sample(self) -> Resume:
        """Insert the sample resume and its sections in one transaction."""
        user = self.require_user()
        now = utcnow()
        resume = Resume(user_id=user.id, created_at=now, updated_at=now, **SAMPLE_RESUME)
        resume.sections = [
            ResumeSection(order_index=i, created_at=now, updated_at=now, **section)
            for i, section in enumerate(SAMPLE_SECTIONS)
        ]
        self.db.add(resume)
        self.db.commit()
        return self._find(resume.id)
