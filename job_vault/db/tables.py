"""Database table models."""

import uuid
from datetime import UTC, date, datetime
from enum import Enum

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from job_vault.db.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


class JobStatus(str, Enum):
    BOOKMARKED = "BOOKMARKED"
    APPLYING = "APPLYING"
    APPLIED = "APPLIED"
    INTERVIEWING = "INTERVIEWING"
    NEGOTIATING = "NEGOTIATING"
    ACCEPTED = "ACCEPTED"


class SectionType(str, Enum):
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    CUSTOM = "custom"


class ItemType(str, Enum):
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILL = "skill"
    PROJECT = "project"
    CERTIFICATION = "certification"


class Source(str, Enum):
    MANUAL = "manual"
    IMPORTED = "imported"


class Job(Base):
    """A job the user is pursuing."""

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    position: Mapped[str] = mapped_column(String(255))
    company: Mapped[str] = mapped_column(String(255))
    max_salary: Mapped[str | None] = mapped_column(String(100), default=None)
    location: Mapped[str | None] = mapped_column(String(255), default=None)
    status: Mapped[str] = mapped_column(String(20), default=JobStatus.BOOKMARKED.value)
    date_saved: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    deadline: Mapped[date | None] = mapped_column(Date, default=None)
    date_applied: Mapped[date | None] = mapped_column(Date, default=None)
    follow_up: Mapped[date | None] = mapped_column(Date, default=None)
    excitement: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


# Resumes


class Resume(Base):
    """A resume assembled from ordered sections."""

    __tablename__ = "resumes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(String(36), index=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    template: Mapped[str] = mapped_column(String(50), default="modern")
    font_family: Mapped[str] = mapped_column(String(30), default="inter")
    font_size: Mapped[str] = mapped_column(String(10), default="base")
    line_spacing: Mapped[str] = mapped_column(String(10), default="normal")
    margin_size: Mapped[str] = mapped_column(String(10), default="md")
    ranking: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    sections: Mapped[list["ResumeSection"]] = relationship(
        back_populates="resume",
        order_by="ResumeSection.order_index",
        cascade="all, delete-orphan",
    )
    exports: Mapped[list["ResumeExport"]] = relationship(
        back_populates="resume", cascade="all, delete-orphan"
    )


class ResumeSection(Base):
    """A titled block of a resume; order_index is contiguous 0..N-1 per resume."""

    __tablename__ = "resume_sections"
    __table_args__ = (UniqueConstraint("resume_id", "order_index", name="uq_section_order"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    resume_id: Mapped[str] = mapped_column(ForeignKey("resumes.id", ondelete="CASCADE"), index=True)
    type: Mapped[str] = mapped_column(String(20), default=SectionType.CUSTOM.value)
    title: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text, default="")
    order_index: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    resume: Mapped["Resume"] = relationship(back_populates="sections")
    items: Mapped[list["ResumeItem"]] = relationship(
        back_populates="section",
        order_by="ResumeItem.order_index",
        cascade="all, delete-orphan",
    )


class ResumeItem(Base):
    """Link from a section to a professional-history entity."""

    __tablename__ = "resume_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    section_id: Mapped[str] = mapped_column(ForeignKey("resume_sections.id", ondelete="CASCADE"), index=True)
    item_type: Mapped[str] = mapped_column(String(20))
    item_id: Mapped[str] = mapped_column(String(36))
    order_index: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    section: Mapped["ResumeSection"] = relationship(back_populates="items")


class ResumeExport(Base):
    """One export attempt of a resume."""

    __tablename__ = "resume_exports"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    resume_id: Mapped[str] = mapped_column(ForeignKey("resumes.id", ondelete="CASCADE"), index=True)
    format: Mapped[str] = mapped_column(String(10), default="pdf")
    file_path: Mapped[str] = mapped_column(String(255))
    version: Mapped[int] = mapped_column(Integer, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    resume: Mapped["Resume"] = relationship(back_populates="exports")


# Professional history


class ProfessionalHistory(Base):
    """Container for a user's career records. One per user."""

    __tablename__ = "professional_histories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(String(36), unique=True)
    is_complete: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class WorkExperience(Base):
    __tablename__ = "work_experiences"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    company: Mapped[str] = mapped_column(String(255))
    title: Mapped[str] = mapped_column(String(255))
    location: Mapped[str | None] = mapped_column(String(255), default=None)
    employment_type: Mapped[str | None] = mapped_column(String(50), default=None)
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date, default=None)
    description: Mapped[str] = mapped_column(Text, default="")
    technologies: Mapped[list] = mapped_column(JSON, default=list)
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    achievements: Mapped[list["Achievement"]] = relationship(
        back_populates="experience",
        order_by="Achievement.created_at",
        cascade="all, delete-orphan",
    )


class Achievement(Base):
    __tablename__ = "achievements"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    experience_id: Mapped[str] = mapped_column(ForeignKey("work_experiences.id", ondelete="CASCADE"), index=True)
    description: Mapped[str] = mapped_column(Text)
    impact: Mapped[str | None] = mapped_column(Text, default=None)
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    experience: Mapped["WorkExperience"] = relationship(back_populates="achievements")
    metrics: Mapped[list["AchievementMetric"]] = relationship(
        back_populates="achievement", cascade="all, delete-orphan"
    )


class AchievementMetric(Base):
    __tablename__ = "achievement_metrics"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    achievement_id: Mapped[str] = mapped_column(ForeignKey("achievements.id", ondelete="CASCADE"), index=True)
    metric_type: Mapped[str] = mapped_column(String(50))
    value: Mapped[float] = mapped_column(Float)
    unit: Mapped[str | None] = mapped_column(String(30), default=None)
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    achievement: Mapped["Achievement"] = relationship(back_populates="metrics")


class Education(Base):
    __tablename__ = "education"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    institution: Mapped[str] = mapped_column(String(255))
    degree: Mapped[str] = mapped_column(String(255))
    field: Mapped[str] = mapped_column(String(255))
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date, default=None)
    gpa: Mapped[float | None] = mapped_column(Float, default=None)
    achievements: Mapped[list] = mapped_column(JSON, default=list)
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    url: Mapped[str | None] = mapped_column(String(500), default=None)
    technologies: Mapped[list] = mapped_column(JSON, default=list)
    start_date: Mapped[date | None] = mapped_column(Date, default=None)
    end_date: Mapped[date | None] = mapped_column(Date, default=None)
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class Skill(Base):
    __tablename__ = "skills"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(100))
    category: Mapped[str | None] = mapped_column(String(50), default=None)
    proficiency: Mapped[int | None] = mapped_column(Integer, default=None)  # 1-5
    years_experience: Mapped[float | None] = mapped_column(Float, default=None)
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    contexts: Mapped[list["SkillContext"]] = relationship(
        back_populates="skill", cascade="all, delete-orphan"
    )


class SkillContext(Base):
    __tablename__ = "skill_contexts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    skill_id: Mapped[str] = mapped_column(ForeignKey("skills.id", ondelete="CASCADE"), index=True)
    context_type: Mapped[str] = mapped_column(String(30))  # experience/project/education
    description: Mapped[str] = mapped_column(Text, default="")
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    skill: Mapped["Skill"] = relationship(back_populates="contexts")


class Certification(Base):
    __tablename__ = "certifications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    history_id: Mapped[str] = mapped_column(ForeignKey("professional_histories.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    issuer: Mapped[str] = mapped_column(String(255))
    issue_date: Mapped[date] = mapped_column(Date)
    expiration_date: Mapped[date | None] = mapped_column(Date, default=None)
    credential_id: Mapped[str | None] = mapped_column(String(255), default=None)
    credential_url: Mapped[str | None] = mapped_column(String(500), default=None)
    source: Mapped[str] = mapped_column(String(20), default=Source.MANUAL.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
