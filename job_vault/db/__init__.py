"""Database package."""

from job_vault.db.base import Base, PersistenceClient, create_client
from job_vault.db.tables import (
    Achievement,
    AchievementMetric,
    Certification,
    Education,
    Job,
    JobStatus,
    ProfessionalHistory,
    Project,
    Resume,
    ResumeExport,
    ResumeItem,
    ResumeSection,
    ItemType,
    SectionType,
    Skill,
    SkillContext,
    Source,
    WorkExperience,
)

__all__ = [
    "Base",
    "PersistenceClient",
    "create_client",
    "Job",
    "JobStatus",
    "Resume",
    "ResumeSection",
    "ResumeItem",
    "ResumeExport",
    "SectionType",
    "ItemType",
    "ProfessionalHistory",
    "WorkExperience",
    "Achievement",
    "AchievementMetric",
    "Education",
    "Project",
    "Skill",
    "SkillContext",
    "Certification",
    "Source",
]
