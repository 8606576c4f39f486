"""
Domain services.

Each service is constructed per request with a session and the current user,
scopes every query to that user, and raises only ServiceError.
"""

from job_vault.services.jobs import JobService
from job_vault.services.professional_history import (
    AchievementMetricService,
    AchievementService,
    CertificationService,
    EducationService,
    ProfessionalHistoryService,
    SkillContextService,
    SkillService,
    WorkExperienceService,
)
from job_vault.services.projects import ProjectService
from job_vault.services.resumes import ResumeService

__all__ = [
    "JobService",
    "ProfessionalHistoryService",
    "WorkExperienceService",
    "AchievementService",
    "AchievementMetricService",
    "EducationService",
    "SkillService",
    "SkillContextService",
    "CertificationService",
    "ProjectService",
    "ResumeService",
]
