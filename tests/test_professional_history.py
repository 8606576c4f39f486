"""Tests for the professional history services."""

from datetime import date

import pytest

from job_vault.db.tables import ProfessionalHistory
from job_vault.errors import ErrorKind, ServiceError
from job_vault.services import (
    AchievementMetricService,
    AchievementService,
    CertificationService,
    EducationService,
    ProfessionalHistoryService,
    ProjectService,
    SkillContextService,
    SkillService,
    WorkExperienceService,
)


def _experience(company, start):
    return {"company": company, "title": "Engineer", "start_date": start}


def test_history_is_created_once_per_user(db, user):
    first = ProfessionalHistoryService(db, user).get_or_create()
    second = ProfessionalHistoryService(db, user).get_or_create()

    assert first.id == second.id
    assert db.query(ProfessionalHistory).filter(ProfessionalHistory.user_id == user.id).count() == 1


def test_records_are_stamped_with_history(db, user):
    history = ProfessionalHistoryService(db, user).get_or_create()
    project = ProjectService(db, user).create({"name": "Job Vault", "technologies": ["python"]})

    assert project.history_id == history.id
    assert project.source == "manual"


def test_orderings(db, user):
    experiences = WorkExperienceService(db, user)
    experiences.create(_experience("Old Co", date(2015, 1, 1)))
    experiences.create(_experience("New Co", date(2021, 6, 1)))
    assert [e.company for e in experiences.list()] == ["New Co", "Old Co"]

    skills = SkillService(db, user)
    for name in ["SQL", "Go", "Python"]:
        skills.create({"name": name})
    assert [s.name for s in skills.list()] == ["Go", "Python", "SQL"]

    certifications = CertificationService(db, user)
    certifications.create({"name": "Old", "issuer": "X", "issue_date": date(2018, 1, 1)})
    certifications.create({"name": "New", "issuer": "X", "issue_date": date(2023, 1, 1)})
    assert [c.name for c in certifications.list()] == ["New", "Old"]


def test_achievement_requires_experience_in_same_history(db, user, other_user):
    foreign = WorkExperienceService(db, other_user).create(_experience("Theirs", date(2020, 1, 1)))

    with pytest.raises(ServiceError) as exc_info:
        AchievementService(db, user).create({"experience_id": foreign.id, "description": "Shipped it"})
    assert exc_info.value.kind is ErrorKind.NOT_FOUND


def test_overview_nests_achievements_metrics_and_contexts(db, user):
    experience = WorkExperienceService(db, user).create(_experience("Acme", date(2020, 1, 1)))
    achievement = AchievementService(db, user).create(
        {"experience_id": experience.id, "description": "Cut latency", "impact": "Faster pages"}
    )
    AchievementMetricService(db, user).create(
        {"achievement_id": achievement.id, "metric_type": "latency", "value": 40, "unit": "%"}
    )
    skill = SkillService(db, user).create({"name": "Python", "proficiency": 5})
    SkillContextService(db, user).create({"skill_id": skill.id, "context_type": "experience", "description": "APIs"})
    EducationService(db, user).create(
        {"institution": "Tech U", "degree": "BSc", "field": "CS", "start_date": date(2013, 9, 1)}
    )

    overview = ProfessionalHistoryService(db, user).overview()

    [exp] = overview["work_experiences"]
    assert exp.achievements[0].metrics[0].value == 40
    assert overview["skills"][0].contexts[0].description == "APIs"
    assert len(overview["education"]) == 1
    assert overview["certifications"] == []


def test_records_are_private_to_their_history(db, user, other_user):
    education = EducationService(db, user).create(
        {"institution": "Tech U", "degree": "BSc", "field": "CS", "start_date": date(2013, 9, 1)}
    )

    other = EducationService(db, other_user)
    assert other.list() == []
    with pytest.raises(ServiceError) as exc_info:
        other.update(education.id, {"degree": "PhD"})
    assert exc_info.value.kind is ErrorKind.NOT_FOUND


def test_missing_required_column_is_validation_failure(db, user):
    with pytest.raises(ServiceError) as exc_info:
        CertificationService(db, user).create({"name": "No issuer", "issue_date": date(2020, 1, 1)})
    assert exc_info.value.kind is ErrorKind.VALIDATION_FAILED


def test_relationship_keys_are_not_writable(db, user):
    experience = WorkExperienceService(db, user).create(_experience("Acme", date(2020, 1, 1)))
    achievements = AchievementService(db, user)
    achievement = achievements.create({"experience_id": experience.id, "description": "Cut latency"})

    with pytest.raises(ServiceError) as exc_info:
        WorkExperienceService(db, user).update(experience.id, {"achievements": []})
    assert exc_info.value.kind is ErrorKind.VALIDATION_FAILED

    assert [a.id for a in achievements.list()] == [achievement.id]
