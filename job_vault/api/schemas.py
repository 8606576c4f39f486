"""API request/response schemas."""

from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, Field

from job_vault.db.tables import ItemType, JobStatus, SectionType
from job_vault.utils.status_pipeline import StageSummary


def _blank_to_none(value):
    # Forms submit "" for untouched optional inputs
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _upper(value):
    return value.upper() if isinstance(value, str) else value


def _split_csv(value):
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


OptionalStr = Annotated[str | None, BeforeValidator(_blank_to_none)]
OptionalDate = Annotated[date | None, BeforeValidator(_blank_to_none)]
OptionalFloat = Annotated[float | None, BeforeValidator(_blank_to_none)]
Status = Annotated[JobStatus, BeforeValidator(_upper)]
Technologies = Annotated[list[str], BeforeValidator(_split_csv)]

FontFamily = Literal["inter", "roboto", "open-sans", "lato", "montserrat"]
FontSize = Literal["sm", "base", "lg"]
LineSpacing = Literal["tight", "normal", "relaxed"]
MarginSize = Literal["sm", "md", "lg"]


# Auth
class UserResponse(BaseModel):
    id: str
    email: str | None


# Job schemas
class JobCreate(BaseModel):
    position: str = Field(min_length=1)
    company: str = Field(min_length=1)
    max_salary: OptionalStr = None
    location: OptionalStr = None
    status: Status = JobStatus.BOOKMARKED.value
    deadline: OptionalDate = None
    date_applied: OptionalDate = None
    follow_up: OptionalDate = None
    excitement: int = Field(default=0, ge=0, le=5)

    class Config:
        use_enum_values = True


class JobUpdate(BaseModel):
    position: str | None = Field(default=None, min_length=1)
    company: str | None = Field(default=None, min_length=1)
    max_salary: OptionalStr = None
    location: OptionalStr = None
    status: Status | None = None
    deadline: OptionalDate = None
    date_applied: OptionalDate = None
    follow_up: OptionalDate = None
    excitement: int | None = Field(default=None, ge=0, le=5)

    class Config:
        use_enum_values = True


class JobResponse(BaseModel):
    id: int
    user_id: str
    position: str
    company: str
    max_salary: str | None
    location: str | None
    status: str
    date_saved: datetime
    deadline: date | None
    date_applied: date | None
    follow_up: date | None
    excitement: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PipelineResponse(BaseModel):
    total: int
    stages: list[StageSummary]


# Professional history schemas
class CertificationCreate(BaseModel):
    name: str = Field(min_length=1)
    issuer: str = Field(min_length=1)
    issue_date: date
    expiration_date: OptionalDate = None
    credential_id: OptionalStr = None
    credential_url: OptionalStr = None


class CertificationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    issuer: str | None = Field(default=None, min_length=1)
    issue_date: date | None = None
    expiration_date: OptionalDate = None
    credential_id: OptionalStr = None
    credential_url: OptionalStr = None


class CertificationResponse(BaseModel):
    id: str
    history_id: str
    name: str
    issuer: str
    issue_date: date
    expiration_date: date | None
    credential_id: str | None
    credential_url: str | None
    source: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EducationCreate(BaseModel):
    institution: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field: str = Field(min_length=1)
    start_date: date
    end_date: OptionalDate = None
    gpa: OptionalFloat = Field(default=None, ge=0)
    achievements: list[str] = []


class EducationUpdate(BaseModel):
    institution: str | None = Field(default=None, min_length=1)
    degree: str | None = Field(default=None, min_length=1)
    field: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: OptionalDate = None
    gpa: OptionalFloat = Field(default=None, ge=0)
    achievements: list[str] | None = None


class EducationResponse(BaseModel):
    id: str
    history_id: str
    institution: str
    degree: str
    field: str
    start_date: date
    end_date: date | None
    gpa: float | None
    achievements: list[str]
    source: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProjectCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    url: OptionalStr = None
    technologies: Technologies = []
    start_date: OptionalDate = None
    end_date: OptionalDate = None


class ProjectUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    url: OptionalStr = None
    technologies: Technologies | None = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None


class ProjectResponse(BaseModel):
    id: str
    history_id: str
    name: str
    description: str
    url: str | None
    technologies: list[str]
    start_date: date | None
    end_date: date | None
    source: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class WorkExperienceCreate(BaseModel):
    company: str = Field(min_length=1)
    title: str = Field(min_length=1)
    location: OptionalStr = None
    employment_type: OptionalStr = None
    start_date: date
    end_date: OptionalDate = None
    description: str = ""
    technologies: Technologies = []


class WorkExperienceUpdate(BaseModel):
    company: str | None = Field(default=None, min_length=1)
    title: str | None = Field(default=None, min_length=1)
    location: OptionalStr = None
    employment_type: OptionalStr = None
    start_date: date | None = None
    end_date: OptionalDate = None
    description: str | None = None
    technologies: Technologies | None = None


class AchievementCreate(BaseModel):
    experience_id: str = Field(min_length=1)
    description: str = Field(min_length=1)
    impact: OptionalStr = None


class AchievementUpdate(BaseModel):
    description: str | None = Field(default=None, min_length=1)
    impact: OptionalStr = None


class AchievementMetricCreate(BaseModel):
    achievement_id: str = Field(min_length=1)
    metric_type: str = Field(min_length=1)
    value: float
    unit: OptionalStr = None


class AchievementMetricResponse(BaseModel):
    id: str
    achievement_id: str
    metric_type: str
    value: float
    unit: str | None
    created_at: datetime

    class Config:
        from_attributes = True


class AchievementResponse(BaseModel):
    id: str
    experience_id: str
    description: str
    impact: str | None
    metrics: list[AchievementMetricResponse] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class WorkExperienceResponse(BaseModel):
    id: str
    history_id: str
    company: str
    title: str
    location: str | None
    employment_type: str | None
    start_date: date
    end_date: date | None
    description: str
    technologies: list[str]
    achievements: list[AchievementResponse] = []
    source: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SkillCreate(BaseModel):
    name: str = Field(min_length=1)
    category: OptionalStr = None
    proficiency: int | None = Field(default=None, ge=1, le=5)
    years_experience: OptionalFloat = Field(default=None, ge=0)


class SkillUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    category: OptionalStr = None
    proficiency: int | None = Field(default=None, ge=1, le=5)
    years_experience: OptionalFloat = Field(default=None, ge=0)


class SkillContextCreate(BaseModel):
    skill_id: str = Field(min_length=1)
    context_type: Literal["experience", "project", "education"]
    description: str = ""


class SkillContextResponse(BaseModel):
    id: str
    skill_id: str
    context_type: str
    description: str
    created_at: datetime

    class Config:
        from_attributes = True


class SkillResponse(BaseModel):
    id: str
    history_id: str
    name: str
    category: str | None
    proficiency: int | None
    years_experience: float | None
    contexts: list[SkillContextResponse] = []
    source: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class HistoryResponse(BaseModel):
    id: str
    user_id: str
    is_complete: bool
    work_experiences: list[WorkExperienceResponse]
    education: list[EducationResponse]
    projects: list[ProjectResponse]
    skills: list[SkillResponse]
    certifications: list[CertificationResponse]

    class Config:
        from_attributes = True


# Resume schemas
class ResumeCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    template: str = "modern"
    font_family: FontFamily = "inter"
    font_size: FontSize = "base"
    line_spacing: LineSpacing = "normal"
    margin_size: MarginSize = "md"
    ranking: int = Field(default=0, ge=0)


class ResumeUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    template: str | None = None
    font_family: FontFamily | None = None
    font_size: FontSize | None = None
    line_spacing: LineSpacing | None = None
    margin_size: MarginSize | None = None
    ranking: int | None = Field(default=None, ge=0)


class ResumeResponse(BaseModel):
    id: str
    user_id: str
    name: str
    description: str
    template: str
    font_family: str
    font_size: str
    line_spacing: str
    margin_size: str
    ranking: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SectionCreate(BaseModel):
    type: SectionType = SectionType.CUSTOM.value
    title: str = Field(min_length=1)
    content: str = ""

    class Config:
        use_enum_values = True


class SectionUpdate(BaseModel):
    type: SectionType | None = None
    title: str | None = Field(default=None, min_length=1)
    content: str | None = None

    class Config:
        use_enum_values = True


class ReorderRequest(BaseModel):
    source_index: int = Field(ge=0)
    destination_index: int = Field(ge=0)


class ItemCreate(BaseModel):
    item_type: ItemType
    item_id: str = Field(min_length=1)
    order_index: int | None = Field(default=None, ge=0)

    class Config:
        use_enum_values = True


class ItemUpdate(BaseModel):
    item_type: ItemType | None = None
    item_id: str | None = Field(default=None, min_length=1)
    order_index: int | None = Field(default=None, ge=0)

    class Config:
        use_enum_values = True


class ItemResponse(BaseModel):
    id: str
    section_id: str
    item_type: str
    item_id: str
    order_index: int

    class Config:
        from_attributes = True


class SectionResponse(BaseModel):
    id: str
    resume_id: str
    type: str
    title: str
    content: str
    order_index: int
    items: list[ItemResponse] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ResumeDetailResponse(ResumeResponse):
    sections: list[SectionResponse]


class ExportResponse(BaseModel):
    id: str
    resume_id: str
    format: str
    file_path: str
    version: int
    created_at: datetime

    class Config:
        from_attributes = True
