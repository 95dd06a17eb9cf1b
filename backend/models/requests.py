from pydantic import BaseModel, Field

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from models.schemas.tracking import ApplicationStatus


class MatchRequest(BaseModel):
    profile: CandidateProfile | None = Field(None, description="Omit to score the stored profile")


class RankJobsRequest(BaseModel):
    profile: CandidateProfile | None = Field(None, description="Omit to rank against the stored profile")
    jobs: list[JobPosting] = Field(..., max_length=500)
    query: str = Field("", max_length=200, description="Filter on title, company or skill")
    sort_by: str = "match-desc"


class ExtractSkillsRequest(BaseModel):
    description: str = Field(..., max_length=20000, description="Job description text")
    limit: int = Field(6, ge=1, le=50)


class SkillGapRequest(BaseModel):
    skills: list[str] = []


class SaveJobRequest(BaseModel):
    job: JobPosting
    match: int | None = Field(None, ge=0, le=100)


class ApplicationCreateRequest(BaseModel):
    job_id: str
    title: str = ""
    company: str = ""
    location: str = ""
    salary: str = ""
    status: ApplicationStatus = "applied"
    notes: str = Field("", max_length=5000)
    url: str | None = None


class ApplicationUpdateRequest(BaseModel):
    status: ApplicationStatus | None = None
    notes: str | None = Field(None, max_length=5000)


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; unknown keys are rejected."""
    skills: list[str] | None = None
    experience_years: float | None = None
    job_titles: list[str] | None = None
    interests: list[str] | None = None
    education: str | None = None

    model_config = {"extra": "forbid"}
