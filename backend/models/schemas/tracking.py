"""Saved jobs and job applications held in the application state."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from models.schemas.job_posting import JobPosting

ApplicationStatus = Literal["applied", "interview", "offer", "rejected"]


class SavedJob(JobPosting):
    saved_at: datetime
    match: int | None = None


class JobApplication(BaseModel):
    id: str
    job_id: str
    title: str = ""
    company: str = ""
    location: str = ""
    salary: str = ""
    status: ApplicationStatus = "applied"
    applied_at: datetime
    updated_at: datetime
    notes: str = ""
    url: str | None = None
