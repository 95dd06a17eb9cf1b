"""Job postings and the ranked view produced for a candidate."""

from pydantic import BaseModel

from models.schemas.match_result import MatchResult


class JobPosting(BaseModel):
    """A single job listing.

    Only ``title`` and ``skills`` take part in scoring; the rest is carried
    through for display.
    """
    id: str = ""
    title: str = ""
    skills: list[str] = []
    company: str = ""
    location: str = ""
    salary: str = ""
    description: str = ""
    url: str | None = None


class RankedJob(BaseModel):
    job: JobPosting
    match: MatchResult = MatchResult()
    tier: str = "weak"  # strong, moderate, weak
