"""Candidate profile: the input to every match computation."""

from pydantic import BaseModel, field_validator


class CandidateProfile(BaseModel):
    """Skills, experience and preferences of a single candidate.

    Skill names compare case-insensitively downstream. ``interests`` holds
    career category identifiers; ones the taxonomy does not know are ignored.
    """
    skills: list[str] = []
    experience_years: float = 0.0
    job_titles: list[str] = []
    interests: list[str] = []
    education: str = ""  # descriptive only, not scored

    @field_validator("experience_years", mode="before")
    @classmethod
    def _clamp_experience(cls, value):
        # Absent or negative experience is treated as none at all
        if value is None:
            return 0.0
        try:
            return max(0.0, float(value))
        except (TypeError, ValueError):
            return value  # let pydantic report the type error

    @field_validator("skills", "job_titles", "interests", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value
