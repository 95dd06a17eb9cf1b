"""Output of the matching engine and the job ranking adapter."""

from pydantic import BaseModel


class MatchDetails(BaseModel):
    """Unweighted sub-scores, each 0-100, before the 60/20/20 blend."""
    skill_score: int = 0
    experience_score: int = 0
    role_score: int = 0


class MatchResult(BaseModel):
    score: int = 0  # 0-100
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    recommended_skills: list[str] = []  # first <=5 of missing_skills
    details: MatchDetails = MatchDetails()
