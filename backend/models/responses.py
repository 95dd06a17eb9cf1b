from pydantic import BaseModel

from models.schemas.match_result import MatchResult
from models.schemas.skill_gap import SkillRecommendation


class HealthResponse(BaseModel):
    status: str = "ok"
    categories: int = 0


class TaxonomyEntry(BaseModel):
    skill: str
    weight: int  # 3 critical, 2 important, 1 bonus


class MatchResponse(MatchResult):
    tier: str = "weak"
    learning: list[SkillRecommendation] = []  # resources for recommended_skills


class ExtractSkillsResponse(BaseModel):
    skills: list[str] = []
