"""In-demand skill gap report and learning resources."""

from typing import Literal

from pydantic import BaseModel


class SkillGapReport(BaseModel):
    have: list[str] = []
    need: list[str] = []
    match_percentage: int = 0


class LearningResource(BaseModel):
    title: str
    platform: Literal["Coursera", "Udemy", "YouTube", "FreeCodeCamp", "Documentation"]
    url: str
    type: Literal["Course", "Video", "Tutorial", "Docs"]
    free: bool


class SkillRecommendation(BaseModel):
    skill: str
    resources: list[LearningResource] = []
