"""Data contracts shared by the matching services and the API."""

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting, RankedJob
from models.schemas.match_result import MatchDetails, MatchResult
from models.schemas.skill_gap import LearningResource, SkillGapReport, SkillRecommendation
from models.schemas.tracking import JobApplication, SavedJob

__all__ = [
    "CandidateProfile",
    "JobPosting",
    "RankedJob",
    "MatchDetails",
    "MatchResult",
    "SkillGapReport",
    "LearningResource",
    "SkillRecommendation",
    "JobApplication",
    "SavedJob",
]
