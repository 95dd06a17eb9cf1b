"""Job ranking adapter: the matching engine's scoring shape applied per job.

Differences from the taxonomy engine:
    - target skills are the posting's own list, all weight 1
    - experience is judged against the seniority implied by the title
    - role relevance has no partial-credit tier
"""

import logging

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting, RankedJob
from models.schemas.match_result import MatchResult
from services.job_catalog import filter_jobs, sort_ranked_jobs
from services.matching_engine import build_result, match_tier, weighted_skill_score

logger = logging.getLogger(__name__)

SENIOR_YEARS = 5.0
MID_LEVEL_YEARS = 2.0
_ENTRY_LEVEL_KEYWORDS = ("junior", "intern")


def _job_targets(skills: list[str]) -> list[tuple[str, int]]:
    """Uniform weight-1 targets, de-duplicated case-insensitively in order."""
    seen: set[str] = set()
    targets: list[tuple[str, int]] = []
    for skill in skills:
        key = skill.lower().strip()
        if key and key not in seen:
            seen.add(key)
            targets.append((skill, 1))
    return targets


def seniority_experience_score(title: str, years: float) -> float:
    """Experience credit relative to the seniority a job title implies."""
    title_lower = title.lower()
    years = max(0.0, years)
    if "senior" in title_lower:
        return min(100.0, years / SENIOR_YEARS * 100)
    if any(keyword in title_lower for keyword in _ENTRY_LEVEL_KEYWORDS):
        return 100.0
    return min(100.0, years / MID_LEVEL_YEARS * 100)


def title_relevance_score(profile: CandidateProfile, job_title: str) -> int:
    tokens = " ".join(profile.interests + profile.job_titles).lower().split()
    title_lower = job_title.lower()
    return 100 if any(token in title_lower for token in tokens) else 0


def score_job(profile: CandidateProfile | None, job: JobPosting) -> MatchResult:
    """Match a single posting against a candidate; zero when no profile."""
    if profile is None:
        return MatchResult()

    skill, matched, missing = weighted_skill_score(profile.skills, _job_targets(job.skills))
    experience = seniority_experience_score(job.title, profile.experience_years)
    role = title_relevance_score(profile, job.title)

    return build_result(skill, experience, role, matched, missing)


def rank_jobs(
    profile: CandidateProfile | None,
    jobs: list[JobPosting],
    query: str = "",
    sort_by: str = "match-desc",
) -> list[RankedJob]:
    """Filter, score and sort a job list for one candidate.

    Without a profile every job scores 0 and the list keeps its browse order
    under the default sort.
    """
    visible = filter_jobs(jobs, query)
    ranked = []
    for job in visible:
        match = score_job(profile, job)
        ranked.append(RankedJob(job=job, match=match, tier=match_tier(match.score)))

    logger.debug("Ranked %d of %d jobs (query=%r, sort_by=%s)", len(ranked), len(jobs), query, sort_by)
    return sort_ranked_jobs(ranked, sort_by)
