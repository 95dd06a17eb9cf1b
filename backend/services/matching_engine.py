"""Deterministic candidate-vs-taxonomy matching engine.

Three sub-scores, each 0-100, blended into a single 0-100 match:
    skill coverage (weighted)  x 0.6
    experience level           x 0.2
    role / title relevance     x 0.2

The blend weights are fixed; changing them changes every stored score.
"""

import logging
import math
from typing import Iterable

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.match_result import MatchDetails, MatchResult
from services.skill_taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy

logger = logging.getLogger(__name__)

W_SKILL = 0.6
W_EXPERIENCE = 0.2
W_ROLE = 0.2

MAX_RECOMMENDED = 5

# Shortest skill name allowed to match inside a longer one ("C" would hit "CSS")
MIN_CONTAINMENT_LEN = 2

# Skill name -> continuations that turn it into an unrelated skill
CONFUSABLE_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "java": ("script",),
}

# (lower bound in years, score), highest bound first
_EXPERIENCE_STEPS = ((5, 100), (3, 90), (1, 70), (0, 40))

STRONG_MATCH = 70
MODERATE_MATCH = 40


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return min(100, max(0, round_half_up(value)))


def skills_match(candidate_skill: str, target_skill: str) -> bool:
    """Case-insensitive bidirectional containment test between two skill names."""
    c = candidate_skill.lower().strip()
    t = target_skill.lower().strip()
    if not c or not t:
        return False
    if c == t:
        return True
    shorter, longer = (c, t) if len(c) <= len(t) else (t, c)
    if len(shorter) < MIN_CONTAINMENT_LEN:
        return False
    return any(
        not _is_confusable(shorter, longer, i)
        for i in _occurrences(shorter, longer)
    )


def _occurrences(needle: str, haystack: str) -> Iterable[int]:
    start = haystack.find(needle)
    while start != -1:
        yield start
        start = haystack.find(needle, start + 1)


def _is_confusable(shorter: str, longer: str, index: int) -> bool:
    """True when this occurrence is really a longer, unrelated skill ("java" in "javascript")."""
    rest = longer[index + len(shorter):]
    return any(
        shorter.endswith(base) and rest.startswith(ext)
        for base, extensions in CONFUSABLE_EXTENSIONS.items()
        for ext in extensions
    )


def has_skill(candidate_skills: Iterable[str], target_skill: str) -> bool:
    return any(skills_match(skill, target_skill) for skill in candidate_skills)


def aggregate_targets(
    interests: Iterable[str], taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY
) -> list[tuple[str, int]]:
    """Union the weighted skills of every selected category.

    Keyed by lowercased skill name; a skill listed under several selected
    categories keeps its highest weight and its first position. Categories
    are walked in taxonomy order so the result ignores interest order.
    """
    selected = set(interests)
    for unknown in sorted(selected.difference(taxonomy.categories())):
        logger.debug("Ignoring unknown interest category: %s", unknown)

    merged: dict[str, tuple[str, int]] = {}
    for category in taxonomy.categories():
        if category not in selected:
            continue
        for name, weight in taxonomy.resolve(category):
            key = name.lower()
            if key in merged:
                display, existing = merged[key]
                merged[key] = (display, max(existing, weight))
            else:
                merged[key] = (name, weight)
    return list(merged.values())


def weighted_skill_score(
    candidate_skills: list[str], targets: list[tuple[str, int]]
) -> tuple[float, list[str], list[str]]:
    """Return (raw skill score, matched, missing) over a weighted target set."""
    total_weight = 0
    matched_weight = 0
    matched: list[str] = []
    missing: list[str] = []

    for name, weight in targets:
        total_weight += weight
        if has_skill(candidate_skills, name):
            matched_weight += weight
            matched.append(name)
        else:
            missing.append(name)

    score = 100.0 * matched_weight / total_weight if total_weight > 0 else 0.0
    return score, matched, missing


def experience_step_score(years: float) -> int:
    """Coarse seniority gate: 40 / 70 / 90 / 100."""
    years = max(0.0, years)
    for lower, score in _EXPERIENCE_STEPS:
        if years >= lower:
            return score
    return _EXPERIENCE_STEPS[-1][1]


def role_relevance_score(job_titles: list[str], interests: list[str]) -> int:
    """100 on an interest token inside a title, 50 for any history, else 0."""
    tokens = " ".join(interests).lower().split()
    titles = [title.lower() for title in job_titles]
    if any(token in title for title in titles for token in tokens):
        return 100
    return 50 if job_titles else 0


def blend(skill: float, experience: float, role: float) -> int:
    return clamp_score(skill * W_SKILL + experience * W_EXPERIENCE + role * W_ROLE)


def build_result(
    skill: float, experience: float, role: float, matched: list[str], missing: list[str]
) -> MatchResult:
    return MatchResult(
        score=blend(skill, experience, role),
        matched_skills=matched,
        missing_skills=missing,
        recommended_skills=missing[:MAX_RECOMMENDED],
        details=MatchDetails(
            skill_score=clamp_score(skill),
            experience_score=clamp_score(experience),
            role_score=clamp_score(role),
        ),
    )


def compute_match(
    profile: CandidateProfile, taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY
) -> MatchResult:
    """Score a candidate against the skill taxonomy of their chosen interests."""
    if not profile.interests:
        return MatchResult()

    targets = aggregate_targets(profile.interests, taxonomy)
    skill, matched, missing = weighted_skill_score(profile.skills, targets)
    experience = experience_step_score(profile.experience_years)
    role = role_relevance_score(profile.job_titles, profile.interests)

    return build_result(skill, experience, role, matched, missing)


def match_tier(score: int) -> str:
    """Bucket a 0-100 match for display: strong, moderate or weak."""
    if score >= STRONG_MATCH:
        return "strong"
    if score >= MODERATE_MATCH:
        return "moderate"
    return "weak"
