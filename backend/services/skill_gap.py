"""Compare a candidate's skills with skills currently in demand."""

from models.schemas.skill_gap import SkillGapReport
from services.matching_engine import round_half_up

IN_DEMAND_SKILLS: tuple[str, ...] = (
    "TypeScript", "React", "Node.js", "AWS", "Docker", "Kubernetes",
    "GraphQL", "Python", "Machine Learning", "CI/CD", "MongoDB",
    "Redis", "WebSockets", "Tailwind CSS", "Next.js",
)


def compute_skill_gap(
    skills: list[str], in_demand: tuple[str, ...] = IN_DEMAND_SKILLS
) -> SkillGapReport:
    """Split in-demand skills into have/need by exact case-insensitive name."""
    owned = {s.lower().strip() for s in skills}
    have = [skill for skill in in_demand if skill.lower() in owned]
    need = [skill for skill in in_demand if skill.lower() not in owned]
    percentage = round_half_up(100 * len(have) / len(in_demand)) if in_demand else 0
    return SkillGapReport(have=have, need=need, match_percentage=percentage)
