"""Job list helpers: skill tagging, search filtering and sorting."""

import logging
import re

from models.schemas.job_posting import JobPosting, RankedJob

logger = logging.getLogger(__name__)

# Skills tagged on postings that arrive with only a free-text description
COMMON_JOB_SKILLS: tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Angular", "Vue", "Node.js", "Python",
    "Java", "C++", "C#", ".NET", "Go", "Rust", "Ruby", "PHP", "Swift", "Kotlin",
    "SQL", "NoSQL", "MongoDB", "PostgreSQL", "MySQL", "Redis", "AWS", "Azure",
    "GCP", "Docker", "Kubernetes", "CI/CD", "Git", "REST", "GraphQL", "API",
    "HTML", "CSS", "Sass", "Tailwind", "Bootstrap", "Redux", "Next.js", "Express",
    "Django", "Flask", "Spring", "Machine Learning", "AI", "Data Science",
    "Pandas", "TensorFlow", "PyTorch", "Agile", "Scrum", "JIRA", "Linux",
    "Figma", "UI/UX", "Mobile", "iOS", "Android", "React Native", "Flutter",
)

# Word-boundary patterns so "Java" does not fire inside "JavaScript"
# and "Go" does not fire inside "Google"
_SKILL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (skill, re.compile(rf"(?<![a-zA-Z0-9.#+]){re.escape(skill.lower())}(?![a-zA-Z0-9#+])"))
    for skill in COMMON_JOB_SKILLS
)

_SALARY_AMOUNT = re.compile(r"(\d[\d,]*(?:\.\d+)?)\s*([kKlL](?![a-zA-Z]))?")

# K = thousand, L = lakh (Indian listings: "₹12.0L - ₹18.0L")
_SALARY_MULTIPLIERS = {"k": 1_000, "l": 100_000}

SORT_KEYS = ("match-desc", "salary-desc", "title-asc")


def extract_skills_from_description(description: str, limit: int = 6) -> list[str]:
    """Tag a posting with known skills mentioned in its description."""
    text = description.lower()
    found = [skill for skill, pattern in _SKILL_PATTERNS if pattern.search(text)]
    return found[:limit]


def filter_jobs(jobs: list[JobPosting], query: str) -> list[JobPosting]:
    """Keep jobs whose title, company or any skill contains the query."""
    q = query.strip().lower()
    if not q:
        return list(jobs)
    return [
        job for job in jobs
        if q in job.title.lower()
        or q in job.company.lower()
        or any(q in skill.lower() for skill in job.skills)
    ]


def parse_salary_max(salary: str) -> float:
    """Largest amount in a salary string such as "$140k-$180k"; 0 if none."""
    best = 0.0
    for number, unit in _SALARY_AMOUNT.findall(salary):
        try:
            amount = float(number.replace(",", ""))
        except ValueError:
            continue
        if unit:
            amount *= _SALARY_MULTIPLIERS[unit.lower()]
        best = max(best, amount)
    return best


def sort_ranked_jobs(ranked: list[RankedJob], sort_by: str = "match-desc") -> list[RankedJob]:
    """Stable sort of a ranked job list by one of SORT_KEYS."""
    if sort_by == "match-desc":
        return sorted(ranked, key=lambda r: -r.match.score)
    if sort_by == "salary-desc":
        return sorted(ranked, key=lambda r: -parse_salary_max(r.job.salary))
    if sort_by == "title-asc":
        return sorted(ranked, key=lambda r: r.job.title.lower())
    raise ValueError(f"Unknown sort key: {sort_by!r} (expected one of {', '.join(SORT_KEYS)})")
