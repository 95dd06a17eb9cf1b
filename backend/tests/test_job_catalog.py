import pytest

from models.schemas.job_posting import JobPosting, RankedJob
from models.schemas.match_result import MatchResult
from services.job_catalog import (
    extract_skills_from_description,
    filter_jobs,
    parse_salary_max,
    sort_ranked_jobs,
)


def test_extract_skills_from_description():
    text = "We need a Python developer comfortable with Docker, AWS and PostgreSQL."
    assert extract_skills_from_description(text) == ["Python", "PostgreSQL", "AWS", "Docker"]


def test_extract_skills_word_boundaries():
    text = "Strong JavaScript skills; experience at Google is a plus."
    skills = extract_skills_from_description(text)
    assert "JavaScript" in skills
    assert "Java" not in skills
    assert "Go" not in skills


def test_extract_skills_limit():
    text = "JavaScript TypeScript React Angular Vue Node.js Python SQL"
    assert len(extract_skills_from_description(text)) == 6
    assert len(extract_skills_from_description(text, limit=2)) == 2


def test_extract_skills_empty():
    assert extract_skills_from_description("") == []


def test_filter_jobs(sample_jobs):
    assert [j.id for j in filter_jobs(sample_jobs, "")] == ["1", "2", "3", "6"]
    assert [j.id for j in filter_jobs(sample_jobs, "SHOPIFY")] == ["6"]
    assert [j.id for j in filter_jobs(sample_jobs, "graphql")] == ["1"]
    assert filter_jobs(sample_jobs, "cobol") == []


@pytest.mark.parametrize("salary,expected", [
    ("$140k-$180k", 180000),
    ("$75k-$100k", 100000),
    ("120,000 - 150,000", 150000),
    ("₹12.0L - ₹18.0L", 1_800_000),
    ("₹50K - ₹90K", 90_000),
    ("₹5.0L+", 500_000),
    ("Up to ₹9.5L", 950_000),
    ("2 locations, $80k", 80_000),
    ("Salary not disclosed", 0),
    ("", 0),
])
def test_parse_salary_max(salary, expected):
    assert parse_salary_max(salary) == expected


def _ranked(job_id: str, title: str, salary: str, score: int) -> RankedJob:
    return RankedJob(job=JobPosting(id=job_id, title=title, salary=salary), match=MatchResult(score=score))


class TestSortRankedJobs:
    ranked = [
        _ranked("a", "Zeta Engineer", "$90k", 40),
        _ranked("b", "alpha Developer", "$150k", 80),
        _ranked("c", "Mid Engineer", "$120k", 80),
    ]

    def test_match_desc_is_stable(self):
        assert [r.job.id for r in sort_ranked_jobs(self.ranked, "match-desc")] == ["b", "c", "a"]

    def test_salary_desc(self):
        assert [r.job.id for r in sort_ranked_jobs(self.ranked, "salary-desc")] == ["b", "c", "a"]

    def test_salary_desc_lakh_above_thousands(self):
        ranked = [
            _ranked("k", "Analyst", "₹50K - ₹90K", 0),
            _ranked("l", "Engineer", "₹12.0L - ₹18.0L", 0),
        ]
        assert [r.job.id for r in sort_ranked_jobs(ranked, "salary-desc")] == ["l", "k"]

    def test_title_asc(self):
        assert [r.job.id for r in sort_ranked_jobs(self.ranked, "title-asc")] == ["b", "c", "a"]

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            sort_ranked_jobs(self.ranked, "newest")
