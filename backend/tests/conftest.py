"""Shared test fixtures."""

import pytest

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting


@pytest.fixture
def frontend_profile() -> CandidateProfile:
    return CandidateProfile(
        skills=["React", "HTML"],
        experience_years=2,
        job_titles=["Frontend Intern"],
        interests=["frontend"],
    )


@pytest.fixture
def sample_jobs() -> list[JobPosting]:
    return [
        JobPosting(id="1", title="Senior Frontend Developer", company="Google", location="Remote",
                   salary="$140k-$180k", skills=["React", "TypeScript", "GraphQL", "AWS"]),
        JobPosting(id="2", title="Full Stack Engineer", company="Amazon", location="Seattle, WA",
                   salary="$130k-$170k", skills=["Node.js", "React", "Docker", "MongoDB"]),
        JobPosting(id="3", title="Backend Developer", company="Microsoft", location="Remote",
                   salary="$120k-$160k", skills=["Python", "AWS", "Docker", "Redis"]),
        JobPosting(id="6", title="Junior React Developer", company="Shopify", location="Remote",
                   salary="$75k-$100k", skills=["React", "JavaScript", "HTML", "CSS"]),
    ]


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from api import dependencies
    from api.router import limiter
    from main import app
    from services.app_state import AppState

    app.state.career = AppState()
    dependencies.reset()
    limiter.reset()
    return TestClient(app)
