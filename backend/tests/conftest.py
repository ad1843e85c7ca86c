"""Shared test configuration, pytest markers and fixtures."""

import pytest

from models.schemas import Job, ParsedResumeData


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: reads the bundled job catalog from disk"
    )
    config.addinivalue_line(
        "markers", "evaluation: ranks real resumes against the bundled catalog"
    )


SAMPLE_RESUME = """Jane Smith
jane.smith@email.com | (555) 987-6543

Professional Summary
Backend engineer focused on APIs and data pipelines.

Experience
Senior Software Engineer | Acme Corp | 2019 - Present
Software Engineer | Initech | 2015 - 2019

Education
Bachelor of Science in Computer Science, Stanford University, 2015

Skills
Python, Django, PostgreSQL, Docker, AWS
"""


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def frontend_resume() -> ParsedResumeData:
    return ParsedResumeData(
        skills=["React", "TypeScript"],
        experience_years=6,
        job_titles=["Senior Frontend Developer"],
    )


@pytest.fixture
def frontend_job() -> Job:
    return Job(
        id="job-fe",
        title="Senior Frontend Developer",
        company="TechFlow Solutions",
        location="San Francisco, CA",
        skills=["React", "TypeScript", "JavaScript"],
        experience_level="senior",
        remote_option=True,
    )
