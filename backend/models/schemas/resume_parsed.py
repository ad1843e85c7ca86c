"""Resume extractor output: structured fields parsed from resume text."""

from pydantic import BaseModel

DEFAULT_SUMMARY = (
    "Professional with expertise in software development and technology solutions."
)


class Education(BaseModel):
    """A single education entry."""
    degree: str = "Not specified"  # normalized, e.g. "Bachelor of Science"
    school: str = "Not specified"
    year: int | None = None  # most recent plausible year near the degree
    field: str | None = None  # e.g. "Computer Science"


class ParsedResumeData(BaseModel):
    """Structured output of the resume extractor.

    Skills and job titles are deduplicated case-insensitively; their order
    is first-seen and carries no meaning.
    """
    skills: list[str] = []
    experience_years: int = 0
    education: list[Education] = []
    job_titles: list[str] = []
    summary: str = DEFAULT_SUMMARY
