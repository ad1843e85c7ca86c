"""Job posting record consumed (read-only) by the match scorer."""

from pydantic import BaseModel

EXPERIENCE_LEVELS = ("entry", "mid", "senior", "executive")
JOB_TYPES = ("full-time", "part-time", "contract", "internship")


class Job(BaseModel):
    """A single job posting from the catalog.

    ``experience_level`` is kept as a plain string so that unknown levels
    still reach the scorer, which treats them as "mid".
    """
    id: str = ""
    title: str = ""
    company: str = ""
    location: str = ""
    salary_min: int | None = None
    salary_max: int | None = None
    description: str = ""
    requirements: list[str] = []
    skills: list[str] = []
    experience_level: str = "mid"  # entry, mid, senior, executive
    job_type: str = "full-time"  # full-time, part-time, contract, internship
    remote_option: bool = False
    created_at: str = ""
    updated_at: str = ""
