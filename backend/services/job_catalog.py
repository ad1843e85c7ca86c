"""Job catalog: load postings from JSON, look them up and search them."""

import logging
import math
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from config import settings
from models.requests import SearchFilters
from models.responses import JobSearchResponse
from models.schemas.job import Job

logger = logging.getLogger(__name__)

_JOB_LIST = TypeAdapter(list[Job])


class JobCatalogError(ValueError):
    """The job catalog file is missing, unreadable or malformed."""


def load_jobs(path: str | Path | None = None) -> list[Job]:
    """Read and validate a JSON array of job postings."""
    path = Path(path or settings.jobs_file)
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error("Could not read job catalog %s: %s", path, e)
        raise JobCatalogError(f"Could not read job catalog: {path}") from e

    try:
        jobs = _JOB_LIST.validate_json(raw)
    except ValidationError as e:
        logger.error("Invalid job catalog %s: %d errors", path, e.error_count())
        raise JobCatalogError(f"Invalid job catalog: {path}") from e

    logger.info("Loaded %d jobs from %s", len(jobs), path)
    return jobs


def get_job(jobs: list[Job], job_id: str) -> Job | None:
    return next((job for job in jobs if job.id == job_id), None)


def _matches_query(job: Job, query: str) -> bool:
    query = query.lower()
    haystack = [job.title, job.company, job.description, *job.skills, *job.requirements]
    return any(query in field.lower() for field in haystack)


def _matches(job: Job, filters: SearchFilters) -> bool:
    if filters.query and not _matches_query(job, filters.query):
        return False
    if filters.location and filters.location.lower() not in job.location.lower():
        return False
    if filters.experience_level and job.experience_level != filters.experience_level:
        return False
    if filters.job_type and job.job_type != filters.job_type:
        return False
    if filters.remote_only and not job.remote_option:
        return False
    if filters.salary_min is not None and (job.salary_min is None or job.salary_min < filters.salary_min):
        return False
    if filters.salary_max is not None and (job.salary_max is None or job.salary_max > filters.salary_max):
        return False
    if filters.skills:
        job_skills = {s.lower() for s in job.skills}
        if not all(s.lower() in job_skills for s in filters.skills):
            return False
    return True


def search_jobs(
    jobs: list[Job],
    filters: SearchFilters | None = None,
    page: int = 1,
    limit: int | None = None,
) -> JobSearchResponse:
    """Filter the catalog and return one page of results.

    Pages are 1-based. Every filter that is set must match; an empty
    ``SearchFilters`` returns the whole catalog.
    """
    filters = filters or SearchFilters()
    limit = limit or settings.jobs_per_page
    page = max(page, 1)

    found = [job for job in jobs if _matches(job, filters)]
    start = (page - 1) * limit

    logger.debug("Search matched %d of %d jobs", len(found), len(jobs))
    return JobSearchResponse(
        jobs=found[start:start + limit],
        total=len(found),
        page=page,
        limit=limit,
        total_pages=math.ceil(len(found) / limit),
    )
