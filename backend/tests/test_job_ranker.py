"""Tests for ranking a resume against many jobs."""

import pytest

from config import settings
from models.schemas.job import Job
from models.schemas.match_result import JobMatch
from services.job_catalog import load_jobs
from services.job_matcher import calculate_match
from services.job_ranker import compute_match_stats, rank_jobs, rank_jobs_async
from services.resume_parser import parse_resume_text


@pytest.fixture
def exact_job(frontend_job) -> Job:
    return frontend_job.model_copy(update={"id": "job-exact", "skills": ["React", "TypeScript"]})


@pytest.fixture
def poor_job() -> Job:
    return Job(
        id="job-pm",
        title="Product Manager",
        location="Miami, FL",
        skills=["Agile", "Scrum"],
        experience_level="executive",
    )


def test_rank_jobs_filters_and_builds_matches(frontend_resume, frontend_job, poor_job):
    matches = rank_jobs(frontend_resume, [poor_job, frontend_job])

    assert len(matches) == 1
    match = matches[0]
    assert match.id == "match-demo-resume-job-fe"
    assert match.job_id == "job-fe"
    assert match.user_id == "demo-user"
    assert match.match_score == pytest.approx(0.8367, abs=1e-4)
    assert match.skills_match == pytest.approx(2 / 3 + 0.2)
    assert match.location_match == 0.9
    assert match.explanation.startswith("Strong match!")
    assert match.created_at


def test_rank_jobs_sorted_by_score(frontend_resume, frontend_job, exact_job):
    matches = rank_jobs(frontend_resume, [frontend_job, exact_job])
    assert [m.job_id for m in matches] == ["job-exact", "job-fe"]
    assert matches[0].match_score > matches[1].match_score


def test_rank_jobs_ties_keep_input_order(frontend_resume, frontend_job):
    twin = frontend_job.model_copy(update={"id": "job-twin"})
    matches = rank_jobs(frontend_resume, [twin, frontend_job])
    assert [m.job_id for m in matches] == ["job-twin", "job-fe"]


def test_rank_jobs_threshold_is_strict(frontend_resume, frontend_job):
    score = calculate_match(frontend_resume, frontend_job).score
    assert rank_jobs(frontend_resume, [frontend_job], min_score=score) == []


def test_rank_jobs_default_threshold(frontend_resume, frontend_job, monkeypatch):
    monkeypatch.setattr(settings, "min_match_score", 0.95)
    assert rank_jobs(frontend_resume, [frontend_job]) == []


def test_rank_jobs_ids(frontend_resume, frontend_job):
    matches = rank_jobs(frontend_resume, [frontend_job], user_id="u-1", resume_id="r-9")
    assert matches[0].id == "match-r-9-job-fe"
    assert matches[0].user_id == "u-1"
    assert matches[0].resume_id == "r-9"


def test_rank_jobs_empty(frontend_resume):
    assert rank_jobs(frontend_resume, []) == []


@pytest.mark.asyncio
async def test_rank_jobs_async_matches_sync(frontend_resume, frontend_job, exact_job, poor_job):
    jobs = [poor_job, frontend_job, exact_job]
    async_matches = await rank_jobs_async(frontend_resume, jobs)
    sync_matches = rank_jobs(frontend_resume, jobs)

    assert [m.job_id for m in async_matches] == [m.job_id for m in sync_matches]
    assert [m.match_score for m in async_matches] == [m.match_score for m in sync_matches]


def test_compute_match_stats():
    matches = [
        JobMatch(id="a", job_id="1", match_score=0.9),
        JobMatch(id="b", job_id="2", match_score=0.7),
        JobMatch(id="c", job_id="3", match_score=0.55),
    ]
    stats = compute_match_stats(matches)
    assert stats.total_matches == 3
    assert stats.excellent_matches == 1
    assert stats.good_matches == 1
    assert stats.average_score == pytest.approx((0.9 + 0.7 + 0.55) / 3)


def test_compute_match_stats_empty():
    stats = compute_match_stats([])
    assert stats.total_matches == 0
    assert stats.average_score == 0.0


@pytest.mark.evaluation
def test_sample_resume_ranks_backend_role_first(sample_resume_text):
    resume = parse_resume_text(sample_resume_text)
    matches = rank_jobs(resume, load_jobs())

    assert matches
    assert matches[0].job_id == "job-002"
    scores = [m.match_score for m in matches]
    assert scores == sorted(scores, reverse=True)
    assert all(score > settings.min_match_score for score in scores)
