"""Ranking: score one resume against many jobs.

Flow:
    ParsedResumeData + [Job, ...]
      ├─ calculate_match(resume, job)            → SimilarityScore   (per job)
      ├─ keep score > min_score
      ├─ generate_match_explanation(...)         → str               (per kept job)
      └─ sort by score, highest first            → [JobMatch, ...]

The async variant scores each job in its own worker thread and sorts once
every score is in.
"""

import asyncio
import logging
from datetime import datetime, timezone

import numpy as np

from config import settings
from models.schemas.job import Job
from models.schemas.match_result import JobMatch, MatchStats, SimilarityScore
from models.schemas.resume_parsed import ParsedResumeData
from services.job_matcher import calculate_match
from services.match_explainer import generate_match_explanation

logger = logging.getLogger(__name__)

EXCELLENT_THRESHOLD = 0.8
GOOD_THRESHOLD = 0.6


def _to_job_match(
    similarity: SimilarityScore,
    resume: ParsedResumeData,
    job: Job,
    user_id: str,
    resume_id: str,
) -> JobMatch:
    return JobMatch(
        id=f"match-{resume_id}-{job.id}",
        user_id=user_id,
        job_id=job.id,
        resume_id=resume_id,
        match_score=similarity.score,
        skills_match=similarity.details.skills,
        experience_match=similarity.details.experience,
        location_match=similarity.details.location,
        title_match=similarity.details.title,
        explanation=generate_match_explanation(similarity, resume, job),
        created_at=datetime.now(timezone.utc).isoformat(),
    )


def _collect(
    scored: list[tuple[Job, SimilarityScore]],
    resume: ParsedResumeData,
    min_score: float,
    user_id: str,
    resume_id: str,
) -> list[JobMatch]:
    matches = [
        _to_job_match(similarity, resume, job, user_id, resume_id)
        for job, similarity in scored
        if similarity.score > min_score
    ]
    # Stable sort: equal scores keep catalog order
    matches.sort(key=lambda m: m.match_score, reverse=True)
    logger.info("Ranked %d jobs, %d above %.2f", len(scored), len(matches), min_score)
    return matches


def rank_jobs(
    resume: ParsedResumeData,
    jobs: list[Job],
    min_score: float | None = None,
    user_id: str = "demo-user",
    resume_id: str = "demo-resume",
) -> list[JobMatch]:
    """Score every job and return those above min_score, best first."""
    if min_score is None:
        min_score = settings.min_match_score

    scored = [(job, calculate_match(resume, job)) for job in jobs]
    return _collect(scored, resume, min_score, user_id, resume_id)


async def rank_jobs_async(
    resume: ParsedResumeData,
    jobs: list[Job],
    min_score: float | None = None,
    user_id: str = "demo-user",
    resume_id: str = "demo-resume",
) -> list[JobMatch]:
    """Same as rank_jobs, scoring each job in its own worker thread."""
    if min_score is None:
        min_score = settings.min_match_score

    similarities = await asyncio.gather(
        *(asyncio.to_thread(calculate_match, resume, job) for job in jobs)
    )
    return _collect(list(zip(jobs, similarities)), resume, min_score, user_id, resume_id)


def compute_match_stats(matches: list[JobMatch]) -> MatchStats:
    """Summary counts and mean score over a list of matches."""
    if not matches:
        return MatchStats()

    scores = np.array([m.match_score for m in matches])
    return MatchStats(
        total_matches=len(matches),
        excellent_matches=int(np.sum(scores >= EXCELLENT_THRESHOLD)),
        good_matches=int(np.sum((scores >= GOOD_THRESHOLD) & (scores < EXCELLENT_THRESHOLD))),
        average_score=float(np.mean(scores)),
    )
