"""Match scorer output and the ranked match records built from it."""

from pydantic import BaseModel


class ScoreDetails(BaseModel):
    """The four weighted sub-scores, each 0.0-1.0."""
    skills: float = 0.0
    experience: float = 0.0
    location: float = 0.0
    title: float = 0.0


class SimilarityScore(BaseModel):
    """Weighted overall score (0.0-1.0) with its sub-score breakdown.

    Recomputed per (resume, job) pair, never cached.
    """
    score: float = 0.0
    details: ScoreDetails = ScoreDetails()


class JobMatch(BaseModel):
    """A job that cleared the ranking threshold for a resume."""
    id: str
    user_id: str = ""
    job_id: str
    resume_id: str = ""
    match_score: float = 0.0
    skills_match: float = 0.0
    experience_match: float = 0.0
    location_match: float = 0.0
    title_match: float = 0.0
    explanation: str = ""
    created_at: str = ""


class MatchStats(BaseModel):
    total_matches: int = 0
    excellent_matches: int = 0  # score >= 0.8
    good_matches: int = 0  # 0.6 <= score < 0.8
    average_score: float = 0.0
