"""Pydantic contracts shared by the extractor, scorer and ranker."""

from models.schemas.job import Job
from models.schemas.match_result import JobMatch, MatchStats, ScoreDetails, SimilarityScore
from models.schemas.resume_parsed import Education, ParsedResumeData

__all__ = [
    "Education",
    "ParsedResumeData",
    "Job",
    "ScoreDetails",
    "SimilarityScore",
    "JobMatch",
    "MatchStats",
]
