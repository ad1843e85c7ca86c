"""Template-based match explanations and score labels.

Deterministic: the same score, resume and job always produce the same text.
"""

import math

from models.schemas.job import Job
from models.schemas.match_result import SimilarityScore
from models.schemas.resume_parsed import ParsedResumeData
from services.job_matcher import normalize_skills

# (min percentage, label, color), highest band first
MATCH_BANDS: tuple[tuple[int, str, str], ...] = (
    (80, "Excellent Match", "green"),
    (60, "Good Match", "blue"),
    (40, "Fair Match", "yellow"),
    (0, "Poor Match", "red"),
)


def match_percentage(score: float) -> int:
    """Score 0.0-1.0 as a whole percentage, rounding halves up."""
    return math.floor(score * 100 + 0.5)


def _band(score: float) -> tuple[int, str, str]:
    percentage = match_percentage(score)
    for band in MATCH_BANDS:
        if percentage >= band[0]:
            return band
    return MATCH_BANDS[-1]


def get_match_label(score: float) -> str:
    return _band(score)[1]


def get_match_color(score: float) -> str:
    return _band(score)[2]


def matching_skills(resume: ParsedResumeData, job: Job) -> list[str]:
    """Skills the resume shares with the job, in resume order.

    Names are compared the way the skills score compares them: trimmed and
    lowercased.
    """
    job_skills = normalize_skills(job.skills)
    shared: list[str] = []
    for skill in resume.skills:
        skill = skill.strip().lower()
        if skill and skill in job_skills and skill not in shared:
            shared.append(skill)
    return shared


def _overall_clause(percentage: int) -> str:
    if percentage >= 85:
        return "Excellent match!"
    elif percentage >= 70:
        return "Strong match!"
    elif percentage >= 55:
        return "Good match!"
    elif percentage >= 40:
        return "Fair match!"
    return "Limited match."


def _skills_clause(percentage: int, shared: list[str]) -> str:
    if percentage >= 80 and shared:
        return f"Your skills in {', '.join(shared[:3])} align perfectly with this role."
    elif percentage >= 60 and shared:
        return f"Your {' and '.join(shared[:2])} skills are valuable for this position."
    elif shared:
        return f"Your {shared[0]} experience is relevant."
    return "Consider developing skills in the required technologies."


def _experience_clause(percentage: int, years: int) -> str:
    if percentage >= 80:
        return f"Your {years} years of experience meets their requirements perfectly."
    elif percentage >= 60:
        return f"Your {years} years of experience is well-suited for this level."
    elif percentage >= 40:
        return "Your experience level is approaching their requirements."
    return "Consider gaining more experience in this field."


def generate_match_explanation(
    score: SimilarityScore,
    resume: ParsedResumeData,
    job: Job,
) -> str:
    """Generate a three-sentence explanation: overall, skills, experience."""
    parts = [
        _overall_clause(match_percentage(score.score)),
        _skills_clause(match_percentage(score.details.skills), matching_skills(resume, job)),
        _experience_clause(match_percentage(score.details.experience), resume.experience_years),
    ]
    return " ".join(parts)
