"""Match scorer: weighted multi-factor similarity between a resume and a job.

Four sub-scores, each 0.0-1.0, combined with fixed weights:
    skills      0.4  Jaccard overlap + topical group boost
    experience  0.3  years vs. the job level's {min, ideal}
    location    0.2  remote availability (no geocoding)
    title       0.1  substring / Levenshtein / synonym groups

Pure functions over plain data; never raises.
"""

import logging
import math

from rapidfuzz.distance import Levenshtein

from models.schemas.job import Job
from models.schemas.match_result import ScoreDetails, SimilarityScore
from models.schemas.resume_parsed import ParsedResumeData

logger = logging.getLogger(__name__)

MATCH_WEIGHTS: dict[str, float] = {
    "skills": 0.4,
    "experience": 0.3,
    "location": 0.2,
    "title": 0.1,
}

# Related-skill groups: sharing a group earns a boost even without exact overlap
SKILL_GROUPS: dict[str, tuple[str, ...]] = {
    "frontend": ("react", "vue", "angular", "javascript", "typescript", "html", "css", "sass", "jsx"),
    "backend": ("node.js", "express", "django", "flask", "spring", "laravel", "php", "python", "java"),
    "database": ("mysql", "postgresql", "mongodb", "redis", "sqlite", "oracle", "sql"),
    "cloud": ("aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible"),
    "mobile": ("react native", "flutter", "swift", "kotlin", "ios", "android"),
    "ml": ("tensorflow", "pytorch", "scikit-learn", "pandas", "numpy", "machine learning", "ai"),
    "devops": ("ci/cd", "jenkins", "github actions", "docker", "kubernetes", "terraform"),
}
SKILL_GROUP_BOOST = 0.1
MAX_SKILL_BOOST = 0.3

# Years of experience per job level
LEVEL_REQUIREMENTS: dict[str, dict[str, int]] = {
    "entry": {"min": 0, "ideal": 1},
    "mid": {"min": 2, "ideal": 4},
    "senior": {"min": 5, "ideal": 8},
    "executive": {"min": 10, "ideal": 15},
}
DEFAULT_LEVEL = "mid"

REMOTE_SCORE = 0.9
REMOTE_LOCATION_SCORE = 1.0
DEFAULT_LOCATION_SCORE = 0.7

TITLE_SYNONYMS: dict[str, tuple[str, ...]] = {
    "developer": ("engineer", "programmer", "coder"),
    "senior": ("lead", "principal", "staff"),
    "junior": ("entry", "associate", "jr"),
    "fullstack": ("full stack", "full-stack"),
    "frontend": ("front end", "front-end", "ui", "client"),
    "backend": ("back end", "back-end", "server", "api"),
    "mobile": ("ios", "android", "app"),
    "data": ("analytics", "scientist", "analyst"),
    "devops": ("sre", "infrastructure", "platform", "reliability"),
    "manager": ("lead", "director", "head", "vp"),
}
SUBSTRING_TITLE_SCORE = 0.9
TITLE_SYNONYM_BOOST = 0.2
MAX_TITLE_SYNONYM_SCORE = 0.8


def normalize_skills(skills: list[str]) -> set[str]:
    """Lowercased, trimmed skill names with blanks dropped."""
    return {s.strip().lower() for s in skills if s.strip()}


def _in_group(skill: str, group: tuple[str, ...]) -> bool:
    return any(skill in keyword or keyword in skill for keyword in group)


def semantic_skills_boost(resume_skills: set[str], job_skills: set[str]) -> float:
    """0.1 per skill group both sides touch, capped at 0.3."""
    boost = 0.0
    for group in SKILL_GROUPS.values():
        resume_has = any(_in_group(s, group) for s in resume_skills)
        job_has = any(_in_group(s, group) for s in job_skills)
        if resume_has and job_has:
            boost += SKILL_GROUP_BOOST
    return min(boost, MAX_SKILL_BOOST)


def calculate_skills_match(resume_skills: list[str], job_skills: list[str]) -> float:
    """Jaccard similarity of the two skill sets plus the group boost."""
    resume_set = normalize_skills(resume_skills)
    job_set = normalize_skills(job_skills)
    if not resume_set or not job_set:
        return 0.0

    jaccard = len(resume_set & job_set) / len(resume_set | job_set)
    boost = semantic_skills_boost(resume_set, job_set)
    return min(jaccard + boost, 1.0)


def calculate_experience_match(resume_years: float, job_level: str) -> float:
    """Score years of experience against the job level's requirement.

    At or above the ideal: 1.0 with a mild overqualification penalty
    (floor 0.9). Between min and ideal: linear from 0.6 to 1.0. Below min:
    exponential decay from 0.6 (floor 0.1).
    """
    requirement = LEVEL_REQUIREMENTS.get(job_level, LEVEL_REQUIREMENTS[DEFAULT_LEVEL])
    minimum, ideal = requirement["min"], requirement["ideal"]

    if resume_years >= ideal:
        return max(0.9, 1.0 - 0.02 * (resume_years - ideal))
    if resume_years >= minimum:
        return 0.6 + 0.4 * (resume_years - minimum) / (ideal - minimum)
    return max(0.1, 0.6 * math.exp(-0.5 * (minimum - resume_years)))


def calculate_location_match(resume: ParsedResumeData, job: Job) -> float:
    """Location fit from the job posting alone.

    Candidate location is not compared (no geocoding), so non-remote jobs
    get a flat default.
    """
    if job.remote_option:
        return REMOTE_SCORE

    location = job.location.lower()
    if "remote" in location or "anywhere" in location:
        return REMOTE_LOCATION_SCORE
    return DEFAULT_LOCATION_SCORE


def title_semantic_similarity(title_a: str, title_b: str) -> float:
    """0.2 per synonym group present in both titles, capped at 0.8."""
    similarity = 0.0
    for term, synonyms in TITLE_SYNONYMS.items():
        words = (term, *synonyms)
        if any(w in title_a for w in words) and any(w in title_b for w in words):
            similarity += TITLE_SYNONYM_BOOST
    return min(similarity, MAX_TITLE_SYNONYM_SCORE)


def levenshtein_similarity(a: str, b: str) -> float:
    """1 - edit distance / longer length."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - Levenshtein.distance(a, b) / longest


def calculate_title_match(resume_titles: list[str], job_title: str) -> float:
    """Best title similarity between any resume title and the job title."""
    if not resume_titles:
        return 0.0

    job_title = job_title.lower()
    best = 0.0
    for title in resume_titles:
        title = title.lower()

        if title in job_title or job_title in title:
            best = max(best, SUBSTRING_TITLE_SCORE)
            continue

        score = max(
            levenshtein_similarity(title, job_title),
            title_semantic_similarity(title, job_title),
        )
        best = max(best, score)

    return best


def calculate_match(resume: ParsedResumeData, job: Job) -> SimilarityScore:
    """Compute the weighted match score between a parsed resume and a job."""
    details = ScoreDetails(
        skills=calculate_skills_match(resume.skills, job.skills),
        experience=calculate_experience_match(resume.experience_years, job.experience_level),
        location=calculate_location_match(resume, job),
        title=calculate_title_match(resume.job_titles, job.title),
    )

    overall = (
        details.skills * MATCH_WEIGHTS["skills"]
        + details.experience * MATCH_WEIGHTS["experience"]
        + details.location * MATCH_WEIGHTS["location"]
        + details.title * MATCH_WEIGHTS["title"]
    )

    logger.debug("Match for job %s: %.3f (%s)", job.id or job.title, overall, details)
    return SimilarityScore(score=min(overall, 1.0), details=details)
