"""Years-of-experience extraction from resume text.

Three strategies, tried in order; the first one that yields a value wins:
1. Explicit claims: "5+ years of experience", "experience: 3 years"
2. Work-history date ranges: "2019 - 2021", "Jan 2020 - Present"
3. Content heuristic: seniority and complexity vocabulary
"""

import logging
import math
import re
from datetime import datetime

logger = logging.getLogger(__name__)

MAX_EXPLICIT_YEARS = 50
MAX_WORK_HISTORY_YEARS = 30
MAX_ESTIMATED_YEARS = 15
EARLIEST_START_YEAR = 1980

# Checked in order; the first valid claim wins
EXPERIENCE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(\d+)\+?\s*years?\s+(?:of\s+)?experience", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*years?\s+(?:in|with)\b", re.IGNORECASE),
    re.compile(r"experience:?\s*(\d+)\+?\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*yrs?\s+exp", re.IGNORECASE),
)

# Date ranges: "2020 - 2023", "Mar 2018 – Nov 2022", "Jan 2019 - Present"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_RANGE_RE = re.compile(
    rf"(?:{_MONTHS}\.?\s+)?(\d{{4}})"
    r"\s*[-–—]\s*"
    rf"(?:(?:{_MONTHS}\.?\s+)?(\d{{4}})|present|current)",
    re.IGNORECASE,
)

SENIOR_INDICATORS = (
    "senior", "lead", "principal", "architect", "manager", "director",
    "team lead", "technical lead", "staff engineer",
)
MID_INDICATORS = ("software engineer", "developer", "programmer", "analyst")
JUNIOR_INDICATORS = ("junior", "entry", "intern", "trainee", "associate", "graduate")
COMPLEXITY_INDICATORS = (
    "architecture", "scalability", "microservices", "distributed",
    "performance", "optimization", "mentoring", "leadership",
)


def extract_explicit_years(text: str) -> int | None:
    """Years from an explicit experience claim, if any plausible one exists."""
    for pattern in EXPERIENCE_PATTERNS:
        for match in pattern.finditer(text):
            years = int(match.group(1))
            if 0 < years <= MAX_EXPLICIT_YEARS:
                return years
    return None


def calculate_work_history_years(text: str) -> int:
    """Longest single date range in the text, in whole years.

    Overlapping or consecutive roles are not summed; the longest span stands
    in for total experience. Returns 0 when no usable range is found.
    """
    current_year = datetime.now().year
    spans: list[int] = []

    for match in DATE_RANGE_RE.finditer(text):
        start_year = int(match.group(1))
        end_year = int(match.group(2)) if match.group(2) else current_year
        if EARLIEST_START_YEAR <= start_year <= end_year:
            spans.append(end_year - start_year)

    if not spans:
        return 0
    return min(max(spans), MAX_WORK_HISTORY_YEARS)


def estimate_experience_from_content(text: str) -> int:
    """Rough estimate from seniority words and technical-complexity words."""
    text_lower = text.lower()

    if any(term in text_lower for term in SENIOR_INDICATORS):
        score = 7.0
    elif any(term in text_lower for term in MID_INDICATORS):
        score = 4.0
    elif any(term in text_lower for term in JUNIOR_INDICATORS):
        score = 1.0
    else:
        score = 3.0

    score += 0.5 * sum(1 for term in COMPLEXITY_INDICATORS if term in text_lower)

    # Round half up: 4.5 -> 5
    return min(math.floor(score + 0.5), MAX_ESTIMATED_YEARS)


def extract_experience_years(text: str) -> int:
    """Estimate total years of experience from resume text."""
    explicit = extract_explicit_years(text)
    if explicit is not None:
        logger.debug("Experience from explicit claim: %d years", explicit)
        return explicit

    work_years = calculate_work_history_years(text)
    if work_years > 0:
        logger.debug("Experience from work history: %d years", work_years)
        return work_years

    estimated = estimate_experience_from_content(text)
    logger.debug("Experience estimated from content: %d years", estimated)
    return estimated
