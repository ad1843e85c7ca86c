"""Resume extractor: free-form resume text -> ParsedResumeData.

Stateless and total over its input: anything that can't be found falls back
to a default (no skills, estimated years, fallback summary) instead of
raising.
"""

import logging

from models.schemas.resume_parsed import ParsedResumeData
from services.experience_estimator import extract_experience_years
from services.section_parser import extract_education, extract_job_titles, extract_summary
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)


def parse_resume_text(text: str) -> ParsedResumeData:
    """Parse resume text into structured fields.

    Experience is estimated from the lowercased text. Skills are matched
    case-insensitively; education, job titles and the summary are read from
    the original text so the extracted names keep their case.
    """
    original = text.strip()
    clean = original.lower()

    parsed = ParsedResumeData(
        skills=extract_skills(original),
        experience_years=extract_experience_years(clean),
        education=extract_education(original),
        job_titles=extract_job_titles(original),
        summary=extract_summary(original),
    )

    logger.debug(
        "Parsed resume: %d skills, %d years, %d education entries, %d titles",
        len(parsed.skills),
        parsed.experience_years,
        len(parsed.education),
        len(parsed.job_titles),
    )
    return parsed
