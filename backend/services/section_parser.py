"""Resume section detection and field extraction.

Covers the pieces of a resume that are located by headers or line shape:
summary, job titles and education entries.
"""

import re
from datetime import datetime

from models.schemas.resume_parsed import DEFAULT_SUMMARY, Education

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|path)",
        r"(?:positions?\s*held|roles)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"(?:tools\s+and\s+)?technologies",
        r"(?:programming\s+)?languages",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"overview",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
        r"portfolio",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
    ],
}

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE
    )

# "Languages & Tools:" style headers that aren't in the known list
_COLON_HEADER_RE = re.compile(r"^\s*[A-Z][A-Za-z &/]{1,40}:\s*$")


def is_header_line(line: str) -> bool:
    """True if the line is a section header rather than section content."""
    stripped = line.strip()
    if not stripped:
        return False
    if _COLON_HEADER_RE.match(stripped):
        return True
    return any(pattern.match(stripped) for pattern in _COMPILED.values())


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

MAX_SUMMARY_LENGTH = 500

# Header at line start, ended by a colon or the end of its line. The body
# stops at a blank line, a line starting with a capital letter, or the end
# of the text.
_SUMMARY_RE = re.compile(
    r"^[ \t]*(?i:(?:(?:professional|career|executive)[ \t]+)?"
    r"(?:summary|profile|overview|objective))"
    r"[ \t]*(?::|$)[ \t]*\n?[ \t]*"
    r"(?P<body>\S.*?)"
    r"(?=\n[ \t]*\n|\n[A-Z]|\Z)",
    re.MULTILINE | re.DOTALL,
)


def extract_summary(text: str) -> str:
    """Extract the summary/profile section, keeping its original case."""
    match = _SUMMARY_RE.search(text)
    if not match:
        return DEFAULT_SUMMARY

    summary = match.group("body").strip()
    if len(summary) > MAX_SUMMARY_LENGTH:
        summary = summary[:MAX_SUMMARY_LENGTH] + "..."
    return summary


# ---------------------------------------------------------------------------
# Job titles
# ---------------------------------------------------------------------------

ROLE_NOUNS = (
    "engineer", "developer", "analyst", "manager", "director", "lead",
    "architect", "consultant", "specialist", "coordinator",
)

# Capitalized line start running up to the last role noun on the line
_TITLE_LINE_RE = re.compile(
    rf"^[ \t]*([A-Z][^,\n]*(?i:{'|'.join(ROLE_NOUNS)}))\b",
    re.MULTILINE,
)
_LABELED_TITLE_RE = re.compile(r"(?i:position|title|role):[ \t]*([^,\n]+)")


def extract_job_titles(text: str) -> list[str]:
    """Extract candidate job titles from work-history-like lines."""
    titles: list[str] = []
    seen: set[str] = set()

    for pattern in (_TITLE_LINE_RE, _LABELED_TITLE_RE):
        for match in pattern.finditer(text):
            title = match.group(1).strip()
            if not 3 < len(title) < 100:
                continue
            key = title.lower()
            if key not in seen:
                seen.add(key)
                titles.append(title)

    return titles


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

_DISCIPLINES = r"(?:science|arts|engineering|fine[ \t]+arts|business[ \t]+administration|applied[ \t]+science)"

# Word forms match in any case; bare abbreviations (BS, M.A.) must be uppercase
DEGREE_PATTERNS: dict[str, str] = {
    "bachelors": rf"(?i:bachelor['’]?s?(?:[ \t]+of[ \t]+{_DISCIPLINES})?)|B\.?[AS]\.?",
    "masters": rf"(?i:master['’]?s?(?:[ \t]+of[ \t]+{_DISCIPLINES})?|mba)|M\.?[AS]\.?",
    "phd": r"(?i:ph\.?d\.?|doctorate|doctoral)",
    "associate": rf"(?i:associate['’]?s?(?:[ \t]+of[ \t]+{_DISCIPLINES})?)|A\.?[AS]\.?",
}

# Optional "degree", "of" or "in" before the field of study
_FIELD = (
    r"(?:[ \t]+(?i:degree[ \t]+)?(?:(?i:of|in)[ \t]+)?"
    r"(?P<field>[A-Za-z][^,\n|()]*))?"
)

_DEGREE_COMPILED: dict[str, re.Pattern] = {
    level: re.compile(rf"\b(?P<degree>{pattern})(?![A-Za-z]){_FIELD}")
    for level, pattern in DEGREE_PATTERNS.items()
}

_BARE_ABBREVIATION_RE = re.compile(r"[A-Z]{2}")

# Job titles and product names that contain a degree word: "Scrum Master", "MS Office"
_NON_DEGREE_QUALIFIER_RE = re.compile(r"(?i:\b(?:scrum|certified|web|post|quiz|game)[ \t]+)$")
NON_DEGREE_FIELD_WORDS = frozenset({
    "office", "excel", "word", "outlook", "powerpoint", "access",
    "project", "teams", "sql", "azure", "dynamics",
})

# Keys are lowercase with dots and apostrophes removed, plural folded
DEGREE_NORMALIZATIONS: dict[str, str] = {
    "bachelor": "Bachelor of Science",
    "bs": "Bachelor of Science",
    "ba": "Bachelor of Arts",
    "bachelor of science": "Bachelor of Science",
    "bachelor of arts": "Bachelor of Arts",
    "bachelor of engineering": "Bachelor of Engineering",
    "bachelor of fine arts": "Bachelor of Fine Arts",
    "bachelor of business administration": "Bachelor of Business Administration",
    "master": "Master of Science",
    "ms": "Master of Science",
    "ma": "Master of Arts",
    "mba": "Master of Business Administration",
    "master of science": "Master of Science",
    "master of arts": "Master of Arts",
    "master of engineering": "Master of Engineering",
    "master of fine arts": "Master of Fine Arts",
    "master of business administration": "Master of Business Administration",
    "phd": "PhD",
    "doctorate": "PhD",
    "doctoral": "PhD",
    "associate": "Associate Degree",
    "as": "Associate of Science",
    "aa": "Associate of Arts",
    "associate of science": "Associate of Science",
    "associate of arts": "Associate of Arts",
    "associate of applied science": "Associate of Applied Science",
}

CONTEXT_RADIUS = 100

_CAP_WORD = r"[A-Z][\w&.'’-]*"
_SCHOOL_RE = re.compile(
    rf"(?:{_CAP_WORD}[ \t]+){{0,5}}(?:University|College|Institute|School)\b"
    rf"(?:[ \t]+of[ \t]+{_CAP_WORD}(?:[ \t]+(?:(?:of|and|the)[ \t]+)?{_CAP_WORD})*)?"
)
_YEAR_RE = re.compile(r"\b((?:19|20)\d{2})\b")


def normalize_degree(degree: str) -> str:
    """Map a matched degree token to its display name."""
    key = re.sub(r"[.'’]", "", degree.lower())
    key = re.sub(r"\s+", " ", key).strip()
    key = re.sub(r"^(bachelor|master|associate)s\b", r"\1", key)
    return DEGREE_NORMALIZATIONS.get(key, degree.strip())


def _context_around(text: str, index: int, radius: int = CONTEXT_RADIUS) -> str:
    return text[max(0, index - radius):index + radius]


def extract_school(context: str) -> str | None:
    """Find the first school name in a snippet of text."""
    match = _SCHOOL_RE.search(context)
    return match.group().strip() if match else None


def extract_year(context: str) -> int | None:
    """Most recent plausible year in a snippet (1980 to ten years ahead)."""
    latest = datetime.now().year + 10
    years = [int(y) for y in _YEAR_RE.findall(context)]
    years = [y for y in years if 1980 <= y <= latest]
    return max(years) if years else None


def extract_school_names(text: str) -> list[str]:
    """All distinct school names in the text, in order of appearance."""
    schools: list[str] = []
    for match in _SCHOOL_RE.finditer(text):
        school = match.group().strip()
        if school not in schools:
            schools.append(school)
    return schools


def _is_non_degree(text: str, start: int, raw_degree: str, field: str | None) -> bool:
    abbreviation = _BARE_ABBREVIATION_RE.fullmatch(raw_degree) is not None
    # "Boston, MA" is a location, not a degree
    if abbreviation and field is None:
        return True
    if abbreviation and field.split()[0].lower() in NON_DEGREE_FIELD_WORDS:
        return True
    return _NON_DEGREE_QUALIFIER_RE.search(text[max(0, start - 20):start]) is not None


def extract_education(text: str) -> list[Education]:
    """Extract education entries from resume text.

    Each degree mention becomes an entry whose school and year are looked up
    in the surrounding text. Without any degree mention, every school name
    found becomes an entry with an unspecified degree.
    """
    education: list[Education] = []

    for pattern in _DEGREE_COMPILED.values():
        for match in pattern.finditer(text):
            raw_degree = match.group("degree")
            field = (match.group("field") or "").strip(" \t-–—:;.") or None
            if _is_non_degree(text, match.start(), raw_degree, field):
                continue

            context = _context_around(text, match.start())
            education.append(Education(
                degree=normalize_degree(raw_degree),
                school=extract_school(context) or "Not specified",
                year=extract_year(context),
                field=field,
            ))

    if not education:
        education = [Education(school=school) for school in extract_school_names(text)]

    return education
