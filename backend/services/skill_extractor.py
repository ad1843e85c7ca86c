"""Skill extraction from resume text.

Combines:
1. Vocabulary scan: known skill names (or one of their variations) found
   anywhere in the text as plain substrings
2. Skills sections: comma/bullet separated lists under a skills-like header,
   keeping only tokens that name a known skill
"""

import logging
import re

from services.section_parser import is_header_line

logger = logging.getLogger(__name__)

# Known skill vocabulary, in display case
COMMON_SKILLS: tuple[str, ...] = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C#", "Go", "Rust", "PHP",
    "Swift", "Kotlin", "HTML", "CSS", "SQL",
    # Frameworks
    "React", "Node.js", "Express.js", "Next.js", "Vue.js", "Angular",
    "Spring Boot", "Django", "Flask", "Laravel", "Ruby on Rails", "Flutter",
    "React Native", "Redux", "GraphQL", "REST API",
    # Infrastructure
    "Git", "Docker", "AWS", "Azure", "Microservices", "DevOps", "CI/CD",
    "Kubernetes", "Terraform", "Jenkins", "Linux",
    # Data stores & streaming
    "MongoDB", "PostgreSQL", "Elasticsearch", "Redis", "RabbitMQ",
    "Apache Kafka", "Apache Spark", "Hadoop",
    # Data & ML
    "Machine Learning", "Data Science", "Artificial Intelligence",
    "Deep Learning", "TensorFlow", "PyTorch", "Pandas", "NumPy",
    "Scikit-learn", "Tableau", "Power BI",
    # Design
    "Figma", "Adobe Creative Suite", "Sketch", "InVision", "Zeplin",
    # Process & collaboration
    "Agile", "Scrum", "Jira", "Confluence", "Slack", "Microsoft Office",
    "Google Workspace", "Notion", "Airtable",
    # Business platforms
    "Salesforce", "HubSpot", "Shopify", "WordPress", "Webflow",
)

_SKILLS_BY_LOWER: dict[str, str] = {s.lower(): s for s in COMMON_SKILLS}

# Alternate spellings that also count as a mention of the skill
SKILL_VARIATIONS: dict[str, tuple[str, ...]] = {
    "javascript": ("js", "ecmascript", "es6", "es2015", "node.js"),
    "typescript": ("ts",),
    "react": ("reactjs", "react.js"),
    "node.js": ("nodejs", "node js", "javascript", "js"),
    "vue.js": ("vuejs", "vue js"),
    "angular": ("angularjs", "angular.js"),
    "python": ("py",),
    "c#": ("csharp", "c sharp", "dotnet", ".net"),
    "c++": ("cpp", "cplusplus"),
    "postgresql": ("postgres", "psql"),
    "mongodb": ("mongo",),
    "react native": ("reactnative",),
    "machine learning": ("ml", "ai", "artificial intelligence"),
    "tensorflow": ("tf",),
    "scikit-learn": ("sklearn",),
    "github": ("git hub",),
    "gitlab": ("git lab",),
}

SKILL_SECTION_HEADERS: tuple[str, ...] = (
    "skills",
    "technical skills",
    "core competencies",
    "technologies",
    "programming languages",
    "tools and technologies",
    "expertise",
    "proficiencies",
)

# Longest first so "technical skills" wins over "skills" on the same line
_SECTION_HEADER_RE = re.compile(
    r"\b(?:"
    + "|".join(re.escape(h) for h in sorted(SKILL_SECTION_HEADERS, key=len, reverse=True))
    + r")\b:?",
    re.IGNORECASE,
)

_ITEM_SPLIT_RE = re.compile(r"[,;|•·▪►\n]")
_ITEM_STRIP = " \t-–—*◦‣"


def extract_skills_vocabulary(text: str) -> list[str]:
    """Find known skills mentioned anywhere in the text.

    Matching is plain lowercase substring search, first on the skill name and
    then on its variations, so short names ("Go") match inside longer words.
    """
    text_lower = text.lower()
    found: list[str] = []

    for skill in COMMON_SKILLS:
        skill_lower = skill.lower()
        if skill_lower in text_lower:
            found.append(skill)
            continue
        if any(v in text_lower for v in SKILL_VARIATIONS.get(skill_lower, ())):
            found.append(skill)

    return found


def find_skills_sections(text: str) -> list[str]:
    """Return the body of every skills-like section in the text.

    A section starts right after a header keyword (optionally followed by a
    colon) and runs to the next blank line or the next header line.
    """
    lines = text.split("\n")
    sections: list[str] = []

    for i, line in enumerate(lines):
        match = _SECTION_HEADER_RE.search(line)
        if not match:
            continue

        body = [line[match.end():]]
        for following in lines[i + 1:]:
            if not following.strip() or is_header_line(following):
                break
            body.append(following)
        sections.append("\n".join(body).strip())

    return sections


def parse_skills_section(section: str) -> list[str]:
    """Split a skills section into items, keeping only known skills."""
    skills: list[str] = []
    for item in _ITEM_SPLIT_RE.split(section):
        item = item.strip(_ITEM_STRIP)
        known = _SKILLS_BY_LOWER.get(item.lower())
        if known:
            skills.append(known)
    return skills


def extract_skills(text: str) -> list[str]:
    """Extract all known skills from resume text.

    Returns skills in display case, deduplicated case-insensitively.
    """
    found = extract_skills_vocabulary(text)
    for section in find_skills_sections(text):
        found.extend(parse_skills_section(section))

    seen: set[str] = set()
    skills: list[str] = []
    for skill in found:
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            skills.append(skill)

    logger.debug("Extracted %d skills", len(skills))
    return skills
