"""
Regex patterns and constants used by the field extractors.

Pattern classes follow the convention from token_patterns.py and
section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions live in extractors.py
"""

import re
from dataclasses import dataclass

# =============================================================================
# PLACEHOLDERS
# =============================================================================

# Filled in when an entry line is recognised but a field cannot be recovered
POSITION_PLACEHOLDER = "Position Title"
COMPANY_PLACEHOLDER = "Company Name"
DEGREE_PLACEHOLDER = "Degree"
INSTITUTION_PLACEHOLDER = "Institution"

DEFAULT_SKILL_GROUP = "Technical"


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """Secondary line-scan patterns for contact and summary fallbacks."""

    # 3-3-4 digit grouping anywhere in a line
    PHONE_SHAPE: re.Pattern = re.compile(r"\d{3}.*\d{3}.*\d{4}")

    # A line that is nothing but 2-4 capitalized words
    BARE_NAME_LINE: re.Pattern = re.compile(r"^([A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,3})$")

    # Summary fallback skips lines that open like a section
    SECTION_OPENER: re.Pattern = re.compile(r"^(?:experience|education|skills)", re.IGNORECASE)


# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """
    Patterns for recognising and splitting job entry lines.

    Entry shapes, tried in order:
    - "Position at Company (2019 - 2021)"
    - "Position | Company 2019 - Present" (also "-")
    - "Position, Company 2019"
    """

    JOB_DATE: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b|\b(?:present|current)\b", re.IGNORECASE)
    JOB_SHAPE: re.Pattern = re.compile(r"\s+(?:at|@|-|\|)\s+")

    ENTRY_SHAPES: tuple = (
        re.compile(r"^(.+?)\s+at\s+(.+?)(?:\s*[(\[].*[)\]]|\s*(?:19|20)\d{2}.*)?$", re.IGNORECASE),
        re.compile(r"^(.+?)\s*[|\-]\s*(.+?)(?:\s*(?:19|20)\d{2}.*)?$", re.IGNORECASE),
        re.compile(r"^(.+?),\s*(.+?)(?:\s*(?:19|20)\d{2}.*)?$", re.IGNORECASE),
    )

    # Parenthetical or year-onwards tail left on a position/company fragment
    DATE_TAIL: re.Pattern = re.compile(r"\s*\(.*\)|\s*(?:19|20)\d{2}.*")

    YEAR: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b")
    ONGOING: re.Pattern = re.compile(r"\b(?:present|current|now)\b", re.IGNORECASE)
    CITY_STATE: re.Pattern = re.compile(r"\b([A-Z][a-z]+,\s*[A-Z]{2})\b")

    MIN_WORDS: int = 3
    MIN_LENGTH: int = 10
    MAX_LENGTH: int = 150
    # Description lines without a bullet glyph must be longer than this
    MIN_PROSE_LENGTH: int = 20
    MIN_BULLET_LENGTH: int = 5
    MIN_KEPT_BULLET_LENGTH: int = 10
    MIN_FIELD_LENGTH: int = 2


# =============================================================================
# EDUCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EducationPatterns:
    """Patterns for education entry lines."""

    KEYWORDS: tuple = (
        "bachelor",
        "master",
        "phd",
        "degree",
        "university",
        "college",
        "b.s.",
        "m.s.",
        "b.a.",
        "m.a.",
        "mba",
    )

    YEAR: re.Pattern = re.compile(r"\b((?:19|20)\d{2})\b")

    DEGREES: tuple = (
        re.compile(
            r"\b(?:Bachelor[^,\n]*|Master[^,\n]*|PhD|Ph\.?D\.?|B\.S\.|M\.S\.|B\.A\.|M\.A\.|MBA)[^,\n]*",
            re.IGNORECASE,
        ),
        re.compile(r"\bDegree[^,\n]*", re.IGNORECASE),
    )

    INSTITUTIONS: tuple = (
        re.compile(r"\b(?:at|from)\s+([^,\n]+)", re.IGNORECASE),
        re.compile(r"((?:[A-Z][^,\n]*?\s)?(?:University|College|Institute|School)\b[^,\n]*)", re.IGNORECASE),
    )

    GPA: re.Pattern = re.compile(r"GPA:?\s*(\d\.\d+)", re.IGNORECASE)


# =============================================================================
# SKILL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillPatterns:
    """Patterns for skill group headers, skill lists and level hints."""

    GROUP_KEYWORDS: tuple = (
        "programming",
        "languages",
        "frameworks",
        "databases",
        "tools",
        "technologies",
        "technical",
        "software",
        "web",
        "mobile",
        "cloud",
        "devops",
        "frontend",
        "backend",
        "soft",
        "interpersonal",
        "certifications",
        "licenses",
        "spoken",
    )
    MAX_GROUP_LINE_LENGTH: int = 50

    DELIMITERS: re.Pattern = re.compile(r"[,•\-|\n]")
    # A colon-less line holding one of these is a skill list, not a group header
    LIST_MARKERS: re.Pattern = re.compile(r"[,•|]")
    NON_NAME_CHARS: re.Pattern = re.compile(r"[^a-zA-Z\s]")
    MIN_NAME_LENGTH: int = 2
    MAX_NAME_LENGTH: int = 29

    EXPERT_HINTS: tuple = ("expert", "advanced")
    BEGINNER_HINTS: tuple = ("basic", "familiar")

    # Group name fragments that map onto non-technical categories
    SOFT_GROUPS: tuple = ("soft", "interpersonal")
    CERTIFICATION_GROUPS: tuple = ("certif", "licen")
    SPOKEN_LANGUAGE_GROUPS: tuple = ("spoken", "human language")
