"""
Field extractors: tokens + section ranges -> ResumeData parts.

Every extractor follows the same fallback policy:
    1. Highest-confidence token of the wanted type
    2. Secondary scan of the raw lines
    3. Empty string / empty list (or a placeholder inside a recognised entry)

Extractors are independent of each other; a failure to find one field never
blocks the others.
"""

from enum import Enum
from typing import List, Optional, Tuple

from atsresume.contexts.intake.extraction_patterns import (
    COMPANY_PLACEHOLDER,
    DEFAULT_SKILL_GROUP,
    DEGREE_PLACEHOLDER,
    INSTITUTION_PLACEHOLDER,
    POSITION_PLACEHOLDER,
    ContactPatterns,
    EducationPatterns,
    ExperiencePatterns,
    SkillPatterns,
)
from atsresume.contexts.intake.logger import _log_debug
from atsresume.contexts.intake.resume_data_structure import (
    PRESENT,
    Contact,
    Education,
    Experience,
    Skill,
    SkillCategory,
    SkillLevel,
)
from atsresume.contexts.intake.section_patterns import SectionKeywords, contains_header_word
from atsresume.contexts.intake.segmenter import SectionBoundary, find_section
from atsresume.contexts.intake.token_patterns import TokenType
from atsresume.contexts.intake.tokenizer import Token, best_token, first_token
from atsresume.utils.text_processing import BULLET_GLYPHS, is_all_caps, letters_only, strip_bullet

_contact = ContactPatterns()
_experience = ExperiencePatterns()
_education = EducationPatterns()
_skills = SkillPatterns()


def _section_lines(lines: List[str], sections: List[SectionBoundary], section_type: str) -> Optional[List[str]]:
    boundary = find_section(sections, section_type)
    if boundary is None:
        return None
    return lines[boundary.start_line : boundary.end_line]


# =============================================================================
# CONTACT
# =============================================================================


def normalize_url(url: str) -> str:
    """Prefix scheme-less URLs with https://."""
    return url if url.startswith("http") else f"https://{url}"


def extract_contact(
    lines: List[str], tokens: List[Token], keywords: Optional[SectionKeywords] = None
) -> Contact:
    """
    Build the contact block from tokens, falling back to a line scan for the name.

    Args:
        lines: Document lines
        tokens: Tokens for the same lines
        keywords: Section vocabulary excluded from the name fallback

    Returns:
        Contact with every unrecoverable field left as ""
    """
    email = best_token(tokens, TokenType.EMAIL)
    phone = best_token(tokens, TokenType.PHONE)
    name = best_token(tokens, TokenType.NAME)
    location = best_token(tokens, TokenType.LOCATION)
    linkedin = first_token(tokens, TokenType.LINKEDIN)
    github = first_token(tokens, TokenType.GITHUB)

    website = next(
        (
            t
            for t in tokens
            if t.token_type is TokenType.URL
            and "linkedin" not in t.text.lower()
            and "github" not in t.text.lower()
        ),
        None,
    )

    return Contact(
        full_name=name.text if name else _name_from_first_lines(lines, keywords),
        email=email.text if email else "",
        phone=phone.text if phone else "",
        location=location.text if location else "",
        linkedin=normalize_url(linkedin.text) if linkedin else "",
        github=normalize_url(github.text) if github else "",
        website=normalize_url(website.text) if website else "",
    )


def _name_from_first_lines(lines: List[str], keywords: Optional[SectionKeywords] = None) -> str:
    for line in lines[:5]:
        if "@" in line or _contact.PHONE_SHAPE.search(line):
            continue
        match = _contact.BARE_NAME_LINE.match(line)
        if match and not contains_header_word(match.group(1), keywords):
            return match.group(1)
    return ""


# =============================================================================
# SUMMARY
# =============================================================================


def extract_summary(lines: List[str], sections: List[SectionBoundary]) -> str:
    """
    Summary section text, or the first long paragraph near the top.

    Lines of 20 chars or fewer inside the summary section are treated as
    formatting noise. A section yielding 30 chars or fewer is ignored.
    """
    section_lines = _section_lines(lines, sections, "summary")
    if section_lines is not None:
        summary = " ".join(line for line in section_lines if len(line) > 20).strip()
        if len(summary) > 30:
            return summary

    for line in lines[:15]:
        if (
            len(line) > 80
            and "@" not in line
            and not _contact.PHONE_SHAPE.search(line)
            and not _contact.SECTION_OPENER.match(line)
        ):
            return line

    return ""


# =============================================================================
# EXPERIENCE
# =============================================================================


def is_job_entry_line(line: str) -> bool:
    """
    True if a line opens a new job entry.

    Needs a date or an "A at B" / "A | B" / "A - B" shape, at least three
    words and a plausible length. Bulleted lines are always descriptions.
    """
    if line.startswith(BULLET_GLYPHS):
        return False
    has_marker = bool(_experience.JOB_DATE.search(line) or _experience.JOB_SHAPE.search(line))
    return (
        has_marker
        and len(line.split()) >= _experience.MIN_WORDS
        and _experience.MIN_LENGTH < len(line) < _experience.MAX_LENGTH
    )


def is_description_line(line: str) -> bool:
    if line.startswith(BULLET_GLYPHS):
        return True
    return len(line) > _experience.MIN_PROSE_LENGTH and not is_job_entry_line(line) and not is_all_caps(line)


def extract_job_dates(line: str) -> Tuple[str, str, bool]:
    """
    Pull (start, end, current) out of a job entry line.

    Example:
        >>> extract_job_dates("Engineer at Acme 2019 - Present")
        ('2019', 'Present', True)
        >>> extract_job_dates("Engineer at Acme 2015 - 2018")
        ('2015', '2018', False)
    """
    current = bool(_experience.ONGOING.search(line))
    years = _experience.YEAR.findall(line)
    ongoing_end = PRESENT if current else ""

    if len(years) >= 2:
        return years[0], PRESENT if current else years[1], current
    if len(years) == 1:
        return years[0], ongoing_end, current
    return "", ongoing_end, current


def _strip_date_tail(fragment: str) -> str:
    return _experience.DATE_TAIL.sub("", fragment, count=1).strip(" |-,")


def parse_job_entry(line: str, entry_id: str) -> Experience:
    """
    Split a job entry line into position, company, location and dates.

    Falls back to splitting the undated words at their midpoint when no
    entry shape yields two fragments longer than two chars.
    """
    for shape in _experience.ENTRY_SHAPES:
        match = shape.match(line)
        if not match:
            continue

        position = _strip_date_tail(match.group(1).strip())
        company = _strip_date_tail(match.group(2).strip())

        if len(position) > _experience.MIN_FIELD_LENGTH and len(company) > _experience.MIN_FIELD_LENGTH:
            start, end, current = extract_job_dates(line)
            location = _experience.CITY_STATE.search(line)
            return Experience(
                id=entry_id,
                company=company,
                position=position,
                location=location.group(1) if location else "",
                start_date=start,
                end_date=end,
                current=current,
            )

    words = _strip_date_tail(line).split()
    midpoint = len(words) // 2
    return Experience(
        id=entry_id,
        position=" ".join(words[:midpoint]) or POSITION_PLACEHOLDER,
        company=" ".join(words[midpoint:]) or COMPANY_PLACEHOLDER,
    )


class EntryState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class ExperienceAccumulator:
    """
    Line-at-a-time builder for experience entries.

    IDLE: waiting for an entry line; description lines are ignored.
    ACCUMULATING: an entry is open and description lines become bullets.
    A new entry line, or flush() at the end of the section, closes the
    open entry and keeps only its bullets longer than 10 chars.
    """

    def __init__(self):
        self.state = EntryState.IDLE
        self.entries: List[Experience] = []
        self._current: Optional[Experience] = None
        self._bullets: List[str] = []

    def feed(self, line: str) -> None:
        if is_job_entry_line(line):
            self.flush()
            self._current = parse_job_entry(line, f"exp-{len(self.entries) + 1}")
            self._bullets = []
            self.state = EntryState.ACCUMULATING
            _log_debug(f"Job entry: {self._current.position} at {self._current.company}")
            return

        if self.state is EntryState.ACCUMULATING and is_description_line(line):
            bullet = strip_bullet(line)
            if len(bullet) > _experience.MIN_BULLET_LENGTH:
                self._bullets.append(bullet)

    def flush(self) -> None:
        if self.state is not EntryState.ACCUMULATING:
            return
        self._current.description = [b for b in self._bullets if len(b) > _experience.MIN_KEPT_BULLET_LENGTH]
        self.entries.append(self._current)
        self._current = None
        self._bullets = []
        self.state = EntryState.IDLE


def extract_experience(lines: List[str], sections: List[SectionBoundary]) -> List[Experience]:
    """Experience entries from the experience section (none without one)."""
    section_lines = _section_lines(lines, sections, "experience")
    if section_lines is None:
        _log_debug("No experience section found")
        return []

    accumulator = ExperienceAccumulator()
    for line in section_lines:
        accumulator.feed(line)
    accumulator.flush()

    return accumulator.entries


# =============================================================================
# EDUCATION
# =============================================================================


def is_education_entry_line(line: str) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in _education.KEYWORDS) or bool(_education.YEAR.search(line))


def _first_match(patterns: tuple, line: str, group: int = 0) -> str:
    for pattern in patterns:
        match = pattern.search(line)
        if match:
            return match.group(group).strip()
    return ""


def parse_education_entry(line: str, entry_id: str) -> Education:
    """
    Parse one education line.

    Example:
        >>> e = parse_education_entry("B.S. Computer Science, State University, 2018, GPA: 3.8", "edu-1")
        >>> (e.degree, e.institution, e.end_date, e.gpa)
        ('B.S. Computer Science', 'State University', '2018', '3.8')
    """
    year = _education.YEAR.search(line)
    gpa = _education.GPA.search(line)

    return Education(
        id=entry_id,
        institution=_first_match(_education.INSTITUTIONS, line, group=1) or INSTITUTION_PLACEHOLDER,
        degree=_first_match(_education.DEGREES, line) or DEGREE_PLACEHOLDER,
        end_date=year.group(1) if year else "",
        gpa=gpa.group(1) if gpa else "",
    )


def extract_education(lines: List[str], sections: List[SectionBoundary]) -> List[Education]:
    """Education entries from the education section, else from the whole document."""
    section_lines = _section_lines(lines, sections, "education")
    if section_lines is None:
        section_lines = lines

    entries = []
    for line in section_lines:
        if is_education_entry_line(line):
            entries.append(parse_education_entry(line, f"edu-{len(entries) + 1}"))
            _log_debug(f"Education entry: {entries[-1].degree} from {entries[-1].institution}")
    return entries


# =============================================================================
# SKILLS
# =============================================================================


def split_group_header(line: str) -> Optional[Tuple[str, str]]:
    """
    Recognise a skill group header line.

    Returns:
        (group name, skills text after the colon) or None

    Example:
        >>> split_group_header("Programming Languages: Python, Go")
        ('Programming Languages', ' Python, Go')
        >>> split_group_header("Python, Go, Rust") is None
        True
    """
    head, colon, rest = line.partition(":")
    if not colon and _skills.LIST_MARKERS.search(line):
        return None
    if len(head) >= _skills.MAX_GROUP_LINE_LENGTH:
        return None

    words = set(letters_only(head).split())
    if not words.intersection(_skills.GROUP_KEYWORDS):
        return None

    name = _skills.NON_NAME_CHARS.sub("", head).strip() or DEFAULT_SKILL_GROUP
    return name, rest


def split_skill_names(text: str) -> List[str]:
    """Split a skill list line into plausible skill names."""
    names = (part.strip() for part in _skills.DELIMITERS.split(text))
    return [
        name
        for name in names
        if _skills.MIN_NAME_LENGTH <= len(name) <= _skills.MAX_NAME_LENGTH and "years" not in name.lower()
    ]


def group_skill_lines(section_lines: List[str]) -> List[Tuple[str, List[str]]]:
    """Group skill names under the most recent group header; empty groups are dropped."""
    groups: List[Tuple[str, List[str]]] = []
    current_name = DEFAULT_SKILL_GROUP
    current: List[str] = []

    for line in section_lines:
        header = split_group_header(line)
        if header is None:
            current.extend(split_skill_names(line))
            continue

        if current:
            groups.append((current_name, current))
        current_name, rest = header
        current = split_skill_names(rest)

    if current:
        groups.append((current_name, current))

    return groups


def infer_skill_level(name: str) -> SkillLevel:
    lowered = name.lower()
    if any(hint in lowered for hint in _skills.EXPERT_HINTS):
        return SkillLevel.EXPERT
    if any(hint in lowered for hint in _skills.BEGINNER_HINTS):
        return SkillLevel.BEGINNER
    return SkillLevel.INTERMEDIATE


def skill_category_for_group(group_name: str) -> SkillCategory:
    """
    Map a free-text group name onto a SkillCategory.

    Example:
        >>> skill_category_for_group("Soft Skills")
        <SkillCategory.SOFT: 'Soft'>
        >>> skill_category_for_group("Programming Languages")
        <SkillCategory.TECHNICAL: 'Technical'>
    """
    lowered = group_name.lower().strip()
    if any(hint in lowered for hint in _skills.SOFT_GROUPS):
        return SkillCategory.SOFT
    if any(hint in lowered for hint in _skills.CERTIFICATION_GROUPS):
        return SkillCategory.CERTIFICATION
    if lowered in ("language", "languages") or any(hint in lowered for hint in _skills.SPOKEN_LANGUAGE_GROUPS):
        return SkillCategory.LANGUAGE
    return SkillCategory.TECHNICAL


def extract_skills(lines: List[str], sections: List[SectionBoundary]) -> List[Skill]:
    """Skills from the skills section (none without one)."""
    section_lines = _section_lines(lines, sections, "skills")
    if section_lines is None:
        _log_debug("No skills section found")
        return []

    skills = []
    for group_name, names in group_skill_lines(section_lines):
        category = skill_category_for_group(group_name)
        for name in names:
            skills.append(
                Skill(
                    id=f"skill-{len(skills) + 1}",
                    name=name,
                    level=infer_skill_level(name),
                    category=category,
                )
            )
    return skills
