"""
AI-assisted resume suggestions.

SuggestionProvider is the seam for a hosted language-model backend. The
bundled MockSuggestionProvider answers with deterministic heuristics so the
rest of the system (CLI, tests) can exercise the full flow offline.
"""

import re
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from loguru import logger

from atsresume.contexts.intake.job_data_structure import JobDescription
from atsresume.contexts.intake.resume_data_structure import SECTION_ORDER, Experience, ResumeData
from atsresume.contexts.scoring.keywords import extract_keywords, match_keywords, resume_text

WEAK_PHRASES = ("responsible for", "worked on", "helped with", "assisted in")
STRONG_VERBS = ("led", "developed", "implemented", "optimized", "achieved", "increased")

CONSISTENT_DATES = re.compile(r"^\w{3}\s\d{4}-(?:\w{3}\s\d{4}|Present)$")
YEAR = re.compile(r"\b((?:19|20)\d{2})\b")

BASE_SCORE = 75


class AISuggestionType(str, Enum):
    HEADLINE = "headline"
    KEYWORDS = "keywords"
    LANGUAGE = "language"
    FORMATTING = "formatting"


@dataclass(frozen=True)
class AISuggestion:
    type: AISuggestionType
    suggestion: str
    explanation: str
    confidence: float

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "suggestion": self.suggestion,
            "explanation": self.explanation,
            "confidence": self.confidence,
        }


@dataclass
class AISuggestionBundle:
    missing_keywords: List[str] = field(default_factory=list)
    language_improvements: List[str] = field(default_factory=list)
    formatting_issues: List[str] = field(default_factory=list)
    overall_score: int = BASE_SCORE
    suggestions: List[AISuggestion] = field(default_factory=list)
    optimized_headline: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "optimizedHeadline": self.optimized_headline,
            "missingKeywords": list(self.missing_keywords),
            "languageImprovements": list(self.language_improvements),
            "formattingIssues": list(self.formatting_issues),
            "overallScore": self.overall_score,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


class SuggestionProvider(ABC):
    """Produces an AISuggestionBundle for a resume and optional job description."""

    @abstractmethod
    def optimize(self, resume: ResumeData, job_description: Optional[JobDescription] = None) -> AISuggestionBundle:
        pass


# =============================================================================
# HEURISTICS
# =============================================================================


def years_of_experience(experience: List[Experience], today: Optional[date] = None) -> int:
    """
    Whole years spanned by the experience entries (at least 1).

    Only the years in start/end dates are read; ongoing entries end this year.
    """
    today = today or date.today()
    total_years = 0

    for exp in experience:
        start = YEAR.search(exp.start_date)
        end = YEAR.search(exp.end_date)
        if start is None:
            continue
        if exp.current:
            end_year = today.year
        elif end is not None:
            end_year = int(end.group(1))
        else:
            end_year = int(start.group(1))
        total_years += max(0, end_year - int(start.group(1)))

    return max(1, total_years)


def optimized_headline(resume: ResumeData, job_description: JobDescription, today: Optional[date] = None) -> str:
    if not resume.experience:
        return f"{job_description.title} | Professional with Strong Technical Skills"

    years = years_of_experience(resume.experience, today)
    key_skills = ", ".join(skill.name for skill in resume.skills[:3])
    return f"{job_description.title} | {years}+ Years Experience | {key_skills}"


def language_improvements(resume: ResumeData) -> List[str]:
    bullets = [d for exp in resume.experience for d in exp.description]
    improvements = []

    if any(weak in b.lower() for b in bullets for weak in WEAK_PHRASES):
        improvements.append(
            f"Replace weak action verbs with stronger alternatives like: {', '.join(STRONG_VERBS)}"
        )
    if not any(re.search(r"\d", b) for b in bullets):
        improvements.append("Add quantifiable achievements with specific numbers, percentages, or dollar amounts")
    if len(resume.summary.split()) < 50:
        improvements.append("Expand your professional summary to 50-100 words for better keyword coverage")

    return improvements


def formatting_issues(resume: ResumeData) -> List[str]:
    issues = []

    if not resume.contact.email or not resume.contact.phone:
        issues.append("Ensure all contact information (email, phone, location) is complete")

    if any(not CONSISTENT_DATES.match(f"{e.start_date}-{e.end_date}") for e in resume.experience):
        issues.append('Use consistent date formatting (e.g., "Jan 2020 - Dec 2022")')

    if list(resume.sections) != list(SECTION_ORDER):
        issues.append("Consider reordering sections: Contact → Summary → Experience → Education → Skills")

    return issues


class MockSuggestionProvider(SuggestionProvider):
    """
    Offline stand-in for a language-model backend.

    Starts from a score of 75 and deducts for missing keywords (2 each, up to
    20), weak language (5) and formatting issues (10).

    Args:
        delay_seconds: Artificial latency before answering (default 0)
    """

    def __init__(self, delay_seconds: float = 0.0):
        self.delay_seconds = delay_seconds

    def optimize(self, resume: ResumeData, job_description: Optional[JobDescription] = None) -> AISuggestionBundle:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)

        bundle = AISuggestionBundle()
        score = BASE_SCORE

        if job_description is not None:
            headline = optimized_headline(resume, job_description)
            bundle.optimized_headline = headline
            if headline != resume.summary.split(".")[0]:
                bundle.suggestions.append(
                    AISuggestion(
                        type=AISuggestionType.HEADLINE,
                        suggestion=headline,
                        explanation="This headline better aligns with the job requirements and includes relevant keywords.",
                        confidence=0.85,
                    )
                )

            _, missing = match_keywords(resume_text(resume), extract_keywords(job_description.description))
            bundle.missing_keywords = missing[:10]
            if missing:
                bundle.suggestions.append(
                    AISuggestion(
                        type=AISuggestionType.KEYWORDS,
                        suggestion=f"Consider adding these relevant keywords: {', '.join(missing[:5])}",
                        explanation="These keywords appear frequently in the job description but are missing from your resume.",
                        confidence=0.9,
                    )
                )
                score -= min(20, len(missing) * 2)

        improvements = language_improvements(resume)
        bundle.language_improvements = improvements[:5]
        if improvements:
            bundle.suggestions.append(
                AISuggestion(
                    type=AISuggestionType.LANGUAGE,
                    suggestion=improvements[0],
                    explanation="Using more action-oriented language and quantifiable achievements will improve ATS scoring.",
                    confidence=0.8,
                )
            )
            score -= 5

        issues = formatting_issues(resume)
        bundle.formatting_issues = issues[:5]
        if issues:
            bundle.suggestions.append(
                AISuggestion(
                    type=AISuggestionType.FORMATTING,
                    suggestion=issues[0],
                    explanation="These formatting improvements will ensure better ATS compatibility.",
                    confidence=0.95,
                )
            )
            score -= 10

        bundle.overall_score = max(0, min(100, score))
        logger.debug(f"Mock AI suggestions: {len(bundle.suggestions)} (score {bundle.overall_score})")
        return bundle
