"""
ATS compatibility scoring.

Main function:
    calculate_ats_score: ResumeData (+ optional JobDescription) -> ATSScore

The score is three independent sub-scores, each debited or scaled from its
own maximum:
    keyword match  40  (matched share of job description keywords)
    formatting     30  (contact completeness, email quality, summary length)
    structure      30  (required sections, entry completeness, skills count)

overall = round(100 * sum(scores) / sum(max scores)). Each sub-score is
rounded separately, so overall can differ by one from the mean of the
rounded sub-score percentages.
"""

import math
import re
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from atsresume.contexts.intake.job_data_structure import JobDescription
from atsresume.contexts.intake.resume_data_structure import ResumeData
from atsresume.contexts.scoring.keywords import extract_keywords, keyword_density, match_keywords, resume_text
from atsresume.contexts.scoring.logger import log_score_result
from atsresume.contexts.scoring.rules import (
    FormattingRules,
    KeywordRules,
    ScoringRules,
    StructureRules,
    default_scoring_rules,
)
from atsresume.utils.text_processing import count_words

VALID_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
HAS_DIGIT = re.compile(r"\d")


@dataclass(frozen=True)
class ATSDetails:
    matched_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "matchedKeywords": list(self.matched_keywords),
            "missingKeywords": list(self.missing_keywords),
            "suggestions": list(self.suggestions),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class ATSScore:
    overall: int
    keyword_match: int
    formatting: int
    structure: int
    details: ATSDetails

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "keywordMatch": self.keyword_match,
            "formatting": self.formatting,
            "structure": self.structure,
            "details": self.details.to_dict(),
        }


class SubScore(NamedTuple):
    score: float
    max_score: float

    @property
    def percent(self) -> int:
        return round_half_up(100 * self.score / self.max_score)


def round_half_up(value: float) -> int:
    """
    Round .5 up, unlike round() which rounds half to even.

    Example:
        >>> round_half_up(62.5), round(62.5)
        (63, 62)
    """
    return int(math.floor(value + 0.5))


def is_valid_email(email: str) -> bool:
    return bool(VALID_EMAIL.match(email))


def is_professional_email(email: str, domains=None) -> bool:
    """False for addresses at free consumer domains (yahoo.com, hotmail.com, aol.com)."""
    domains = domains if domains is not None else default_scoring_rules().formatting.unprofessional_domains
    _, _, domain = email.partition("@")
    return domain.lower() not in domains


# =============================================================================
# SUB-SCORES
# =============================================================================


def keyword_match_score(
    resume: ResumeData,
    job_description: Optional[JobDescription],
    details: ATSDetails,
    rules: Optional[KeywordRules] = None,
) -> SubScore:
    """
    Share of job description keywords found in the resume, scaled to 40.

    Without a job description, or when no keywords can be extracted from it,
    half credit is awarded. Density outside 0.5%-3% scales the score down.
    """
    rules = rules or default_scoring_rules().keyword

    if job_description is None:
        details.suggestions.append("Add a job description to get keyword matching analysis")
        return SubScore(rules.max_score * rules.partial_credit, rules.max_score)

    keywords = extract_keywords(job_description.description, rules)
    if not keywords:
        details.warnings.append("No keywords could be extracted from job description")
        return SubScore(rules.max_score * rules.partial_credit, rules.max_score)

    text = resume_text(resume).lower()
    matched, missing = match_keywords(text, keywords)
    details.matched_keywords.extend(matched)
    details.missing_keywords.extend(missing)

    score = len(matched) / len(keywords) * rules.max_score

    density = keyword_density(text, keywords)
    if density > rules.max_density:
        details.warnings.append("Keyword density too high - may appear as keyword stuffing")
        score *= rules.stuffing_multiplier
    elif density < rules.min_density:
        details.suggestions.append("Include more relevant keywords from the job description")
        score *= rules.sparse_multiplier

    return SubScore(score, rules.max_score)


def formatting_score(resume: ResumeData, details: ATSDetails, rules: Optional[FormattingRules] = None) -> SubScore:
    """Contact completeness, email quality and summary length, out of 30."""
    rules = rules or default_scoring_rules().formatting
    penalties = rules.penalties
    contact = resume.contact
    score = rules.max_score

    if not contact.full_name:
        score -= penalties["missing_name"]
        details.suggestions.append("Add your full name")
    if not contact.email:
        score -= penalties["missing_email"]
        details.suggestions.append("Add your email address")
    if not contact.phone:
        score -= penalties["missing_phone"]
        details.suggestions.append("Add your phone number")
    if not contact.location:
        score -= penalties["missing_location"]
        details.suggestions.append("Add your location (city, state)")

    if contact.email and not is_valid_email(contact.email):
        score -= penalties["invalid_email"]
        details.warnings.append("Email format appears invalid")
    if contact.email and not is_professional_email(contact.email, rules.unprofessional_domains):
        score -= penalties["unprofessional_email"]
        details.suggestions.append("Consider using a professional email address")

    summary_words = count_words(resume.summary)
    if summary_words < rules.min_summary_words:
        score -= penalties["short_summary"]
        details.suggestions.append(
            f"Professional summary is too short - aim for {rules.min_summary_words}-{rules.max_summary_words} words"
        )
    elif summary_words > rules.max_summary_words:
        score -= penalties["long_summary"]
        details.suggestions.append(
            f"Professional summary is too long - keep it under {rules.max_summary_words} words"
        )

    return SubScore(max(0.0, score), rules.max_score)


def structure_score(resume: ResumeData, details: ATSDetails, rules: Optional[StructureRules] = None) -> SubScore:
    """Required sections, experience/education completeness and skills count, out of 30."""
    rules = rules or default_scoring_rules().structure
    penalties = rules.penalties
    score = rules.max_score

    for section in rules.required_sections:
        if section not in resume.sections:
            score -= penalties["missing_section"]
            details.suggestions.append(f"Add {section} section to your resume")

    if len(resume.experience) < rules.min_experience:
        score -= penalties["few_experiences"]
        details.suggestions.append("Add more work experience entries for better ATS scoring")

    for number, exp in enumerate(resume.experience, start=1):
        if not exp.company or not exp.position:
            score -= penalties["incomplete_experience"]
            details.suggestions.append(f"Complete company and position for experience #{number}")

        bullets = [d for d in exp.description if d.strip()]
        if len(bullets) < rules.min_bullets:
            score -= penalties["few_bullets"]
            details.suggestions.append(f"Add more bullet points to experience #{number}")

        if not any(HAS_DIGIT.search(d) for d in exp.description):
            details.suggestions.append(f"Add quantified achievements to experience #{number}")

    if len(resume.education) < rules.min_education:
        score -= penalties["missing_education"]
        details.suggestions.append("Add your education information")

    if not resume.skills:
        score -= penalties["no_skills"]
        details.suggestions.append("Add relevant skills to your resume")
    elif len(resume.skills) < rules.min_skills:
        score -= penalties["few_skills"]
        details.suggestions.append("Add more relevant skills (aim for 10-20)")

    return SubScore(max(0.0, score), rules.max_score)


# =============================================================================
# OVERALL
# =============================================================================


def calculate_ats_score(
    resume: ResumeData,
    job_description: Optional[JobDescription] = None,
    rules: Optional[ScoringRules] = None,
) -> ATSScore:
    """
    Score a resume for ATS compatibility.

    Pure and deterministic: the resume and job description are only read,
    and every call builds fresh detail lists.

    Args:
        resume: Structured resume
        job_description: Posting to match keywords against (optional)
        rules: Scoring rules (default: ats_rules.yaml)

    Returns:
        ATSScore with overall and sub-scores in [0, 100]

    Example:
        >>> score = calculate_ats_score(ResumeData.empty())
        >>> score.keyword_match
        50
    """
    rules = rules or default_scoring_rules()
    details = ATSDetails()

    parts = [
        keyword_match_score(resume, job_description, details, rules.keyword),
        formatting_score(resume, details, rules.formatting),
        structure_score(resume, details, rules.structure),
    ]

    total = sum(p.score for p in parts)
    maximum = sum(p.max_score for p in parts)
    overall = max(0, min(100, round_half_up(100 * total / maximum)))

    result = ATSScore(
        overall=overall,
        keyword_match=parts[0].percent,
        formatting=parts[1].percent,
        structure=parts[2].percent,
        details=details,
    )
    log_score_result(result, has_job_description=job_description is not None)
    return result
