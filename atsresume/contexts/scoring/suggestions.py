"""
Prioritized optimization suggestions.

Unlike ATSScore.details.suggestions (every rule that fired), these are the
few high-impact fixes worth showing first, each tagged with a type and
severity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from atsresume.contexts.intake.job_data_structure import JobDescription
from atsresume.contexts.intake.resume_data_structure import ResumeData
from atsresume.contexts.scoring.keywords import extract_keywords, match_keywords, resume_text
from atsresume.contexts.scoring.rules import ScoringRules, default_scoring_rules


class SuggestionType(str, Enum):
    KEYWORD = "keyword"
    FORMAT = "format"
    STRUCTURE = "structure"
    CONTENT = "content"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class OptimizationSuggestion:
    type: SuggestionType
    severity: Severity
    message: str
    suggestion: str

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "message": self.message,
            "suggestion": self.suggestion,
        }


def generate_optimization_suggestions(
    resume: ResumeData,
    job_description: Optional[JobDescription] = None,
    rules: Optional[ScoringRules] = None,
) -> List[OptimizationSuggestion]:
    """
    Build the prioritized suggestion list.

    - high/keyword: job description keywords missing from the resume (first five listed)
    - high/structure: no work experience
    - medium/structure: fewer than five skills

    Args:
        resume: Structured resume
        job_description: Posting to check keywords against (optional)
        rules: Scoring rules (default: ats_rules.yaml)

    Returns:
        Suggestions in the order above, only those that apply
    """
    rules = rules or default_scoring_rules()
    suggestions = []

    if job_description is not None:
        keywords = extract_keywords(job_description.description, rules.keyword)
        _, missing = match_keywords(resume_text(resume), keywords)
        if missing:
            listed = ", ".join(missing[: rules.suggestions.max_listed_keywords])
            suggestions.append(
                OptimizationSuggestion(
                    type=SuggestionType.KEYWORD,
                    severity=Severity.HIGH,
                    message="Missing key terms from job description",
                    suggestion=f"Consider adding these keywords: {listed}",
                )
            )

    if not resume.experience:
        suggestions.append(
            OptimizationSuggestion(
                type=SuggestionType.STRUCTURE,
                severity=Severity.HIGH,
                message="No work experience listed",
                suggestion="Add your work experience to improve ATS scoring",
            )
        )

    if len(resume.skills) < rules.suggestions.min_skills:
        suggestions.append(
            OptimizationSuggestion(
                type=SuggestionType.STRUCTURE,
                severity=Severity.MEDIUM,
                message="Limited skills listed",
                suggestion="Add 10-20 relevant skills to improve keyword matching",
            )
        )

    return suggestions
