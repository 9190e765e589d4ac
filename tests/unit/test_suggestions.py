"""Unit tests for prioritized optimization suggestions."""

import pytest

from atsresume.contexts.intake.job_data_structure import JobDescription
from atsresume.contexts.intake.resume_data_structure import Experience, ResumeData, Skill
from atsresume.contexts.scoring.suggestions import (
    Severity,
    SuggestionType,
    generate_optimization_suggestions,
)


@pytest.mark.unit
def test_empty_resume_without_job():
    suggestions = generate_optimization_suggestions(ResumeData.empty())

    assert [(s.type, s.severity) for s in suggestions] == [
        (SuggestionType.STRUCTURE, Severity.HIGH),
        (SuggestionType.STRUCTURE, Severity.MEDIUM),
    ]
    assert suggestions[0].message == "No work experience listed"
    assert suggestions[1].message == "Limited skills listed"


@pytest.mark.unit
def test_missing_keywords_listed_first_and_capped_at_five():
    job = JobDescription(description="python java react angular vue docker")
    suggestions = generate_optimization_suggestions(ResumeData.empty(), job)

    first = suggestions[0]
    assert (first.type, first.severity) == (SuggestionType.KEYWORD, Severity.HIGH)
    assert first.suggestion == "Consider adding these keywords: python, java, react, angular, vue"


@pytest.mark.unit
def test_complete_resume_has_no_suggestions():
    resume = ResumeData(
        experience=[Experience(id="exp-1", company="Acme", position="Python Engineer")],
        skills=[Skill(id=f"skill-{n}", name=name) for n, name in enumerate(["Go", "Rust", "C", "Bash", "SQL"], 1)],
    )
    job = JobDescription(description="Python and SQL.")

    assert generate_optimization_suggestions(resume, job) == []


@pytest.mark.unit
def test_to_dict():
    data = generate_optimization_suggestions(ResumeData.empty())[0].to_dict()
    assert data == {
        "type": "structure",
        "severity": "high",
        "message": "No work experience listed",
        "suggestion": "Add your work experience to improve ATS scoring",
    }
