"""Unit tests for the offline AI suggestion provider."""

from datetime import date

import pytest

from atsresume.contexts.intake.job_data_structure import JobDescription
from atsresume.contexts.intake.resume_data_structure import Experience, ResumeData, Skill
from atsresume.utils.ai_suggestions import (
    AISuggestionType,
    MockSuggestionProvider,
    formatting_issues,
    language_improvements,
    optimized_headline,
    years_of_experience,
)


@pytest.fixture
def experience():
    return [
        Experience(id="exp-1", start_date="2019", current=True),
        Experience(id="exp-2", start_date="2015", end_date="2019"),
    ]


@pytest.mark.unit
def test_years_of_experience(experience):
    assert years_of_experience(experience, today=date(2024, 1, 1)) == 9


@pytest.mark.unit
def test_years_of_experience_is_at_least_one():
    assert years_of_experience([]) == 1
    assert years_of_experience([Experience(id="exp-1", start_date="sometime")]) == 1


@pytest.mark.unit
def test_optimized_headline(experience):
    resume = ResumeData(experience=experience, skills=[Skill(id="skill-1", name="Python"), Skill(id="skill-2", name="Go")])
    job = JobDescription(title="Backend Engineer")

    assert optimized_headline(resume, job, today=date(2024, 1, 1)) == "Backend Engineer | 9+ Years Experience | Python, Go"
    assert optimized_headline(ResumeData.empty(), job) == "Backend Engineer | Professional with Strong Technical Skills"


@pytest.mark.unit
def test_language_improvements_flags_weak_phrases():
    resume = ResumeData(experience=[Experience(id="exp-1", description=["Responsible for 3 releases"])])
    improvements = language_improvements(resume)

    assert improvements[0].startswith("Replace weak action verbs")
    assert len(improvements) == 2


@pytest.mark.unit
def test_formatting_issues():
    resume = ResumeData(
        experience=[Experience(id="exp-1", start_date="2019", end_date="2020")],
        sections=["skills", "contact"],
    )
    issues = formatting_issues(resume)

    assert len(issues) == 3
    assert formatting_issues(
        ResumeData(experience=[Experience(id="exp-1", start_date="Jan 2020", end_date="Present")])
    ) == ["Ensure all contact information (email, phone, location) is complete"]


@pytest.mark.unit
def test_mock_provider_without_job():
    bundle = MockSuggestionProvider().optimize(ResumeData.empty())

    assert bundle.overall_score == 60
    assert [s.type for s in bundle.suggestions] == [AISuggestionType.LANGUAGE, AISuggestionType.FORMATTING]
    assert bundle.optimized_headline is None


@pytest.mark.unit
def test_mock_provider_with_job():
    job = JobDescription(title="Data Engineer", description="python java react angular vue docker")
    bundle = MockSuggestionProvider().optimize(ResumeData.empty(), job)

    assert bundle.optimized_headline == "Data Engineer | Professional with Strong Technical Skills"
    assert bundle.missing_keywords == ["python", "java", "react", "angular", "vue", "docker"]
    assert bundle.overall_score == 48
    assert [s.type for s in bundle.suggestions][:2] == [AISuggestionType.HEADLINE, AISuggestionType.KEYWORDS]
    assert bundle.to_dict()["overallScore"] == 48
