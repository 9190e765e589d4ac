"""Unit tests for ResumeData and its parts."""

import json

import pytest

from atsresume.contexts.intake.resume_data_structure import (
    Contact,
    Education,
    Experience,
    ResumeData,
    Skill,
    SkillCategory,
    SkillLevel,
)


@pytest.fixture
def resume():
    return ResumeData(
        contact=Contact(full_name="Jane Doe", email="jane@example.com"),
        summary="Backend engineer.",
        experience=[Experience(id="exp-1", company="Acme", position="Engineer", start_date="2019", current=True)],
        education=[Education(id="edu-1", institution="State University", degree="B.S.", gpa="3.8")],
        skills=[Skill(id="skill-1", name="Python", level=SkillLevel.EXPERT)],
    )


@pytest.mark.unit
def test_empty_resume_has_all_sections():
    resume = ResumeData.empty()

    assert resume.sections == ["contact", "summary", "experience", "education", "skills"]
    assert resume.contact.full_name == ""
    assert resume.experience == [] and resume.education == [] and resume.skills == []


@pytest.mark.unit
def test_empty_resumes_do_not_share_lists():
    first, second = ResumeData.empty(), ResumeData.empty()
    first.skills.append(Skill(id="skill-1", name="Go"))

    assert second.skills == []


@pytest.mark.unit
@pytest.mark.parametrize("sections", [["contact", "hobbies"], ["skills", "skills"]])
def test_invalid_sections_rejected(sections):
    with pytest.raises(ValueError):
        ResumeData(sections=sections)


@pytest.mark.unit
def test_sections_may_be_reordered_or_hidden():
    resume = ResumeData(sections=["skills", "contact"])
    assert resume.sections == ["skills", "contact"]


@pytest.mark.unit
def test_effective_end_date():
    assert Experience(id="exp-1", end_date="2020", current=True).effective_end_date == "Present"
    assert Experience(id="exp-1", end_date="2020").effective_end_date == "2020"


@pytest.mark.unit
def test_to_dict_uses_camel_case(resume):
    data = resume.to_dict()

    assert data["contact"]["fullName"] == "Jane Doe"
    assert data["experience"][0]["startDate"] == "2019"
    assert data["experience"][0]["current"] is True
    assert data["skills"][0] == {"id": "skill-1", "name": "Python", "level": "Expert", "category": "Technical"}


@pytest.mark.unit
def test_json_restores_equal_resume(resume):
    restored = ResumeData.from_json(resume.to_json())

    assert restored == resume
    assert restored.skills[0].level is SkillLevel.EXPERT
    assert restored.skills[0].category is SkillCategory.TECHNICAL


@pytest.mark.unit
def test_from_dict_tolerates_missing_and_null_fields():
    data = {"contact": {"fullName": "Jane Doe", "linkedin": None}, "skills": [{"id": "skill-1", "name": "Go"}]}
    resume = ResumeData.from_dict(data)

    assert resume.contact.linkedin == ""
    assert resume.summary == ""
    assert resume.skills[0].level is SkillLevel.INTERMEDIATE
    assert resume.sections == ["contact", "summary", "experience", "education", "skills"]


@pytest.mark.unit
def test_to_json_keeps_non_ascii():
    resume = ResumeData(contact=Contact(full_name="José Núñez"))
    assert "José Núñez" in resume.to_json()
    assert json.loads(resume.to_json(indent=None))["contact"]["fullName"] == "José Núñez"
