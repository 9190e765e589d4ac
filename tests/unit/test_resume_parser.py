"""Unit tests for the resume parsing entry points."""

from pathlib import Path

import pytest

from atsresume.contexts.intake.exceptions import EmptyResumeTextError, UnsupportedFormatError
from atsresume.contexts.intake.resume_data_structure import SECTION_ORDER
from atsresume.contexts.intake.resume_parser import (
    create_guided_resume,
    guided_summary,
    limited_success_summary,
    parse_resume_document,
    parse_resume_file,
    parse_resume_text,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def sample_text():
    return (FIXTURES_PATH / "sample_resume.txt").read_text(encoding="utf-8")


@pytest.mark.unit
def test_parse_sample_contact(sample_text):
    contact = parse_resume_text(sample_text).contact

    assert contact.full_name == "Jane Doe"
    assert contact.email == "jane.doe@example.com"
    assert contact.phone == "(555) 123-4567"
    assert contact.location == "Austin, TX"
    assert contact.linkedin == "https://linkedin.com/in/janedoe"
    assert contact.github == "https://github.com/janedoe"
    assert contact.website == ""


@pytest.mark.unit
def test_parse_sample_sections(sample_text):
    resume = parse_resume_text(sample_text)

    assert resume.summary.startswith("Backend engineer with eight years")
    assert resume.sections == list(SECTION_ORDER)

    first, second = resume.experience
    assert (first.position, first.company, first.start_date, first.end_date, first.current) == (
        "Senior Software Engineer",
        "Acme Corp",
        "2019",
        "Present",
        True,
    )
    assert (second.position, second.company, second.start_date, second.end_date) == (
        "Software Engineer",
        "Initech",
        "2015",
        "2019",
    )
    assert len(first.description) == 2
    assert second.description[0].startswith("Built ETL pipelines")

    (education,) = resume.education
    assert education.degree == "B.S. Computer Science"
    assert education.institution == "University of Texas"
    assert education.end_date == "2015"
    assert education.gpa == "3.7"

    assert [s.name for s in resume.skills] == ["Python", "Go", "SQL", "Docker", "Kubernetes", "Git"]


@pytest.mark.unit
def test_parse_is_deterministic(sample_text):
    assert parse_resume_text(sample_text).to_dict() == parse_resume_text(sample_text).to_dict()


@pytest.mark.unit
def test_parse_rejects_non_text():
    with pytest.raises(TypeError):
        parse_resume_text(b"Jane Doe resume bytes")


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   \n\t ", "Jane"])
def test_parse_rejects_near_empty_text(text):
    with pytest.raises(EmptyResumeTextError):
        parse_resume_text(text)


@pytest.mark.unit
def test_limited_success_summary_injected():
    resume = parse_resume_text("lorem ipsum dolor sit amet consectetur", file_name="cv.pdf")

    assert resume.contact.full_name == ""
    assert resume.experience == []
    assert resume.summary == limited_success_summary("cv.pdf")
    assert '"cv.pdf"' in resume.summary


@pytest.mark.unit
def test_guided_resume_template():
    resume = create_guided_resume("scan.pdf")

    assert resume.summary == guided_summary("scan.pdf")
    assert [e.id for e in resume.experience] == ["exp-1"]
    assert resume.experience[0].description == [""]
    assert [e.id for e in resume.education] == ["edu-1"]
    assert resume.skills == []
    assert resume.contact.full_name == ""


@pytest.mark.unit
@pytest.mark.parametrize("text", [None, "", "   short "])
def test_parse_document_without_text_is_guided(text):
    resume = parse_resume_document(text, "empty.pdf")
    assert resume.summary == guided_summary("empty.pdf")


@pytest.mark.unit
def test_parse_file_plain_text(sample_text):
    resume = parse_resume_file(sample_text.encode("utf-8"), "text/plain", "resume.txt")
    assert resume.contact.full_name == "Jane Doe"


@pytest.mark.unit
def test_parse_file_rejects_unsupported_type():
    with pytest.raises(UnsupportedFormatError):
        parse_resume_file(b"<html></html>", "text/html", "resume.html")


@pytest.mark.unit
def test_parse_file_unreadable_pdf_is_guided():
    resume = parse_resume_file(b"this is not a pdf", "application/pdf", "broken.pdf")
    assert resume.summary == guided_summary("broken.pdf")
