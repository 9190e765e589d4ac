"""Unit tests for the contact, summary, experience, education and skills extractors."""

import pytest

from atsresume.contexts.intake.extractors import (
    EntryState,
    ExperienceAccumulator,
    extract_contact,
    extract_education,
    extract_experience,
    extract_job_dates,
    extract_skills,
    extract_summary,
    group_skill_lines,
    infer_skill_level,
    is_job_entry_line,
    parse_education_entry,
    parse_job_entry,
    skill_category_for_group,
    split_skill_names,
)
from atsresume.contexts.intake.resume_data_structure import SkillCategory, SkillLevel
from atsresume.contexts.intake.segmenter import segment_sections
from atsresume.contexts.intake.tokenizer import tokenize


# =============================================================================
# CONTACT / SUMMARY
# =============================================================================


@pytest.mark.unit
def test_extract_contact_normalizes_profiles():
    lines = [
        "Jane Doe",
        "jane@example.com",
        "linkedin.com/in/janedoe | github.com/janedoe | Portfolio: janedoe.io",
    ]
    contact = extract_contact(lines, tokenize(lines))

    assert contact.full_name == "Jane Doe"
    assert contact.email == "jane@example.com"
    assert contact.linkedin == "https://linkedin.com/in/janedoe"
    assert contact.github == "https://github.com/janedoe"
    assert contact.phone == ""
    assert contact.website == "https://janedoe.io"


@pytest.mark.unit
def test_capitalized_profile_domains_are_not_websites():
    lines = ["Jane Doe", "LinkedIn.com/in/janedoe | GitHub.com/janedoe"]
    contact = extract_contact(lines, tokenize(lines))

    assert contact.linkedin == "https://LinkedIn.com/in/janedoe"
    assert contact.github == "https://GitHub.com/janedoe"
    assert contact.website == ""


@pytest.mark.unit
def test_name_fallback_skips_contact_and_header_lines():
    lines = ["jane@example.com", "Professional Summary", "Jane Doe"]
    contact = extract_contact(lines, tokens=[])

    assert contact.full_name == "Jane Doe"


@pytest.mark.unit
def test_summary_from_section():
    lines = ["Jane Doe", "Summary", "Engineer focused on reliable data platforms.", "Skills", "Python"]
    summary = extract_summary(lines, segment_sections(lines))

    assert summary == "Engineer focused on reliable data platforms."


@pytest.mark.unit
def test_summary_falls_back_to_long_paragraph():
    paragraph = "Seasoned analyst who turns messy operational data into clear decisions for leadership teams."
    lines = ["Jane Doe", "jane@example.com", paragraph]

    assert extract_summary(lines, segment_sections(lines)) == paragraph


@pytest.mark.unit
def test_summary_empty_when_nothing_fits():
    lines = ["Jane Doe", "jane@example.com"]
    assert extract_summary(lines, segment_sections(lines)) == ""


# =============================================================================
# EXPERIENCE
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [
        ("Engineer at Acme 2019 - Present", ("2019", "Present", True)),
        ("Engineer at Acme 2015 - 2018", ("2015", "2018", False)),
        ("Engineer at Acme 2018 - current", ("2018", "Present", True)),
        ("Engineer at Acme since 2020", ("2020", "", False)),
        ("Engineer at Acme", ("", "", False)),
    ],
)
def test_extract_job_dates(line, expected):
    assert extract_job_dates(line) == expected


@pytest.mark.unit
def test_knowledge_is_not_an_ongoing_marker():
    assert extract_job_dates("Knowledge engineer at Acme 2015 - 2018") == ("2015", "2018", False)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, position, company",
    [
        ("Senior Software Engineer at Acme Corp 2019 - Present", "Senior Software Engineer", "Acme Corp"),
        ("Engineer at Hooli (2016 - 2018)", "Engineer", "Hooli"),
        ("Software Engineer | Initech 2015 - 2019", "Software Engineer", "Initech"),
        ("Data Analyst, Globex 2017", "Data Analyst", "Globex"),
    ],
)
def test_parse_job_entry_shapes(line, position, company):
    entry = parse_job_entry(line, "exp-1")

    assert entry.position == position
    assert entry.company == company
    assert entry.id == "exp-1"


@pytest.mark.unit
def test_parse_job_entry_location():
    entry = parse_job_entry("Analyst at Globex, Boston, MA 2017 - 2019", "exp-1")
    assert entry.location == "Boston, MA"
    assert (entry.start_date, entry.end_date, entry.current) == ("2017", "2019", False)


@pytest.mark.unit
def test_parse_job_entry_midpoint_fallback():
    entry = parse_job_entry("Worked somewhere nice 2019", "exp-3")

    assert entry.position == "Worked"
    assert entry.company == "somewhere nice"


@pytest.mark.unit
def test_bulleted_line_with_year_is_not_an_entry():
    assert not is_job_entry_line("• Grew revenue 40% in 2021 across three regions")
    assert is_job_entry_line("Engineer at Hooli 2016 - 2018")


@pytest.mark.unit
def test_experience_accumulator_states():
    accumulator = ExperienceAccumulator()
    assert accumulator.state is EntryState.IDLE

    accumulator.feed("• orphan bullet that is long enough")
    assert accumulator.state is EntryState.IDLE

    accumulator.feed("Engineer at Hooli 2016 - 2018")
    assert accumulator.state is EntryState.ACCUMULATING

    accumulator.feed("• Shipped things")
    accumulator.feed("• Short")
    accumulator.feed("Analyst at Globex 2014 - 2016")
    accumulator.feed("Improved the reporting process for finance")
    accumulator.flush()

    assert accumulator.state is EntryState.IDLE
    assert [e.id for e in accumulator.entries] == ["exp-1", "exp-2"]
    assert accumulator.entries[0].description == ["Shipped things"]
    assert accumulator.entries[1].description == ["Improved the reporting process for finance"]


@pytest.mark.unit
def test_flush_drops_bullets_of_ten_chars_or_fewer():
    accumulator = ExperienceAccumulator()
    accumulator.feed("Engineer at Hooli 2016 - 2018")
    accumulator.feed("- Wrote code")  # 10 chars after stripping
    accumulator.flush()

    assert accumulator.entries[0].description == []


@pytest.mark.unit
def test_extract_experience_requires_section():
    lines = ["Jane Doe", "Engineer at Hooli 2016 - 2018"]
    assert extract_experience(lines, segment_sections(lines)) == []


@pytest.mark.unit
def test_extract_experience_within_section():
    lines = [
        "Experience",
        "Engineer at Hooli 2016 - 2018",
        "• Grew revenue 40% in 2021 across three regions",
        "Education",
        "B.S. Physics, State University, 2015",
    ]
    entries = extract_experience(lines, segment_sections(lines))

    assert len(entries) == 1
    assert entries[0].description == ["Grew revenue 40% in 2021 across three regions"]


# =============================================================================
# EDUCATION
# =============================================================================


@pytest.mark.unit
def test_parse_education_entry():
    entry = parse_education_entry("B.S. Computer Science, State University, 2018, GPA: 3.8", "edu-1")

    assert entry.degree == "B.S. Computer Science"
    assert entry.institution == "State University"
    assert entry.end_date == "2018"
    assert entry.gpa == "3.8"


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, institution",
    [
        ("B.S. Computer Science, University of Texas, 2015", "University of Texas"),
        ("M.S. Physics, Massachusetts Institute of Technology, 2019", "Massachusetts Institute of Technology"),
        ("B.A. History, Boston College, 2011", "Boston College"),
    ],
)
def test_parse_education_entry_institution_shapes(line, institution):
    assert parse_education_entry(line, "edu-1").institution == institution


@pytest.mark.unit
def test_parse_education_entry_placeholders():
    entry = parse_education_entry("Graduated 2012", "edu-1")

    assert entry.degree == "Degree"
    assert entry.institution == "Institution"
    assert entry.end_date == "2012"
    assert entry.gpa == ""


@pytest.mark.unit
def test_education_scans_whole_document_without_section():
    lines = ["Jane Doe", "MBA from Wharton School 2020"]
    entries = extract_education(lines, segment_sections(lines))

    assert len(entries) == 1
    assert entries[0].id == "edu-1"
    assert entries[0].institution.startswith("Wharton School")
    assert entries[0].end_date == "2020"


# =============================================================================
# SKILLS
# =============================================================================


@pytest.mark.unit
def test_split_skill_names():
    assert split_skill_names("Python, Go | Rust • C") == ["Python", "Go", "Rust"]
    assert split_skill_names("5 years Python, Docker") == ["Docker"]


@pytest.mark.unit
def test_group_skill_lines():
    groups = group_skill_lines(
        [
            "Python, SQL",
            "Programming Languages: Go, Rust",
            "Tools: Docker, Git",
        ]
    )

    assert groups == [
        ("Technical", ["Python", "SQL"]),
        ("Programming Languages", ["Go", "Rust"]),
        ("Tools", ["Docker", "Git"]),
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    "group, category",
    [
        ("Soft Skills", SkillCategory.SOFT),
        ("Certifications", SkillCategory.CERTIFICATION),
        ("Spoken Languages", SkillCategory.LANGUAGE),
        ("Languages", SkillCategory.LANGUAGE),
        ("Programming Languages", SkillCategory.TECHNICAL),
        ("Technical", SkillCategory.TECHNICAL),
    ],
)
def test_skill_category_for_group(group, category):
    assert skill_category_for_group(group) is category


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, level",
    [
        ("Python (expert)", SkillLevel.EXPERT),
        ("Advanced SQL", SkillLevel.EXPERT),
        ("Familiar with Rust", SkillLevel.BEGINNER),
        ("Basic Go", SkillLevel.BEGINNER),
        ("Docker", SkillLevel.INTERMEDIATE),
    ],
)
def test_infer_skill_level(name, level):
    assert infer_skill_level(name) is level


@pytest.mark.unit
def test_extract_skills_ids_and_categories():
    lines = [
        "Skills",
        "Programming Languages: Python, Go",
        "Soft Skills: Leadership, Mentoring",
    ]
    skills = extract_skills(lines, segment_sections(lines))

    assert [s.id for s in skills] == ["skill-1", "skill-2", "skill-3", "skill-4"]
    assert [s.name for s in skills] == ["Python", "Go", "Leadership", "Mentoring"]
    assert [s.category for s in skills] == [SkillCategory.TECHNICAL] * 2 + [SkillCategory.SOFT] * 2
