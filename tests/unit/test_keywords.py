"""Unit tests for job description keyword extraction and matching."""

import pytest

from atsresume.contexts.intake.resume_data_structure import Contact, Experience, ResumeData, Skill
from atsresume.contexts.scoring.keywords import (
    extract_keywords,
    extract_phrases,
    keyword_density,
    keyword_rank,
    match_keywords,
    resume_text,
    word_frequencies,
)


@pytest.mark.unit
def test_extract_keywords_ranks_technical_terms_first():
    text = "We need a Python developer. Python experience is a must. Must know Python and SQL."
    assert extract_keywords(text) == ["python", "sql", "developer", "experience"]


@pytest.mark.unit
def test_extract_keywords_empty_for_stop_words_only():
    assert extract_keywords("The and a. Is it?") == []


@pytest.mark.unit
def test_extract_keywords_is_capped_at_twenty():
    text = " ".join(f"keyword{letter}xyz" for letter in "abcdefghijklmnopqrstuvwxyz")
    assert len(extract_keywords(text)) == 20


@pytest.mark.unit
def test_extract_keywords_includes_phrases():
    keywords = extract_keywords("Proficiency in cloud tooling is expected.")
    assert "proficiency in cloud tooling is expected" in keywords


@pytest.mark.unit
def test_word_frequencies_filters_noise():
    assert word_frequencies("The 2024 API is great, great!") == {"api": 1, "great": 2}


@pytest.mark.unit
def test_extract_phrases():
    phrases = extract_phrases("Strong experience with cloud infrastructure. Software engineering culture.")
    assert phrases == ["experience with cloud infrastructure", "software engineering"]


@pytest.mark.unit
def test_keyword_rank_bonuses():
    text = "lead the python team"
    assert keyword_rank("python", text) == 11
    assert keyword_rank("lead", text) == 6
    assert keyword_rank("team", text) == 1


@pytest.mark.unit
def test_keyword_density():
    assert keyword_density("", ["python"]) == 0.0
    assert keyword_density("Python and more python", ["python"]) == pytest.approx(0.5)


@pytest.mark.unit
def test_match_keywords_is_case_insensitive_substring():
    matched, missing = match_keywords("Built PostgreSQL services", ["sql", "services", "go"])

    assert matched == ["sql", "services"]
    assert missing == ["go"]


@pytest.mark.unit
def test_resume_text_covers_searchable_fields():
    resume = ResumeData(
        contact=Contact(full_name="Jane Doe", email="jane@example.com"),
        summary="Engineer.",
        experience=[
            Experience(id="exp-1", company="Acme", position="Lead", start_date="2019", current=True, description=["Built APIs"])
        ],
        skills=[Skill(id="skill-1", name="Terraform")],
    )
    text = resume_text(resume)

    for fragment in ("Jane Doe", "Engineer.", "Acme", "Lead", "2019", "Present", "Built APIs", "Terraform"):
        assert fragment in text
    assert "jane@example.com" not in text


@pytest.mark.unit
def test_repeated_short_word_included_single_short_word_excluded():
    assert extract_keywords("Need good rust. Rust rocks.") == ["rust"]
