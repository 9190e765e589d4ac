"""Unit tests for section header matching and segmentation."""

import pytest

from atsresume.contexts.intake.section_patterns import (
    header_confidence,
    header_vocabulary,
    matches_header_keyword,
)
from atsresume.contexts.intake.segmenter import find_section, segment_sections


@pytest.mark.unit
def test_two_section_example():
    lines = ["Experience", "Engineer at X 2020", "Education", "BS 2018"]
    boundaries = segment_sections(lines)

    assert [(b.section_type, b.start_line, b.end_line) for b in boundaries] == [
        ("experience", 1, 2),
        ("education", 3, 4),
    ]
    assert boundaries[0].header_index == 0
    assert boundaries[0].header_line == "Experience"


@pytest.mark.unit
@pytest.mark.parametrize(
    "clean_line, keyword, expected",
    [
        ("work experience", "work experience", True),
        ("skills and tools", "skills", True),
        ("my skills", "skills", True),
        ("led a team of five engineers", "team", False),
        ("technical leadership across many products", "technical skills", False),
    ],
)
def test_matches_header_keyword(clean_line, keyword, expected):
    assert matches_header_keyword(clean_line, keyword) is expected


@pytest.mark.unit
def test_header_confidence():
    assert header_confidence("EXPERIENCE", "experience", 0) == 1.0
    # colon + position bonus only
    assert header_confidence("Experience:", "experience", 5) == pytest.approx(0.7)
    assert header_confidence("Career growth was rapid", "career", 2) == pytest.approx(0.6)


@pytest.mark.unit
def test_weak_header_is_not_accepted():
    lines = ["Jane Doe", "Austin, TX", "Career growth was rapid"]
    assert segment_sections(lines) == []


@pytest.mark.unit
def test_section_runs_to_end_of_document():
    lines = ["Jane Doe", "SKILLS", "Python, Go", "Docker"]
    boundaries = segment_sections(lines)

    assert len(boundaries) == 1
    assert (boundaries[0].start_line, boundaries[0].end_line) == (2, 4)


@pytest.mark.unit
def test_nearby_duplicate_headers_collapse_to_first():
    lines = ["Skills", "Technical Skills", "Python", "Go"]
    boundaries = segment_sections(lines)

    assert [(b.section_type, b.start_line) for b in boundaries] == [("skills", 1)]


@pytest.mark.unit
def test_one_boundary_per_header_line():
    """Several synonyms of one type matching the same line give one boundary."""
    lines = ["Jane Doe", "Professional Experience", "Engineer at X 2020 - 2021"]
    boundaries = segment_sections(lines)

    assert [(b.section_type, b.header_index) for b in boundaries] == [("experience", 1)]
    assert boundaries[0].confidence == 1.0


@pytest.mark.unit
def test_boundaries_sorted_and_findable():
    lines = [
        "Jane Doe",
        "Summary",
        "Engineer with a decade of platform work",
        "Skills",
        "Python",
        "Experience",
        "Engineer at X 2020 - 2021",
    ]
    boundaries = segment_sections(lines)

    assert [b.start_line for b in boundaries] == sorted(b.start_line for b in boundaries)
    assert find_section(boundaries, "skills").line_range == range(4, 5)
    assert find_section(boundaries, "education") is None


@pytest.mark.unit
def test_header_vocabulary_contains_all_types():
    vocabulary = header_vocabulary()
    for word in ("contact", "summary", "experience", "education", "skills", "projects", "certifications"):
        assert word in vocabulary
