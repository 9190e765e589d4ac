"""
Section segmenter.

Finds section headers and turns them into half-open line ranges:
start_line is the first content line under the header, end_line is the index
of the next accepted header of a different section type (or len(lines)).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from atsresume.contexts.intake.section_patterns import (
    SectionKeywords,
    best_header_match,
    default_section_keywords,
    is_section_header,
)


@dataclass(frozen=True)
class SectionBoundary:
    section_type: str
    start_line: int
    end_line: int
    confidence: float
    header_line: str
    header_index: int

    @property
    def line_range(self) -> range:
        return range(self.start_line, self.end_line)


def segment_sections(lines: List[str], keywords: Optional[SectionKeywords] = None) -> List[SectionBoundary]:
    """
    Locate resume sections.

    Args:
        lines: Ordered, trimmed, non-empty lines
        keywords: Header synonyms (default: packaged section_keywords.yaml)

    Returns:
        Boundaries sorted by start line, at most one per header line and type

    Example:
        >>> lines = ["Experience", "Engineer at X 2020", "Education", "BS 2018"]
        >>> [(b.start_line, b.end_line) for b in segment_sections(lines)]
        [(1, 2), (3, 4)]
    """
    keywords = keywords or default_section_keywords()

    # (header index, type) -> (confidence, header line)
    detected: Dict[Tuple[int, str], Tuple[float, str]] = {}

    for index, line in enumerate(lines):
        for section_type in keywords.synonyms:
            match = best_header_match(line, index, section_type, keywords)
            if match is None or match[0] <= keywords.min_confidence:
                continue
            detected[(index, section_type)] = (match[0], line)

    boundaries = [
        SectionBoundary(
            section_type=section_type,
            start_line=index + 1,
            end_line=_find_section_end(lines, index, section_type, keywords),
            confidence=confidence,
            header_line=header_line,
            header_index=index,
        )
        for (index, section_type), (confidence, header_line) in sorted(detected.items())
    ]

    return _merge_nearby(boundaries, keywords.merge_window)


def _find_section_end(lines: List[str], header_index: int, section_type: str, keywords: SectionKeywords) -> int:
    for index in range(header_index + 1, len(lines)):
        if is_section_header(lines[index], index, keywords, exclude=section_type):
            return index
    return len(lines)


def _merge_nearby(boundaries: List[SectionBoundary], window: int) -> List[SectionBoundary]:
    """Drop a boundary when an earlier kept one of the same type starts within `window` lines."""
    kept = []
    last_start: Dict[str, int] = {}

    for boundary in boundaries:
        previous = last_start.get(boundary.section_type)
        if previous is not None and boundary.start_line - previous < window:
            continue
        kept.append(boundary)
        last_start[boundary.section_type] = boundary.start_line

    return kept


def find_section(boundaries: List[SectionBoundary], section_type: str) -> Optional[SectionBoundary]:
    """First boundary of a type, or None."""
    return next((b for b in boundaries if b.section_type == section_type), None)
