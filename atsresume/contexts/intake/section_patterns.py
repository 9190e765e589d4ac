"""
Pattern matching for resume section header identification.

This module provides the header synonym dictionary and helper functions used
to decide whether a line is a section header and how confident that call is.

Synonyms come from section_keywords.yaml so new header wordings can be added
without touching the segmenter.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from atsresume.utils.config_registry import load_config
from atsresume.utils.text_processing import is_all_caps, letters_only

# Section types the extractors know how to consume
SECTION_TYPES = (
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
)


@dataclass(frozen=True)
class HeaderConfidence:
    """
    Additive confidence contributions for a header candidate.

    A line that is exactly the synonym (ignoring case) collects both exact
    bonuses; formatting cues add smaller amounts. The total is capped at 1.0.
    """

    BASE: float = 0.5
    EXACT_MATCH: float = 0.3
    STANDALONE: float = 0.2
    ALL_CAPS: float = 0.1
    COLON: float = 0.1
    POSITION: float = 0.1
    # Headers past this line index get no position bonus
    POSITION_LIMIT: int = 100


@dataclass(frozen=True)
class SectionKeywords:
    """Header synonyms per section type plus acceptance settings."""

    synonyms: Dict[str, Tuple[str, ...]]
    min_confidence: float = 0.6
    merge_window: int = 3

    def vocabulary(self) -> List[str]:
        return [word for words in self.synonyms.values() for word in words]


# =============================================================================
# CONFIG LOADING
# =============================================================================


def build_section_keywords(config: dict) -> SectionKeywords:
    """
    Build SectionKeywords from a section_keywords config dict.

    Args:
        config: Parsed section_keywords.yaml contents

    Returns:
        SectionKeywords (synonyms are lowercased)

    Raises:
        ValueError: If the config names a section type the extractors do not consume
    """
    unknown = sorted(set(config["sections"]) - set(SECTION_TYPES))
    if unknown:
        raise ValueError(f"Unknown section types in section keywords: {', '.join(unknown)}")

    synonyms = {
        section_type: tuple(str(word).lower() for word in words)
        for section_type, words in config["sections"].items()
    }
    return SectionKeywords(
        synonyms=synonyms,
        min_confidence=float(config.get("min_confidence", 0.6)),
        merge_window=int(config.get("merge_window", 3)),
    )


@lru_cache(maxsize=1)
def default_section_keywords() -> SectionKeywords:
    return build_section_keywords(load_config("section_keywords"))


def header_vocabulary() -> List[str]:
    """Every header synonym across all section types."""
    return default_section_keywords().vocabulary()


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def matches_header_keyword(clean_line: str, keyword: str) -> bool:
    """
    Check a letters-only, lowercased line against one synonym.

    Matches when the line equals the synonym, starts with "<synonym> ", or is
    short (under synonym length + 5) and contains it.

    Example:
        >>> matches_header_keyword("work experience", "work experience")
        True
        >>> matches_header_keyword("led a team of five engineers", "team")
        False
    """
    return (
        clean_line == keyword
        or clean_line.startswith(keyword + " ")
        or (len(clean_line) < len(keyword) + 5 and keyword in clean_line)
    )


def header_confidence(line: str, keyword: str, index: int) -> float:
    """
    Score how likely a matching line is a real header.

    Args:
        line: Original (trimmed) line text
        keyword: Synonym that matched
        index: Line index in the document

    Returns:
        Confidence in [0, 1]
    """
    weights = HeaderConfidence()
    confidence = weights.BASE

    if line.strip().lower() == keyword:
        confidence += weights.EXACT_MATCH + weights.STANDALONE

    if is_all_caps(line):
        confidence += weights.ALL_CAPS
    if ":" in line:
        confidence += weights.COLON

    if 0 < index < weights.POSITION_LIMIT:
        confidence += weights.POSITION

    return min(confidence, 1.0)


def best_header_match(
    line: str, index: int, section_type: str, keywords: SectionKeywords
) -> Optional[Tuple[float, str]]:
    """
    Best (confidence, synonym) for one section type on one line.

    Returns:
        The highest-confidence synonym that matches, or None when no synonym
        of this type matches the line at all
    """
    clean_line = letters_only(line)
    best = None

    for keyword in keywords.synonyms.get(section_type, ()):
        if matches_header_keyword(clean_line, keyword):
            confidence = header_confidence(line, keyword, index)
            if best is None or confidence > best[0]:
                best = (confidence, keyword)

    return best


def is_section_header(line: str, index: int, keywords: SectionKeywords, exclude: str = None) -> bool:
    """
    True if the line is an accepted header for any section type except `exclude`.
    """
    for section_type in keywords.synonyms:
        if section_type == exclude:
            continue
        match = best_header_match(line, index, section_type, keywords)
        if match and match[0] > keywords.min_confidence:
            return True
    return False


def contains_header_word(text: str, keywords: Optional[SectionKeywords] = None) -> bool:
    """True if any header synonym appears in text as a whole word."""
    keywords = keywords or default_section_keywords()
    lowered = text.lower()
    return any(re.search(rf"\b{re.escape(word)}\b", lowered) for word in keywords.vocabulary())
