"""
Token pattern table for resume tokenization.

The table is data, not code: token_patterns.yaml lists (name, type, regex,
confidence rules) rows that build_token_table() compiles into TokenPattern
instances. Tests and callers can hand the tokenizer their own table.

Pattern classes follow the frozen-dataclass convention used across intake:
- Dataclasses with frozen=True for immutability
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple

from atsresume.utils.config_registry import load_config


class TokenType(str, Enum):
    WORD = "word"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    LINKEDIN = "linkedin"
    GITHUB = "github"
    DATE = "date"
    LOCATION = "location"
    GPA = "gpa"
    DEGREE = "degree"
    YEAR = "year"
    NAME = "name"


DEFAULT_CONFIDENCE = 0.5


# =============================================================================
# PATTERN TABLE ROWS
# =============================================================================


@dataclass(frozen=True)
class ConfidenceBoost:
    """Confidence assigned when `pattern` is found in the token text."""

    pattern: re.Pattern
    confidence: float


@dataclass(frozen=True)
class TokenPattern:
    """
    One row of the token table.

    Confidence is the base value unless a boost rule matches the token text;
    the first matching boost wins.
    """

    name: str
    token_type: TokenType
    pattern: re.Pattern
    confidence: float = DEFAULT_CONFIDENCE
    boosts: Tuple[ConfidenceBoost, ...] = ()

    def score(self, text: str) -> float:
        for boost in self.boosts:
            if boost.pattern.search(text):
                return boost.confidence
        return self.confidence


@dataclass(frozen=True)
class NameCandidateRules:
    """Rules for spotting a person's name near the top of the document."""

    pattern: re.Pattern
    max_line_index: int = 10
    min_words: int = 2
    max_words: int = 4
    min_length: int = 4
    max_length: int = 50
    exclude: Tuple[re.Pattern, ...] = ()


@dataclass(frozen=True)
class TokenTable:
    """Complete tokenizer configuration: ordered patterns plus name rules."""

    patterns: Tuple[TokenPattern, ...]
    names: NameCandidateRules
    # Section vocabulary that disqualifies a name candidate
    header_pattern: Optional[re.Pattern] = None


# =============================================================================
# TABLE CONSTRUCTION
# =============================================================================


def _compile(regex: str, ignore_case: bool = False) -> re.Pattern:
    return re.compile(regex, re.IGNORECASE if ignore_case else 0)


def build_token_pattern(row: dict) -> TokenPattern:
    """
    Compile one table row.

    Args:
        row: Dict with name, type, regex and optional ignore_case,
             confidence, boosts[{regex, confidence}]

    Returns:
        TokenPattern ready for the tokenizer

    Example:
        >>> p = build_token_pattern({"name": "zip", "type": "location", "regex": r"\\b\\d{5}\\b"})
        >>> p.score("02139")
        0.5
    """
    boosts = tuple(
        ConfidenceBoost(pattern=_compile(b["regex"]), confidence=float(b["confidence"]))
        for b in row.get("boosts", []) or []
    )
    return TokenPattern(
        name=row["name"],
        token_type=TokenType(row["type"]),
        pattern=_compile(row["regex"], row.get("ignore_case", False)),
        confidence=float(row.get("confidence", DEFAULT_CONFIDENCE)),
        boosts=boosts,
    )


def _header_pattern(words: List[str]) -> Optional[re.Pattern]:
    if not words:
        return None
    alternation = "|".join(re.escape(w) for w in sorted(set(words), key=len, reverse=True))
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def build_token_table(config: dict, header_words: Optional[List[str]] = None) -> TokenTable:
    """
    Compile a token_patterns config dict into a TokenTable.

    Args:
        config: Parsed token_patterns.yaml contents
        header_words: Section header vocabulary excluded from name candidates

    Returns:
        TokenTable
    """
    names = config["name_candidates"]
    rules = NameCandidateRules(
        pattern=_compile(names["regex"]),
        max_line_index=int(names.get("max_line_index", 10)),
        min_words=int(names.get("min_words", 2)),
        max_words=int(names.get("max_words", 4)),
        min_length=int(names.get("min_length", 4)),
        max_length=int(names.get("max_length", 50)),
        exclude=tuple(_compile(rx) for rx in names.get("exclude", [])),
    )
    return TokenTable(
        patterns=tuple(build_token_pattern(row) for row in config["patterns"]),
        names=rules,
        header_pattern=_header_pattern(header_words or []),
    )


@lru_cache(maxsize=1)
def default_token_table() -> TokenTable:
    """Token table built from the packaged/configured YAML tables."""
    from atsresume.contexts.intake.section_patterns import header_vocabulary

    return build_token_table(load_config("token_patterns"), header_words=header_vocabulary())
