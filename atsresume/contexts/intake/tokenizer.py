"""
Resume tokenizer.

Turns the ordered line list into typed, positioned, confidence-scored tokens.
Every pattern match on every line becomes a token, so one span may produce
several tokens of different types (a date and a year, a url and a linkedin
profile). Extractors pick among them by confidence.
"""

from dataclasses import dataclass
from typing import List, Optional

from atsresume.contexts.intake.token_patterns import (
    NameCandidateRules,
    TokenTable,
    TokenType,
    default_token_table,
)


@dataclass(frozen=True)
class Token:
    text: str
    token_type: TokenType
    line: int
    position: int
    confidence: float


@dataclass(frozen=True)
class NameConfidence:
    """Additive confidence contributions for a name candidate."""

    BASE: float = 0.5
    FIRST_LINE: float = 0.3
    EARLY_LINE: float = 0.2
    EARLY_LINE_LIMIT: int = 3
    STANDALONE: float = 0.2
    TWO_WORDS: float = 0.1
    THREE_WORDS: float = 0.05


def tokenize(lines: List[str], table: Optional[TokenTable] = None) -> List[Token]:
    """
    Tokenize resume lines.

    Args:
        lines: Ordered, trimmed, non-empty lines
        table: Pattern table to use (default: packaged token_patterns.yaml)

    Returns:
        Tokens in line order; within a line, in pattern-table order with
        name candidates last

    Example:
        >>> [t.token_type.value for t in tokenize(["jane@example.com"])]
        ['email']
    """
    table = table or default_token_table()
    tokens = []

    for line_index, line in enumerate(lines):
        for token_pattern in table.patterns:
            for match in token_pattern.pattern.finditer(line):
                tokens.append(
                    Token(
                        text=match.group(0),
                        token_type=token_pattern.token_type,
                        line=line_index,
                        position=match.start(),
                        confidence=token_pattern.score(match.group(0)),
                    )
                )

        if line_index < table.names.max_line_index:
            tokens.extend(_name_tokens(line, line_index, table))

    return tokens


def _name_tokens(line: str, line_index: int, table: TokenTable) -> List[Token]:
    rules = table.names
    found = []

    for match in rules.pattern.finditer(line):
        candidate = match.group(0)
        if not _is_likely_name(candidate, line, line_index, rules, table):
            continue
        found.append(
            Token(
                text=candidate,
                token_type=TokenType.NAME,
                line=line_index,
                position=match.start(),
                confidence=name_confidence(candidate, line, line_index),
            )
        )

    return found


def _is_likely_name(
    candidate: str, line: str, line_index: int, rules: NameCandidateRules, table: TokenTable
) -> bool:
    words = candidate.split()

    if not rules.min_words <= len(words) <= rules.max_words:
        return False
    if not rules.min_length <= len(candidate) <= rules.max_length:
        return False
    if any(rx.search(candidate) for rx in rules.exclude):
        return False
    if table.header_pattern is not None and table.header_pattern.search(candidate):
        return False

    # Near the top a capitalized run is trusted; further down it must dominate its line
    if line_index < NameConfidence.EARLY_LINE_LIMIT:
        return True

    other_content = line.replace(candidate, "", 1).strip()
    return len(other_content) <= len(candidate)


def name_confidence(name: str, line: str, line_index: int) -> float:
    """
    Confidence that a candidate on a given line is the person's name.

    Example:
        >>> name_confidence("Jane Doe", "Jane Doe", 0)
        1.0
    """
    weights = NameConfidence()
    confidence = weights.BASE

    if line_index == 0:
        confidence += weights.FIRST_LINE
    elif line_index < weights.EARLY_LINE_LIMIT:
        confidence += weights.EARLY_LINE

    if line.strip() == name:
        confidence += weights.STANDALONE

    word_count = len(name.split())
    if word_count == 2:
        confidence += weights.TWO_WORDS
    elif word_count == 3:
        confidence += weights.THREE_WORDS

    return min(confidence, 1.0)


def best_token(tokens: List[Token], token_type: TokenType) -> Optional[Token]:
    """Highest-confidence token of a type; the earliest one wins ties."""
    best = None
    for token in tokens:
        if token.token_type is token_type and (best is None or token.confidence > best.confidence):
            best = token
    return best


def first_token(tokens: List[Token], token_type: TokenType) -> Optional[Token]:
    return next((t for t in tokens if t.token_type is token_type), None)
