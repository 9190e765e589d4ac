"""
Keyword extraction and matching.

Job descriptions are reduced to a ranked list of at most 20 keywords:
frequent or long single words plus detected skill phrases. Matching is a
case-insensitive substring search against the flattened resume text.
"""

import re
from typing import Dict, List, Optional

from atsresume.contexts.intake.resume_data_structure import ResumeData
from atsresume.contexts.scoring.rules import KeywordRules, default_scoring_rules

NON_WORD = re.compile(r"[^\w\s]")
SENTENCE_BREAK = re.compile(r"[.!?]+")
NUMERIC = re.compile(r"^\d+$")


def _rules(rules: Optional[KeywordRules]) -> KeywordRules:
    return rules or default_scoring_rules().keyword


def resume_text(resume: ResumeData) -> str:
    """
    Flatten every searchable resume field into one space-joined string.

    Includes name, summary, experience company/position/dates/bullets,
    education institution/degree/field and skill names. An ongoing job
    contributes "Present" as its end date.
    """
    parts = [resume.contact.full_name, resume.summary]

    for exp in resume.experience:
        parts.extend([exp.company, exp.position, exp.start_date, exp.effective_end_date])
        parts.extend(exp.description)

    for edu in resume.education:
        parts.extend([edu.institution, edu.degree, edu.field])

    parts.extend(skill.name for skill in resume.skills)

    return " ".join(part for part in parts if part)


def word_frequencies(text: str, rules: Optional[KeywordRules] = None) -> Dict[str, int]:
    """Stop-word-filtered word counts, in order of first appearance."""
    rules = _rules(rules)
    counts: Dict[str, int] = {}

    for word in NON_WORD.sub(" ", text.lower()).split():
        if len(word) < rules.min_word_length or word in rules.stop_words or NUMERIC.match(word):
            continue
        counts[word] = counts.get(word, 0) + 1

    return counts


def extract_phrases(text: str, rules: Optional[KeywordRules] = None) -> List[str]:
    """
    Multi-word skill phrases, sentence by sentence, first 10 kept.

    Example:
        >>> extract_phrases("Strong experience with cloud infrastructure. Software engineering culture.")
        ['experience with cloud infrastructure', 'software engineering']
    """
    rules = _rules(rules)
    phrases = []

    for sentence in SENTENCE_BREAK.split(text.lower()):
        for pattern in rules.phrase_patterns:
            phrases.extend(match.group(0).strip() for match in pattern.finditer(sentence))

    return phrases[: rules.max_phrases]


def keyword_rank(keyword: str, text: str, rules: Optional[KeywordRules] = None) -> int:
    """
    Ranking score: technical-term and action-verb bonuses plus raw frequency.

    Frequency counts non-overlapping substring occurrences in the lowercased
    job description text.
    """
    rules = _rules(rules)
    lowered = keyword.lower()
    score = 0

    if lowered in rules.technical_terms:
        score += rules.technical_term_bonus
    if lowered in rules.action_verbs:
        score += rules.action_verb_bonus

    return score + text.lower().count(lowered)


def _qualifies(word: str, count: int, rules: KeywordRules) -> bool:
    return (
        count >= rules.min_frequency
        or len(word) > rules.long_word_length
        or word in rules.technical_terms
        or word in rules.action_verbs
    )


def extract_keywords(text: str, rules: Optional[KeywordRules] = None) -> List[str]:
    """
    Ranked keywords for a job description.

    Single words qualify when they appear at least twice, are longer than six
    characters, or are known technical terms / action verbs. Phrases from
    extract_phrases() are unioned in. Ties keep first-seen order.

    Args:
        text: Job description free text
        rules: Keyword rules (default: ats_rules.yaml)

    Returns:
        Up to 20 lowercase keywords, highest ranked first

    Example:
        >>> extract_keywords("We need a Python developer. Python experience is a must. Must know Python and SQL.")
        ['python', 'sql', 'developer', 'experience']
    """
    rules = _rules(rules)

    words = [word for word, count in word_frequencies(text, rules).items() if _qualifies(word, count, rules)]
    candidates = list(dict.fromkeys(words + extract_phrases(text, rules)))

    ranked = sorted(candidates, key=lambda keyword: -keyword_rank(keyword, text, rules))
    return ranked[: rules.max_keywords]


def keyword_density(text: str, keywords: List[str]) -> float:
    """
    Total keyword occurrences divided by the word count of text.

    Computed across the whole keyword list; 0.0 for empty text.
    """
    word_count = len(text.split())
    if word_count == 0:
        return 0.0

    lowered = text.lower()
    occurrences = sum(lowered.count(keyword.lower()) for keyword in keywords)
    return occurrences / word_count


def match_keywords(text: str, keywords: List[str]):
    """
    Split keywords into (matched, missing) against text, preserving order.
    """
    lowered = text.lower()
    matched = [k for k in keywords if k.lower() in lowered]
    missing = [k for k in keywords if k.lower() not in lowered]
    return matched, missing
