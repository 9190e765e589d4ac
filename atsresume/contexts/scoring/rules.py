"""
Scoring rule tables.

Thresholds, penalties and word lists live in ats_rules.yaml; these frozen
dataclasses give them names and types. Each rule set can be built from a
config dict so tests can score against modified rules.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, Tuple

from atsresume.utils.config_registry import load_config


@dataclass(frozen=True)
class KeywordRules:
    max_score: float
    partial_credit: float
    max_keywords: int
    max_phrases: int
    min_word_length: int
    min_frequency: int
    long_word_length: int
    max_density: float
    min_density: float
    stuffing_multiplier: float
    sparse_multiplier: float
    technical_term_bonus: int
    action_verb_bonus: int
    technical_terms: FrozenSet[str]
    action_verbs: FrozenSet[str]
    stop_words: FrozenSet[str]
    phrase_patterns: Tuple[re.Pattern, ...]


@dataclass(frozen=True)
class FormattingRules:
    max_score: float
    penalties: Dict[str, float]
    unprofessional_domains: FrozenSet[str]
    min_summary_words: int
    max_summary_words: int


@dataclass(frozen=True)
class StructureRules:
    max_score: float
    required_sections: Tuple[str, ...]
    min_experience: int
    min_bullets: int
    min_education: int
    min_skills: int
    penalties: Dict[str, float]


@dataclass(frozen=True)
class SuggestionRules:
    max_listed_keywords: int = 5
    min_skills: int = 5


@dataclass(frozen=True)
class ScoringRules:
    keyword: KeywordRules
    formatting: FormattingRules
    structure: StructureRules
    suggestions: SuggestionRules


def build_scoring_rules(config: dict) -> ScoringRules:
    """
    Build ScoringRules from an ats_rules config dict.

    Args:
        config: Parsed ats_rules.yaml contents

    Returns:
        ScoringRules
    """
    kw = config["keyword"]
    fmt = config["formatting"]
    st = config["structure"]
    sg = config.get("suggestions", {})

    keyword = KeywordRules(
        max_score=float(kw["max_score"]),
        partial_credit=float(kw["partial_credit"]),
        max_keywords=int(kw["max_keywords"]),
        max_phrases=int(kw["max_phrases"]),
        min_word_length=int(kw["min_word_length"]),
        min_frequency=int(kw["min_frequency"]),
        long_word_length=int(kw["long_word_length"]),
        max_density=float(kw["max_density"]),
        min_density=float(kw["min_density"]),
        stuffing_multiplier=float(kw["stuffing_multiplier"]),
        sparse_multiplier=float(kw["sparse_multiplier"]),
        technical_term_bonus=int(kw["technical_term_bonus"]),
        action_verb_bonus=int(kw["action_verb_bonus"]),
        technical_terms=frozenset(str(t).lower() for t in kw["technical_terms"]),
        action_verbs=frozenset(str(v).lower() for v in kw["action_verbs"]),
        stop_words=frozenset(str(w).lower() for w in kw["stop_words"]),
        phrase_patterns=tuple(re.compile(p) for p in kw["phrase_patterns"]),
    )

    formatting = FormattingRules(
        max_score=float(fmt["max_score"]),
        penalties={k: float(v) for k, v in fmt["penalties"].items()},
        unprofessional_domains=frozenset(str(d).lower() for d in fmt["unprofessional_domains"]),
        min_summary_words=int(fmt["summary_words"]["min"]),
        max_summary_words=int(fmt["summary_words"]["max"]),
    )

    structure = StructureRules(
        max_score=float(st["max_score"]),
        required_sections=tuple(st["required_sections"]),
        min_experience=int(st["min_experience"]),
        min_bullets=int(st["min_bullets"]),
        min_education=int(st["min_education"]),
        min_skills=int(st["min_skills"]),
        penalties={k: float(v) for k, v in st["penalties"].items()},
    )

    suggestions = SuggestionRules(
        max_listed_keywords=int(sg.get("max_listed_keywords", 5)),
        min_skills=int(sg.get("min_skills", 5)),
    )

    return ScoringRules(keyword=keyword, formatting=formatting, structure=structure, suggestions=suggestions)


@lru_cache(maxsize=1)
def default_scoring_rules() -> ScoringRules:
    return build_scoring_rules(load_config("ats_rules"))
