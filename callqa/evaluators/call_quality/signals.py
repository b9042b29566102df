"""
Call Quality Signals - One raw signal per rubric parameter

Extractors only look for lexical evidence. They never clamp: a graduated
signal may exceed the parameter's weight or drop below zero, and it is the
validator's job to bring it back into range.
"""

import re
from typing import Callable, Dict, Iterable, List, Mapping, Tuple

from .config import DEFAULT_CONFIG, ScoringConfig, bonus_for
from .parameters import RUBRIC, get_parameter
from .taxonomies import BINARY_EVIDENCE, CONFRONTATIONAL_GROUPS, GRADUATED_GROUPS


Extractor = Callable[[str, ScoringConfig], float]

# Latin word characters plus the whole Devanagari block (vowel signs included)
_WORD_CHARS = r"\w\u0900-\u097F"


def has_any_keyword(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def has_whole_word(text: str, keywords: Iterable[str]) -> bool:
    """Keyword match that may not sit inside a longer word ('sir' vs 'desire')"""
    return any(
        re.search(rf"(?<![{_WORD_CHARS}]){re.escape(k)}(?![{_WORD_CHARS}])", text)
        for k in keywords
    )


def scan_keyword_groups(text: str, groups: List[Mapping]) -> Tuple[float, int, List[str]]:
    """
    Shared scanning routine for weighted keyword groups

    Returns: (points, matched_group_count, matched_labels)
    """
    points = 0.0
    matched = 0
    labels = []

    for group in groups:
        matches = has_whole_word if group.get('whole_words') else has_any_keyword
        if matches(text, group['keywords']):
            points += group.get('points', 0)
            matched += 1
            labels.append(group['label'])

    return points, matched, labels


# ==================== BINARY EVIDENCE ====================

def binary_signal(parameter_id: str, text: str) -> float:
    """Full weight when evidence is found, else 0 (reversed for inverted sets)"""
    weight = get_parameter(parameter_id).weight
    evidence = BINARY_EVIDENCE[parameter_id]
    found = has_any_keyword(text, evidence['keywords'])

    if evidence['inverted']:
        found = not found

    return float(weight) if found else 0.0


# ==================== GRADUATED ====================

def graduated_signal(
    parameter_id: str,
    text: str,
    base: float,
    bonus_tiers,
    penalty: float = 0.0,
    penalty_groups: List[Mapping] = (),
) -> float:
    points, matched, _ = scan_keyword_groups(text, GRADUATED_GROUPS[parameter_id])
    _, confrontations, _ = scan_keyword_groups(text, list(penalty_groups))

    return base + points + bonus_for(bonus_tiers, matched) - penalty * confrontations


def collection_urgency_signal(text: str, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    return graduated_signal(
        'collection_urgency', text,
        base=config.urgency_base,
        bonus_tiers=config.urgency_bonus_tiers,
    )


def rebuttal_handling_signal(text: str, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    return graduated_signal(
        'rebuttal_customer_handling', text,
        base=config.rebuttal_base,
        bonus_tiers=config.rebuttal_bonus_tiers,
    )


def call_etiquette_signal(text: str, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    """Starts from a professionalism base; confrontational phrasing costs points"""
    return graduated_signal(
        'call_etiquette', text,
        base=config.etiquette_base,
        bonus_tiers=config.etiquette_bonus_tiers,
        penalty=config.confrontation_penalty,
        penalty_groups=CONFRONTATIONAL_GROUPS,
    )


def _binary_extractor(parameter_id: str) -> Extractor:
    def extract(text: str, config: ScoringConfig = DEFAULT_CONFIG) -> float:
        return binary_signal(parameter_id, text)
    extract.__name__ = f"{parameter_id}_signal"
    return extract


# Registry: parameter id -> extractor
EXTRACTORS: Dict[str, Extractor] = {
    'collection_urgency': collection_urgency_signal,
    'rebuttal_customer_handling': rebuttal_handling_signal,
    'call_etiquette': call_etiquette_signal,
}
EXTRACTORS.update({pid: _binary_extractor(pid) for pid in BINARY_EVIDENCE})


def extract_signals(text: str, config: ScoringConfig = DEFAULT_CONFIG) -> Dict[str, float]:
    """
    Run every extractor on the transcript

    Args:
        text: Formatted transcript (lower-cased here if the caller did not)
        config: Scoring tunables

    Returns:
        Dict of {parameter_id: raw_signal} in rubric order
    """
    text_lower = text.lower()
    return {p.id: EXTRACTORS[p.id](text_lower, config) for p in RUBRIC}


def matched_evidence(text: str) -> Dict[str, List[str]]:
    """Labels of the keyword groups found, per graduated parameter"""
    text_lower = text.lower()
    evidence = {}
    for parameter_id, groups in GRADUATED_GROUPS.items():
        _, _, labels = scan_keyword_groups(text_lower, groups)
        evidence[parameter_id] = labels
    return evidence
