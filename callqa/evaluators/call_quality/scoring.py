"""
Call Quality Scoring - Discipline-aware validation of raw signals

Every raw signal passes through here before it reaches a result.
"""

import math
from typing import Dict, Mapping

from .parameters import RUBRIC, Discipline, UnknownParameter, get_parameter, total_weight


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def validate_score(parameter_id: str, raw_signal: float) -> int:
    """
    Clamp/quantize a raw signal to the legal range for its parameter

    - Unknown parameter: 0
    - PASS_FAIL: full weight if the signal reaches the weight, else 0
    - GRADUATED: rounded and clamped into [0, weight]
    """
    try:
        param = get_parameter(parameter_id)
    except UnknownParameter:
        return 0

    try:
        raw = float(raw_signal)
    except (TypeError, ValueError):
        return 0

    if math.isnan(raw):
        return 0

    if param.discipline is Discipline.PASS_FAIL:
        return param.weight if raw >= param.weight else 0

    clamped = min(max(raw, 0.0), float(param.weight))
    return _round_half_up(clamped)


def validate_scores(raw_signals: Mapping[str, float]) -> Dict[str, int]:
    """
    Validate a full signal vector

    Missing parameters score 0; ids outside the rubric are dropped.
    Returns: Dict of {parameter_id: score} in rubric order
    """
    return {p.id: validate_score(p.id, raw_signals.get(p.id, 0)) for p in RUBRIC}


def default_scores() -> Dict[str, int]:
    """All-zero score vector"""
    return {p.id: 0 for p in RUBRIC}


def total_score(scores: Mapping[str, int]) -> int:
    return sum(scores.values())


def calculate_percentage(scores: Mapping[str, int]) -> float:
    """100 * sum(scores) / sum(all weights)"""
    return 100 * total_score(scores) / total_weight()
