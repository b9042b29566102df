from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


BonusTiers = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class ScoringConfig:
    """
    Tunables for the call quality engine.

    Notes:
    - bonus tiers are (min_matched_groups, bonus) pairs, highest first;
      only the first tier crossed applies
    - penalties are subtracted once per confrontational group present
    - feedback cutoffs gate the corrective sentences for graduated parameters
    """

    # Graduated extractors
    urgency_base: float = 0.0
    rebuttal_base: float = 0.0
    etiquette_base: float = 5.0  # default professionalism

    urgency_bonus_tiers: BonusTiers = ((5, 2), (3, 1))
    rebuttal_bonus_tiers: BonusTiers = ((5, 2), (3, 1))
    etiquette_bonus_tiers: BonusTiers = ((4, 2), (3, 1))

    confrontation_penalty: float = 2.0

    # Feedback
    etiquette_feedback_cutoff: int = 8
    urgency_feedback_cutoff: int = 8
    rebuttal_feedback_cutoff: int = 8


DEFAULT_CONFIG = ScoringConfig()


def bonus_for(tiers: BonusTiers, matched_groups: int) -> int:
    for threshold, bonus in tiers:
        if matched_groups >= threshold:
            return bonus
    return 0
