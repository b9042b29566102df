"""
Call Quality Parameters - The scoring rubric

Single source of truth for every parameter's weight and discipline.
Extractors, the validator, feedback and reports all read from here;
nothing else may carry weight literals.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple


class Discipline(str, Enum):
    """How a parameter's raw signal is turned into a score"""
    PASS_FAIL = 'PASS_FAIL'    # 0 or full weight, no partial credit
    GRADUATED = 'GRADUATED'    # any integer in [0, weight]


class UnknownParameter(KeyError):
    """Raised when a parameter id is not in the rubric"""


@dataclass(frozen=True)
class ScoringParameter:
    id: str
    discipline: Discipline
    weight: int
    description: str
    label: str = ''

    def __post_init__(self):
        if self.weight <= 0:
            raise ValueError(f"Parameter '{self.id}' must have a positive weight")

    @property
    def is_pass_fail(self) -> bool:
        return self.discipline is Discipline.PASS_FAIL


# ==================== RUBRIC ====================

RUBRIC: Tuple[ScoringParameter, ...] = (
    ScoringParameter('greeting', Discipline.PASS_FAIL, 5,
                     'Call opening within 5 seconds', 'Greeting'),
    ScoringParameter('collection_urgency', Discipline.GRADUATED, 15,
                     'Create urgency, cross-questioning', 'Collection Urgency'),
    ScoringParameter('rebuttal_customer_handling', Discipline.GRADUATED, 15,
                     'Address penalties, objections', 'Rebuttal / Customer Handling'),
    ScoringParameter('call_etiquette', Discipline.GRADUATED, 15,
                     'Tone, empathy, clear speech', 'Call Etiquette'),
    ScoringParameter('call_disclaimer', Discipline.PASS_FAIL, 5,
                     'Take permission before ending', 'Call Disclaimer'),
    ScoringParameter('correct_disposition', Discipline.PASS_FAIL, 10,
                     'Use correct category with remark', 'Correct Disposition'),
    ScoringParameter('call_closing', Discipline.PASS_FAIL, 5,
                     'Thank the customer properly', 'Call Closing'),
    ScoringParameter('fatal_identification', Discipline.PASS_FAIL, 5,
                     'Missing agent/customer info', 'Fatal: Identification'),
    ScoringParameter('fatal_tape_disclosure', Discipline.PASS_FAIL, 10,
                     'Inform customer about recording', 'Fatal: Tape Disclosure'),
    ScoringParameter('fatal_tone_language', Discipline.PASS_FAIL, 15,
                     'No abusive or threatening speech', 'Fatal: Tone & Language'),
)

_BY_ID: Dict[str, ScoringParameter] = {p.id: p for p in RUBRIC}

if len(_BY_ID) != len(RUBRIC):
    raise RuntimeError("Duplicate parameter id in rubric")


def get_parameter(parameter_id: str) -> ScoringParameter:
    """Look up a parameter by id"""
    try:
        return _BY_ID[parameter_id]
    except KeyError:
        raise UnknownParameter(parameter_id) from None


def list_parameters() -> List[ScoringParameter]:
    """All parameters in rubric order"""
    return list(RUBRIC)


def parameter_ids() -> List[str]:
    return [p.id for p in RUBRIC]


def total_weight() -> int:
    """Denominator for every percentage computation"""
    return sum(p.weight for p in RUBRIC)
