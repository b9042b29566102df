"""
Call Quality Evaluator Package v1.0

Rubric-based scoring of recorded collection calls.

Assesses ten parameters:
- Greeting, disclaimer, disposition and closing (pass/fail)
- Collection urgency, rebuttal handling and call etiquette (graduated)
- Fatal identification, tape disclosure and tone/language (pass/fail)

Usage:
    from callqa.evaluators.call_quality import CallQualityEvaluator

    evaluator = CallQualityEvaluator()
    result = evaluator.evaluate_call(audio_bytes, 'audio/wav')

    print(result.scores['fatal_tone_language'])  # 0 or 15
    print(result.percentage)
    print(result.overall_feedback)
"""

from .config import DEFAULT_CONFIG, ScoringConfig
from .evaluator import (
    CallQualityEvaluator,
    EvaluationResult,
    evaluate_call,
    format_comparative_summary
)
from .feedback import synthesize_feedback, synthesize_observation
from .parameters import (
    RUBRIC,
    Discipline,
    ScoringParameter,
    UnknownParameter,
    get_parameter,
    list_parameters,
    total_weight
)
from .scoring import calculate_percentage, default_scores, validate_score, validate_scores
from .signals import EXTRACTORS, extract_signals

__version__ = '1.0.0'

__all__ = [
    'CallQualityEvaluator',
    'EvaluationResult',
    'evaluate_call',
    'format_comparative_summary',
    'ScoringConfig',
    'DEFAULT_CONFIG',
    'RUBRIC',
    'Discipline',
    'ScoringParameter',
    'UnknownParameter',
    'get_parameter',
    'list_parameters',
    'total_weight',
    'validate_score',
    'validate_scores',
    'default_scores',
    'calculate_percentage',
    'EXTRACTORS',
    'extract_signals',
    'synthesize_feedback',
    'synthesize_observation',
]
