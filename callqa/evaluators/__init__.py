"""
Evaluator registry for callqa

Keys are the names accepted by `evaluate.py --evaluator`. Every evaluator
class takes `language` and `api_key` keyword arguments and exposes
evaluate / evaluate_call / generate_report.
"""

from .call_quality import CallQualityEvaluator

EVALUATORS = {
    'call_quality': CallQualityEvaluator,
}


def get_evaluator(name: str):
    """Evaluator class registered under name"""
    try:
        return EVALUATORS[name]
    except KeyError:
        available = ', '.join(sorted(EVALUATORS))
        raise ValueError(f"Unknown evaluator: '{name}'. Available: {available}") from None


def list_evaluators():
    return sorted(EVALUATORS)


__all__ = ['EVALUATORS', 'get_evaluator', 'list_evaluators']
