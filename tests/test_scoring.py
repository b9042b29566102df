"""
Tests for score validation

Every raw signal must come out as a legal score for its parameter:
PASS_FAIL scores are 0 or the full weight, GRADUATED scores lie in
[0, weight].
"""

import pytest
from callqa.evaluators.call_quality import (
    RUBRIC,
    calculate_percentage,
    default_scores,
    validate_score,
    validate_scores
)
from callqa.evaluators.call_quality.scoring import total_score


RAW_SIGNALS = [-100, -4, -0.5, 0, 0.4, 0.5, 1, 2.5, 4.99, 5, 7.5, 9.9, 10, 14.5, 15, 19, 1000]


class TestPassFail:
    """Test PASS_FAIL quantization"""

    def test_full_weight(self):
        assert validate_score('greeting', 5) == 5

    def test_partial_is_zero(self):
        assert validate_score('greeting', 4.9) == 0

    def test_over_weight_is_full(self):
        assert validate_score('correct_disposition', 100) == 10

    def test_negative_is_zero(self):
        assert validate_score('fatal_tone_language', -1) == 0

    @pytest.mark.parametrize('param', [p for p in RUBRIC if p.is_pass_fail], ids=lambda p: p.id)
    def test_only_zero_or_weight(self, param):
        for raw in RAW_SIGNALS:
            assert validate_score(param.id, raw) in (0, param.weight)


class TestGraduated:
    """Test GRADUATED clamping and rounding"""

    def test_clamped_to_weight(self):
        assert validate_score('collection_urgency', 19) == 15

    def test_clamped_to_zero(self):
        assert validate_score('call_etiquette', -4) == 0

    @pytest.mark.parametrize('raw,expected', [(7.5, 8), (7.4, 7), (2.5, 3), (0.5, 1), (0.4, 0)])
    def test_rounds_half_up(self, raw, expected):
        assert validate_score('rebuttal_customer_handling', raw) == expected

    @pytest.mark.parametrize('param', [p for p in RUBRIC if not p.is_pass_fail], ids=lambda p: p.id)
    def test_in_range_and_monotonic(self, param):
        scores = [validate_score(param.id, raw) for raw in RAW_SIGNALS]
        assert all(0 <= s <= param.weight for s in scores)
        assert scores == sorted(scores)
        assert all(isinstance(s, int) for s in scores)


class TestInvalidInput:
    """Test inputs that resolve to zero"""

    def test_unknown_parameter(self):
        assert validate_score('upsell', 10) == 0

    @pytest.mark.parametrize('raw', [float('nan'), None, 'abc'])
    def test_non_numeric(self, raw):
        assert validate_score('collection_urgency', raw) == 0

    def test_numeric_string(self):
        assert validate_score('greeting', '5') == 5


class TestScoreVector:
    """Test whole-rubric validation and totals"""

    def test_missing_parameters_score_zero(self):
        scores = validate_scores({'greeting': 5})
        assert list(scores) == [p.id for p in RUBRIC]
        assert scores['greeting'] == 5
        assert sum(scores.values()) == 5

    def test_unknown_parameters_dropped(self):
        assert 'upsell' not in validate_scores({'upsell': 10})

    def test_default_scores(self):
        assert default_scores() == {p.id: 0 for p in RUBRIC}

    def test_percentage_identity(self):
        scores = validate_scores({p.id: p.weight for p in RUBRIC})
        assert total_score(scores) == 100
        assert calculate_percentage(scores) == 100.0

    def test_percentage_partial(self):
        scores = validate_scores({'fatal_tone_language': 15, 'call_etiquette': 12})
        assert calculate_percentage(scores) == 27.0

    def test_percentage_of_defaults(self):
        assert calculate_percentage(default_scores()) == 0.0
