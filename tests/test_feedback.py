"""
Tests for feedback and observation synthesis
"""

import pytest
from callqa.evaluators.call_quality import RUBRIC, ScoringConfig, synthesize_feedback, synthesize_observation
from callqa.evaluators.call_quality.feedback import (
    CORRECTIVE_SENTENCES,
    FEEDBACK_CHECKLIST,
    OBSERVATION_SENTENCES,
    TIER_OPENERS
)


FULL_SCORES = {p.id: p.weight for p in RUBRIC}
ZERO_SCORES = {p.id: 0 for p in RUBRIC}


def opener(language, threshold):
    return dict(TIER_OPENERS[language])[threshold]


def scores_with(**overrides):
    scores = dict(FULL_SCORES)
    scores.update(overrides)
    return scores


class TestTiers:
    """Test the opening sentence chosen by percentage"""

    def test_full_marks(self):
        assert synthesize_feedback(FULL_SCORES, 'en') == opener('en', 80)

    def test_hindi_is_default(self):
        assert synthesize_feedback(FULL_SCORES) == opener('hi', 80)

    def test_exactly_80(self):
        # 100 - 15 - 5 = 80
        scores = scores_with(collection_urgency=0, greeting=0)
        assert synthesize_feedback(scores, 'en').startswith(opener('en', 80))

    def test_exactly_60(self):
        # 100 - 15 - 15 - 10 = 60
        scores = scores_with(fatal_tone_language=0, collection_urgency=0, correct_disposition=0)
        assert synthesize_feedback(scores, 'en').startswith(opener('en', 60))

    def test_between_40_and_60(self):
        scores = scores_with(fatal_tone_language=0, collection_urgency=0,
                             rebuttal_customer_handling=0, correct_disposition=0)
        assert synthesize_feedback(scores, 'en').startswith(opener('en', 40))

    def test_below_40(self):
        assert synthesize_feedback(ZERO_SCORES, 'en').startswith(opener('en', 0))


class TestCorrectiveSentences:
    """Test corrective sentences and their order"""

    def test_all_corrections_in_checklist_order(self):
        feedback = synthesize_feedback(ZERO_SCORES, 'en')
        positions = [feedback.index(CORRECTIVE_SENTENCES['en'][pid]) for pid in FEEDBACK_CHECKLIST]
        assert positions == sorted(positions)

    def test_greeting_correction_only_when_zero(self):
        sentence = CORRECTIVE_SENTENCES['en']['greeting']
        assert sentence in synthesize_feedback(scores_with(greeting=0), 'en')
        assert sentence not in synthesize_feedback(FULL_SCORES, 'en')

    def test_etiquette_cutoff(self):
        sentence = CORRECTIVE_SENTENCES['en']['call_etiquette']
        assert sentence in synthesize_feedback(scores_with(call_etiquette=7), 'en')
        assert sentence not in synthesize_feedback(scores_with(call_etiquette=8), 'en')

    def test_custom_cutoff(self):
        config = ScoringConfig(etiquette_feedback_cutoff=12)
        sentence = CORRECTIVE_SENTENCES['en']['call_etiquette']
        assert sentence in synthesize_feedback(scores_with(call_etiquette=10), 'en', config)

    def test_no_trailing_whitespace(self):
        feedback = synthesize_feedback(ZERO_SCORES, 'hi')
        assert feedback == feedback.rstrip()

    def test_deterministic(self):
        scores = scores_with(call_closing=0, call_etiquette=3)
        assert synthesize_feedback(scores, 'en') == synthesize_feedback(scores, 'en')

    def test_unsupported_language(self):
        with pytest.raises(ValueError):
            synthesize_feedback(FULL_SCORES, 'fr')


class TestObservation:
    """Test observation sentences"""

    def test_fallback(self):
        assert synthesize_observation("agent: hello", 'en') == OBSERVATION_SENTENCES['en']['fallback']

    def test_payment_plan_and_speakers(self):
        text = "Agent: Shall we set up a payment plan?\n\nCustomer: Yes."
        expected = (
            "A payment plan was discussed and agreed. "
            "Speaker diarization available - agent and customer identified."
        )
        assert synthesize_observation(text, 'en') == expected

    def test_speakers_need_both_labels(self):
        text = "Agent: the customer is satisfied"
        assert synthesize_observation(text, 'en') == "The call ended on a positive note."

    def test_topic_order(self):
        text = "संतुष्ट ग्राहक, सहयोग, भुगतान योजना"
        templates = OBSERVATION_SENTENCES['hi']
        expected = ". ".join([
            templates['payment_plan'],
            templates['cooperation'],
            templates['satisfaction'],
        ]) + "."
        assert synthesize_observation(text) == expected
