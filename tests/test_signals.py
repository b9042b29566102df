"""
Tests for signal extraction

Extractors report raw lexical evidence; range enforcement is tested in
test_scoring.py.
"""

import pytest
from callqa.evaluators.call_quality import EXTRACTORS, RUBRIC, ScoringConfig, extract_signals
from callqa.evaluators.call_quality.config import bonus_for
from callqa.evaluators.call_quality.signals import (
    binary_signal,
    call_etiquette_signal,
    collection_urgency_signal,
    has_whole_word,
    matched_evidence,
    rebuttal_handling_signal,
    scan_keyword_groups
)


class TestBinarySignals:
    """Test PASS_FAIL evidence detection"""

    def test_greeting_hindi(self):
        assert binary_signal('greeting', "agent: नमस्ते जी") == 5.0

    def test_greeting_missing(self):
        assert binary_signal('greeting', "agent: pay now") == 0.0

    def test_tape_disclosure(self):
        assert binary_signal('fatal_tape_disclosure', "यह कॉल रिकॉर्ड की जा रही है") == 10.0

    def test_tone_clean_call_passes(self):
        assert binary_signal('fatal_tone_language', "agent: thank you for your time") == 15.0

    def test_tone_abusive_call_fails(self):
        assert binary_signal('fatal_tone_language', "agent: listen you idiot") == 0.0

    def test_tone_hindi_abuse_fails(self):
        assert binary_signal('fatal_tone_language', "एजेंट: तुम पागल हो") == 0.0

    def test_disclaimer(self):
        assert binary_signal('call_disclaimer', "may i end the call?") == 5.0


class TestGraduatedSignals:
    """Test graduated extractors"""

    def test_urgency_exceeds_weight(self, good_call):
        # 17 points across six groups plus a breadth bonus of 2
        assert collection_urgency_signal(good_call.lower()) == 19.0

    def test_urgency_none(self):
        assert collection_urgency_signal("agent: hello") == 0.0

    def test_rebuttal_points(self):
        text = "i can waive the penalty. there is an installment option."
        assert rebuttal_handling_signal(text) == 7.0

    def test_etiquette_base(self):
        assert call_etiquette_signal("agent: hello") == 5.0

    def test_etiquette_penalty(self):
        assert call_etiquette_signal("you must pay now") == 3.0

    def test_etiquette_can_go_negative(self):
        config = ScoringConfig(etiquette_base=0.0)
        assert call_etiquette_signal("you must pay, but you said", config) == -4.0

    def test_etiquette_penalty_counts_groups_not_occurrences(self):
        assert call_etiquette_signal("you must. you must. you must.") == 3.0

    def test_breadth_bonus(self):
        text = "please, i understand, let me help you. sorry sir."
        # base 5 + 2+2+2+2+1 + bonus 2
        assert call_etiquette_signal(text) == 16.0


class TestExtractSignals:
    """Test the full extractor sweep"""

    def test_every_parameter_has_an_extractor(self):
        assert set(EXTRACTORS) == {p.id for p in RUBRIC}

    def test_rubric_order(self, good_call):
        assert list(extract_signals(good_call)) == [p.id for p in RUBRIC]

    def test_case_insensitive(self):
        assert extract_signals("HELLO")['greeting'] == 5.0

    def test_deterministic(self, good_call):
        assert extract_signals(good_call) == extract_signals(good_call)

    def test_bad_call(self, bad_call):
        signals = extract_signals(bad_call)
        assert signals['fatal_tone_language'] == 0.0
        assert signals['call_etiquette'] == 3.0
        assert signals['greeting'] == 0.0


class TestHelpers:
    """Test keyword scanning and bonus tiers"""

    def test_scan_keyword_groups(self):
        groups = [
            {'keywords': ['a'], 'points': 2, 'label': 'A'},
            {'keywords': ['zzz'], 'points': 5, 'label': 'Z'},
        ]
        assert scan_keyword_groups("abc", groups) == (2.0, 1, ['A'])

    @pytest.mark.parametrize('matched,expected', [(0, 0), (2, 0), (3, 1), (4, 1), (5, 2), (6, 2)])
    def test_bonus_tiers(self, matched, expected):
        assert bonus_for(((5, 2), (3, 1)), matched) == expected

    def test_matched_evidence(self):
        evidence = matched_evidence("Please pay the PENALTY immediately")
        assert evidence['call_etiquette'] == ['Politeness']
        assert evidence['rebuttal_customer_handling'] == ['Penalty Discussion']
        assert evidence['collection_urgency'] == ['Urgency']


class TestRespectfulAddress:
    """Test whole-word matching of short forms of address"""

    def test_sir_as_word(self):
        assert call_etiquette_signal("agent: yes sir, one moment") == 6.0

    def test_sir_inside_word(self):
        assert call_etiquette_signal("agent: what do you desire") == 5.0

    def test_hindi_pronoun_as_word(self):
        assert call_etiquette_signal("जी, आप कैसे हैं") == 6.0

    def test_hindi_pronoun_inside_word(self):
        assert call_etiquette_signal("आपका भुगतान बाकी है") == 5.0

    def test_ji_inside_word(self):
        assert not has_whole_word("जीवन बीमा", ['जी'])

    def test_punctuation_is_a_boundary(self):
        assert has_whole_word("thank you, sir.", ['sir'])
        assert has_whole_word("(madam)", ['madam'])

    def test_other_groups_still_substring(self):
        # 'understand' still fires inside 'understanding'
        assert call_etiquette_signal("thanks for understanding") == 7.0
