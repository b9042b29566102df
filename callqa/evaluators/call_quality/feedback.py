"""
Call Quality Feedback Generation

Generates the overall feedback paragraph from validated scores and the
observation paragraph from the transcript. Both are pure functions.
"""

from typing import Dict, List, Mapping

from .config import DEFAULT_CONFIG, ScoringConfig
from .parameters import get_parameter
from .scoring import calculate_percentage
from .taxonomies import OBSERVATION_TOPICS, SPEAKER_MARKERS


# ==================== TEMPLATES ====================

TIER_OPENERS = {
    'hi': [
        (80, "उत्कृष्ट प्रदर्शन! एजेंट ने मजबूत पेशेवर कौशल का प्रदर्शन किया और सकारात्मक परिणाम प्राप्त किया।"),
        (60, "अच्छा प्रदर्शन लेकिन सुधार की गुंजाइश है। एजेंट ने कॉल को पेशेवर तरीके से संभाला लेकिन कुछ क्षेत्रों को बेहतर बनाया जा सकता है।"),
        (40, "औसत प्रदर्शन। एजेंट ने कुछ बुनियादी चरण पूरे किए लेकिन कई महत्वपूर्ण मानकों पर ध्यान देने की आवश्यकता है।"),
        (0, "प्रदर्शन में सुधार की आवश्यकता है। एजेंट को बेहतर संचार और समाधान कौशल विकसित करने पर ध्यान देना चाहिए।"),
    ],
    'en': [
        (80, "Excellent performance! The agent showed strong professional skills and achieved a positive outcome."),
        (60, "Good performance with room for improvement. The agent handled the call professionally but some areas can be strengthened."),
        (40, "Average performance. The agent completed some basic steps but several key parameters need attention."),
        (0, "Performance needs improvement. The agent should focus on developing better communication and resolution skills."),
    ],
}

CORRECTIVE_SENTENCES = {
    'hi': {
        'greeting': "उचित अभिवादन और परिचय में सुधार करें।",
        'fatal_tape_disclosure': "कॉल रिकॉर्डिंग के बारे में ग्राहक को सूचित करना आवश्यक है।",
        'call_etiquette': "ग्राहक की स्थिति के प्रति अधिक सहानुभूति और समझ दिखाएं।",
        'collection_urgency': "भुगतान की तात्कालिकता को अधिक प्रभावी रूप से संप्रेषित करें।",
        'rebuttal_customer_handling': "ग्राहक की आपत्तियों और जुर्माने से जुड़े सवालों का बेहतर समाधान करें।",
        'call_disclaimer': "कॉल समाप्त करने से पहले ग्राहक से अनुमति लें।",
        'correct_disposition': "कॉल का सही परिणाम और टिप्पणी दर्ज करें।",
        'call_closing': "कॉल के अंत में ग्राहक को उचित रूप से धन्यवाद दें।",
        'fatal_identification': "कॉल की शुरुआत में अपनी और ग्राहक की पहचान स्पष्ट करें।",
        'fatal_tone_language': "अपमानजनक या धमकी भरी भाषा का प्रयोग बिल्कुल न करें।",
    },
    'en': {
        'greeting': "Improve the opening greeting and introduction.",
        'fatal_tape_disclosure': "The customer must be informed that the call is being recorded.",
        'call_etiquette': "Show more empathy and understanding towards the customer's situation.",
        'collection_urgency': "Communicate the urgency of payment more effectively.",
        'rebuttal_customer_handling': "Handle customer objections and penalty questions more effectively.",
        'call_disclaimer': "Take the customer's permission before ending the call.",
        'correct_disposition': "Record the correct call disposition with a remark.",
        'call_closing': "Thank the customer properly at the end of the call.",
        'fatal_identification': "Clearly identify yourself and confirm the customer's identity at the start.",
        'fatal_tone_language': "Never use abusive or threatening language.",
    },
}

# Corrective sentences are appended in this order
FEEDBACK_CHECKLIST = [
    'greeting',
    'fatal_tape_disclosure',
    'call_etiquette',
    'collection_urgency',
    'rebuttal_customer_handling',
    'call_disclaimer',
    'correct_disposition',
    'call_closing',
    'fatal_identification',
    'fatal_tone_language',
]

OBSERVATION_SENTENCES = {
    'hi': {
        'payment_plan': "भुगतान योजना पर चर्चा की गई और सहमति बनी",
        'cooperation': "ग्राहक पूरी कॉल के दौरान सहयोगी रहा",
        'concerns_addressed': "ग्राहक की चिंताओं को संबोधित किया गया",
        'satisfaction': "कॉल सकारात्मक नोट पर समाप्त हुई",
        'speakers_identified': "स्पीकर डायराइज़ेशन उपलब्ध - एजेंट और ग्राहक की पहचान की गई",
        'fallback': "मानक कलेक्शन कॉल जिसमें सामान्य ग्राहक इंटरैक्शन पैटर्न देखे गए।",
    },
    'en': {
        'payment_plan': "A payment plan was discussed and agreed",
        'cooperation': "The customer remained cooperative throughout the call",
        'concerns_addressed': "The customer's concerns were addressed",
        'satisfaction': "The call ended on a positive note",
        'speakers_identified': "Speaker diarization available - agent and customer identified",
        'fallback': "Standard collection call showing typical customer interaction patterns.",
    },
}

DEFAULT_FEEDBACK = {
    'hi': "कॉल विश्लेषण डिफ़ॉल्ट स्कोरिंग पैरामीटर का उपयोग करके पूरा किया गया।",
    'en': "Call analysis completed using default scoring parameters.",
}

DEFAULT_OBSERVATION = {
    'hi': "विस्तृत विश्लेषण करने में असमर्थ। डिफ़ॉल्ट स्कोरिंग लागू की गई।",
    'en': "Unable to perform detailed analysis. Default scoring applied.",
}

FAILURE_FEEDBACK = {
    'hi': "ट्रांसक्रिप्शन त्रुटि के कारण विश्लेषण विफल रहा।",
    'en': "Analysis failed due to transcription error.",
}

FAILURE_OBSERVATION = {
    'hi': "ट्रांसक्रिप्शन विफल होने के कारण विश्लेषण पूरा नहीं हो सका।",
    'en': "Analysis could not be completed because transcription failed.",
}

LANGUAGES = tuple(TIER_OPENERS)


def _templates(table: Dict, language: str):
    if language not in table:
        raise ValueError(f"Unsupported feedback language: '{language}'. Available: {', '.join(LANGUAGES)}")
    return table[language]


def _needs_correction(parameter_id: str, score: int, config: ScoringConfig) -> bool:
    """PASS_FAIL parameters: failed. GRADUATED: below the configured cutoff."""
    param = get_parameter(parameter_id)
    if param.is_pass_fail:
        return score == 0

    cutoffs = {
        'call_etiquette': config.etiquette_feedback_cutoff,
        'collection_urgency': config.urgency_feedback_cutoff,
        'rebuttal_customer_handling': config.rebuttal_feedback_cutoff,
    }
    return score < cutoffs.get(parameter_id, param.weight)


def synthesize_feedback(
    scores: Mapping[str, int],
    language: str = 'hi',
    config: ScoringConfig = DEFAULT_CONFIG
) -> str:
    """
    Generate overall feedback from validated scores

    Args:
        scores: Validated scores for the full rubric
        language: 'hi' or 'en'
        config: Feedback cutoffs for graduated parameters

    Returns:
        Tier opener followed by corrective sentences in checklist order
    """
    percentage = calculate_percentage(scores)

    sentences = []
    for threshold, opener in _templates(TIER_OPENERS, language):
        if percentage >= threshold:
            sentences.append(opener)
            break

    corrective = _templates(CORRECTIVE_SENTENCES, language)
    for parameter_id in FEEDBACK_CHECKLIST:
        if parameter_id in scores and _needs_correction(parameter_id, scores[parameter_id], config):
            sentences.append(corrective[parameter_id])

    return " ".join(sentences).rstrip()


def synthesize_observation(text: str, language: str = 'hi') -> str:
    """
    Generate observations from topical phrases in the transcript

    Returns:
        One sentence per matching topic joined with '. ', or the fallback
    """
    templates = _templates(OBSERVATION_SENTENCES, language)
    text_lower = text.lower()

    observations: List[str] = []
    for topic, phrases in OBSERVATION_TOPICS:
        if any(p in text_lower for p in phrases):
            observations.append(templates[topic])

    if all(marker in text_lower for marker in SPEAKER_MARKERS):
        observations.append(templates['speakers_identified'])

    return ". ".join(observations) + "." if observations else templates['fallback']
