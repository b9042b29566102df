"""
Call Quality Taxonomies - Static keyword data

Contains:
- Binary evidence sets (one per PASS_FAIL parameter)
- Graduated keyword groups (points per group present)
- Confrontational phrase groups (etiquette penalties)
- Observation topics

Every set is bilingual: Hindi (Devanagari, plus common romanised forms)
and English. Matching is substring-based on the lower-cased transcript,
so English keywords are kept long enough not to fire inside other words.
Groups flagged 'whole_words' hold short tokens and only match standalone.
"""

# ==================== BINARY EVIDENCE ====================

BINARY_EVIDENCE = {
    'greeting': {
        'keywords': [
            'नमस्ते', 'नमस्कार', 'हेलो', 'हैलो', 'namaste',
            'good morning', 'good afternoon', 'good evening', 'hello',
            'सुप्रभात', 'शुभ दोपहर',
        ],
        'inverted': False,
        'label': 'Opening Greeting'
    },
    'call_disclaimer': {
        'keywords': [
            'permission', 'अनुमति', 'इजाज़त', 'इजाजत',
            'कुछ और', 'anything else', 'और कोई', 'कोई और सवाल',
            'कुछ और मदद', 'may i end', 'can i close',
        ],
        'inverted': False,
        'label': 'Permission Before Ending'
    },
    'correct_disposition': {
        'keywords': [
            'payment plan', 'भुगतान योजना', 'resolved', 'हल हो',
            'agreement', 'समझौता', 'settlement', 'निपटान',
            'promise to pay', 'ptp', 'callback scheduled', 'वादा',
        ],
        'inverted': False,
        'label': 'Disposition With Remark'
    },
    'call_closing': {
        'keywords': [
            'धन्यवाद', 'thank you', 'thanks', 'शुक्रिया',
            'आपका दिन शुभ हो', 'have a great day', 'have a nice day',
            'कॉल करने के लिए धन्यवाद', 'स्वागत', 'welcome',
        ],
        'inverted': False,
        'label': 'Proper Closing'
    },
    'fatal_identification': {
        'keywords': [
            'मेरा नाम', 'my name is', 'this is', 'speaking',
            'बात कर रहे हैं', 'बात कर रहा', 'बात कर रही', 'से बात',
            'बोल रहा हूँ', 'बोल रही हूँ', 'calling from',
            'collections', 'कलेक्शन',
        ],
        'inverted': False,
        'label': 'Agent/Customer Identification'
    },
    'fatal_tape_disclosure': {
        'keywords': [
            'recording', 'recorded', 'रिकॉर्ड', 'रिकॉर्डिंग', 'रिकार्ड',
            'tape', 'monitor', 'निगरानी', 'quality purpose',
        ],
        'inverted': False,
        'label': 'Recording Disclosure'
    },
    # Inverted: a match is the failing outcome
    'fatal_tone_language': {
        'keywords': [
            'stupid', 'idiot', 'damn', 'threat', 'shut up', 'nonsense',
            'मूर्ख', 'बेवकूफ', 'गधा', 'बदमाश', 'पागल', 'चुप रहो',
            'बकवास', 'उल्लू',
        ],
        'inverted': True,
        'label': 'Abusive or Threatening Language'
    },
}

# ==================== GRADUATED GROUPS ====================

GRADUATED_GROUPS = {
    'collection_urgency': [
        {
            'keywords': ['outstanding', 'overdue', 'due amount', 'बकाया', 'बाकी राशि', 'ड्यू'],
            'points': 3,
            'label': 'Outstanding Dues'
        },
        {
            'keywords': ['urgent', 'immediately', 'today itself', 'तुरंत', 'जल्दी', 'आज ही'],
            'points': 4,
            'label': 'Urgency'
        },
        {
            'keywords': ['payment', 'भुगतान', 'पेमेंट', 'किस्त'],
            'points': 3,
            'label': 'Payment Ask'
        },
        {
            'keywords': ['consequence', 'late fee', 'legal action', 'credit score', 'cibil', 'परिणाम', 'कानूनी', 'जुर्माना'],
            'points': 3,
            'label': 'Consequences'
        },
        {
            'keywords': ['deadline', 'last date', 'by tomorrow', 'समय सीमा', 'आखिरी तारीख', 'कल तक'],
            'points': 2,
            'label': 'Deadline'
        },
        {
            'keywords': ['when will you', 'how much can you', 'why have you not', 'कब तक', 'कितना दे', 'क्यों नहीं'],
            'points': 2,
            'label': 'Cross-Questioning'
        },
    ],
    'rebuttal_customer_handling': [
        {
            'keywords': ['penalty', 'जुर्माना', 'late charge', 'waive', 'माफ़', 'छूट'],
            'points': 4,
            'label': 'Penalty Discussion'
        },
        {
            'keywords': ['objection', 'आपत्ति', 'complaint', 'शिकायत'],
            'points': 3,
            'label': 'Objection Handling'
        },
        {
            'keywords': ['concern', 'चिंता', 'problem', 'परेशानी', 'समस्या'],
            'points': 3,
            'label': 'Concern Acknowledged'
        },
        {
            'keywords': ['solution', 'समाधान', 'option', 'विकल्प', 'installment', 'किस्तों में'],
            'points': 3,
            'label': 'Solution Offered'
        },
        {
            'keywords': ['address', 'संबोधित', 'clarify', 'स्पष्ट', 'explain', 'समझाता'],
            'points': 2,
            'label': 'Clarification'
        },
        {
            'keywords': ['i understand your', 'मैं समझ सकता', 'मैं समझ सकती', 'no problem', 'कोई बात नहीं'],
            'points': 2,
            'label': 'Reassurance'
        },
    ],
    'call_etiquette': [
        {
            'keywords': ['please', 'कृपया', 'प्लीज़'],
            'points': 2,
            'label': 'Politeness'
        },
        {
            'keywords': ['understand', 'समझ'],
            'points': 2,
            'label': 'Understanding'
        },
        {
            'keywords': ['help', 'मदद', 'सहायता'],
            'points': 2,
            'label': 'Helpfulness'
        },
        {
            'keywords': ['appreciate', 'सराहना', 'आभारी'],
            'points': 2,
            'label': 'Appreciation'
        },
        {
            'keywords': ['sorry', 'माफ करें', 'माफ़ कीजिए', 'क्षमा'],
            'points': 2,
            'label': 'Apology'
        },
        {
            # Short forms of address: whole words only
            'keywords': ['sir', 'madam', 'जी', 'आप'],
            'points': 1,
            'label': 'Respectful Address',
            'whole_words': True
        },
    ],
}

# ==================== CONFRONTATION PENALTIES ====================

CONFRONTATIONAL_GROUPS = [
    {
        'keywords': ['you must', 'आपको करना ही होगा', 'करना ही पड़ेगा'],
        'label': 'Demanding'
    },
    {
        'keywords': ['but you', 'लेकिन आप', 'पर आप'],
        'label': 'Blaming'
    },
]

# ==================== OBSERVATION TOPICS ====================

# Checked in this order; each matching topic contributes one sentence.
OBSERVATION_TOPICS = [
    ('payment_plan', ['payment plan', 'भुगतान योजना']),
    ('cooperation', ['cooperative', 'सहयोग']),
    ('concerns_addressed', ['concern', 'चिंता']),
    ('satisfaction', ['satisfied', 'संतुष्ट']),
]

# Both labels must be present for the speakers topic
SPEAKER_MARKERS = ('agent:', 'customer:')

