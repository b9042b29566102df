"""
Transcript formatting - Speaker-labelled text from recognition output

Diarized mode uses the backend's utterances; non-diarized mode falls back
to alternating labels by sentence. Formatting never loses the only text
available: if nothing survives, the original transcript is returned.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence


AGENT_LABEL = 'Agent'
CUSTOMER_LABEL = 'Customer'

MIN_CONFIDENCE = 0.3  # utterances at or below this are dropped
MIN_TEXT_CHARS = 3

# Includes the Devanagari danda
_SENTENCE_SPLIT_RE = re.compile(r'[.!?।]')


@dataclass(frozen=True)
class Utterance:
    speaker: int
    text: str
    confidence: float


def speaker_label(speaker: int) -> str:
    return AGENT_LABEL if speaker == 0 else CUSTOMER_LABEL


def parse_utterances(response: Dict) -> List[Utterance]:
    """Pull utterances out of a Deepgram response dict, skipping malformed entries"""
    results = response.get('results') if isinstance(response, dict) else None
    raw = (results or {}).get('utterances') or []

    utterances = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            utterances.append(Utterance(
                speaker=int(item.get('speaker', 0)),
                text=str(item.get('transcript', '')),
                confidence=float(item.get('confidence', 0.0)),
            ))
        except (TypeError, ValueError):
            continue
    return utterances


def format_utterances(
    utterances: Sequence[Utterance],
    min_confidence: float = MIN_CONFIDENCE,
    min_chars: int = MIN_TEXT_CHARS
) -> str:
    """
    Diarized mode: one paragraph per speaker turn

    Consecutive utterances from the same speaker continue the same line.
    """
    formatted = ''
    previous_speaker = None

    for utterance in utterances:
        text = utterance.text.strip()
        if utterance.confidence <= min_confidence or len(text) < min_chars:
            continue

        if utterance.speaker != previous_speaker:
            formatted += f"\n\n{speaker_label(utterance.speaker)}: {text}"
        else:
            formatted += f" {text}"
        previous_speaker = utterance.speaker

    return formatted.strip()


def format_plain_transcript(transcript: str) -> str:
    """
    Non-diarized mode: alternate Agent/Customer by sentence index
    """
    fragments = [f.strip() for f in _SENTENCE_SPLIT_RE.split(transcript)]
    fragments = [f for f in fragments if f]

    lines = [
        f"{AGENT_LABEL if i % 2 == 0 else CUSTOMER_LABEL}: {fragment}"
        for i, fragment in enumerate(fragments)
    ]
    formatted = "\n\n".join(lines).strip()

    return formatted or transcript


def format_transcript(transcript: str, utterances: Optional[Sequence[Utterance]] = None) -> str:
    """Pick diarized mode when utterances are available and yield text"""
    if utterances:
        formatted = format_utterances(utterances)
        if formatted:
            return formatted
        print("  ⚠ No utterance passed the confidence filter, using sentence labelling")

    return format_plain_transcript(transcript)
