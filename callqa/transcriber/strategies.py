"""
Transcription strategies - Ordered Deepgram configurations

Tried top to bottom until one yields text.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class TranscriptionStrategy:
    name: str
    options: Dict[str, Any] = field(default_factory=dict)


DEFAULT_STRATEGIES: Tuple[TranscriptionStrategy, ...] = (
    TranscriptionStrategy('nova2_enhanced', {
        'model': 'nova-2',
        'language': 'hi',
        'smart_format': True,
        'punctuate': True,
        'diarize': True,
        'utterances': True,
    }),
    TranscriptionStrategy('nova2_base', {
        'model': 'nova-2-general',
        'language': 'hi',
        'punctuate': True,
        'diarize': True,
        'utterances': True,
    }),
    TranscriptionStrategy('base_simplified', {
        'model': 'base',
        'language': 'hi',
        'punctuate': True,
    }),
    TranscriptionStrategy('auto_detect_language', {
        'model': 'nova-2',
        'detect_language': True,
        'punctuate': True,
        'utterances': True,
    }),
)


def get_strategy(name: str) -> TranscriptionStrategy:
    for strategy in DEFAULT_STRATEGIES:
        if strategy.name == name:
            return strategy
    available = ', '.join(s.name for s in DEFAULT_STRATEGIES)
    raise ValueError(f"Unknown strategy: '{name}'. Available: {available}")
