"""
Transcriber Package

Handles call audio → speaker-labelled transcript with ordered fallback strategies.
"""

from .core import CallTranscriber, DeepgramBackend, TranscriptionResult, acquire_transcript, extract_transcript
from .errors import (
    TranscriptionError,
    TranscriptionAuthError,
    TranscriptionEmptyResult,
    TranscriptionBackendError,
    TranscriptionExhausted,
)
from .formatting import Utterance, format_transcript, format_utterances, format_plain_transcript, parse_utterances
from .strategies import TranscriptionStrategy, DEFAULT_STRATEGIES

__all__ = [
    'CallTranscriber',
    'DeepgramBackend',
    'TranscriptionResult',
    'acquire_transcript',
    'extract_transcript',
    'TranscriptionError',
    'TranscriptionAuthError',
    'TranscriptionEmptyResult',
    'TranscriptionBackendError',
    'TranscriptionExhausted',
    'Utterance',
    'format_transcript',
    'format_utterances',
    'format_plain_transcript',
    'parse_utterances',
    'TranscriptionStrategy',
    'DEFAULT_STRATEGIES',
]
