"""
Call Transcriber - Transcript acquisition with ordered fallback strategies

Handles:
- Audio to text via the Deepgram prerecorded API
- Ordered strategy fallback (enhanced model -> base -> simplified -> auto language)
- Word-list reconstruction when the aggregate transcript is missing
- Authorization short-circuit (no other strategy can fix bad credentials)
- Speaker-labelled formatting of the accepted transcript

Strategies are attempted strictly one after another. A strategy only
counts as failed once its call has returned or raised.
"""

import json
import os
import threading
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .errors import (
    TranscriptionAuthError,
    TranscriptionEmptyResult,
    TranscriptionExhausted,
    classify_backend_error,
)
from .formatting import Utterance, format_transcript, parse_utterances
from .strategies import DEFAULT_STRATEGIES, TranscriptionStrategy


@dataclass
class TranscriptionResult:
    """Accepted transcript plus how it was obtained"""
    text: str
    formatted: str
    strategy: str
    utterances: List[Utterance] = field(default_factory=list)
    attempts: List[str] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.text.split())


class DeepgramBackend:
    """Thin adapter over the Deepgram SDK; returns the raw response dict"""

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key or os.environ.get("DEEPGRAM_API_KEY")
        if not self.api_key:
            raise ValueError("DEEPGRAM_API_KEY not set")

        from deepgram import DeepgramClient, DeepgramClientOptions

        self.client = DeepgramClient(self.api_key, DeepgramClientOptions(verbose=False))
        self.timeout = float(timeout or os.environ.get("DEEPGRAM_TIMEOUT", 300))

    def transcribe(self, audio: bytes, mime_type: str, options: Dict[str, Any]) -> Dict:
        """
        Send one prerecorded request

        Deepgram detects the container from the audio bytes, so the buffer
        source carries only the payload. mime_type is part of the backend
        interface (the acquisition loop reports it) and is not sent.
        """
        import httpx
        from deepgram import PrerecordedOptions

        payload = {"buffer": audio}
        response = self.client.listen.rest.v("1").transcribe_file(
            payload,
            PrerecordedOptions(**options),
            timeout=httpx.Timeout(self.timeout, connect=10.0),
        )
        return response.to_dict()


def extract_transcript(response: Dict) -> str:
    """
    Primary transcript of the first channel/alternative

    Falls back to joining the word list in order when the aggregate
    transcript is empty. Malformed responses count as empty.
    """
    try:
        alternative = response['results']['channels'][0]['alternatives'][0]
    except (KeyError, IndexError, TypeError):
        raise TranscriptionEmptyResult("Malformed response: no channel alternatives")

    if not isinstance(alternative, dict):
        raise TranscriptionEmptyResult("Malformed response: alternative is not an object")

    transcript = str(alternative.get('transcript') or '').strip()
    if transcript:
        return transcript

    words = alternative.get('words') or []
    tokens = []
    for word in words:
        if isinstance(word, dict):
            token = word.get('punctuated_word') or word.get('word') or ''
            if token:
                tokens.append(str(token))

    return ' '.join(tokens).strip()


class CallTranscriber:
    """Acquires a transcript for one call recording"""

    def __init__(
        self,
        backend=None,
        strategies: Sequence[TranscriptionStrategy] = DEFAULT_STRATEGIES,
        api_key: Optional[str] = None,
    ):
        """Initialize with a backend (defaults to Deepgram using DEEPGRAM_API_KEY)"""
        self.backend = backend or DeepgramBackend(api_key=api_key)
        self.strategies = tuple(strategies)

    def acquire(
        self,
        audio: bytes,
        mime_type: str = 'audio/wav',
        strategies: Optional[Sequence[TranscriptionStrategy]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> TranscriptionResult:
        """
        Try each strategy in order until one yields a non-empty transcript

        Args:
            audio: Raw audio bytes
            mime_type: MIME type reported by the caller
            strategies: Override the transcriber's strategy list
            cancel_event: Set by the caller to abandon acquisition between attempts

        Returns:
            TranscriptionResult for the first successful strategy

        Raises:
            TranscriptionAuthError: credentials rejected (no further attempts)
            TranscriptionExhausted: every strategy failed, or cancelled
        """
        strategies = tuple(strategies) if strategies is not None else self.strategies
        if not strategies:
            raise TranscriptionExhausted("No transcription strategies configured")

        attempts: List[str] = []
        failures = []

        print(f"  Audio: {len(audio) / 1024 / 1024:.2f} MB ({mime_type})")

        for strategy in strategies:
            if cancel_event is not None and cancel_event.is_set():
                print("  ⚠ Transcription cancelled by caller")
                raise TranscriptionExhausted("Transcription cancelled", failures)

            attempts.append(strategy.name)
            print(f"  → Trying strategy '{strategy.name}'...")

            try:
                response = self.backend.transcribe(audio, mime_type, dict(strategy.options))
                text = extract_transcript(response)
                if not text:
                    raise TranscriptionEmptyResult("Empty transcript")
            except Exception as e:
                error = classify_backend_error(e)
                if isinstance(error, TranscriptionAuthError):
                    print(f"  ✗ {error} - aborting")
                    if error is e:
                        raise
                    raise error from e
                print(f"  ⚠ Strategy '{strategy.name}' failed: {error}")
                failures.append((strategy.name, str(error)))
                continue

            utterances = parse_utterances(response)
            formatted = format_transcript(text, utterances)

            print(f"  ✓ Transcript accepted from '{strategy.name}' ({len(text)} characters)")
            if utterances:
                print(f"  ✓ Speaker diarization: {len(utterances)} utterances")

            return TranscriptionResult(
                text=text,
                formatted=formatted,
                strategy=strategy.name,
                utterances=utterances,
                attempts=attempts,
            )

        raise TranscriptionExhausted(
            f"All {len(strategies)} transcription strategies failed",
            failures,
        )

    def transcribe_file(self, audio_path: str, mime_type: Optional[str] = None, **kwargs) -> TranscriptionResult:
        """Read an audio file and acquire its transcript"""
        path = Path(audio_path)
        with open(path, 'rb') as f:
            audio = f.read()
        return self.acquire(audio, mime_type or guess_mime_type(path), **kwargs)

    def save_result(self, result: TranscriptionResult, output_dir: Path, name: str) -> Path:
        """Save transcript JSON as <name>_transcript.json"""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        output_path = output_dir / f"{name.replace(' ', '_')}_transcript.json"
        data = asdict(result)
        data['transcription'] = result.formatted
        data['word_count'] = result.word_count

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return output_path


def guess_mime_type(path: Path) -> str:
    media_types = {
        '.mp3': 'audio/mpeg',
        '.wav': 'audio/wav',
    }
    return media_types.get(Path(path).suffix.lower(), 'application/octet-stream')


def acquire_transcript(
    audio: bytes,
    strategies: Sequence[TranscriptionStrategy] = DEFAULT_STRATEGIES,
    backend=None,
    mime_type: str = 'audio/wav',
) -> str:
    """Accepted (unformatted) transcript text for the audio"""
    transcriber = CallTranscriber(backend=backend, strategies=strategies)
    return transcriber.acquire(audio, mime_type).text
