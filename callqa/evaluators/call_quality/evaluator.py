"""
Call Quality Evaluator - Main evaluation class

This is the primary interface. It coordinates:
- Transcript acquisition (audio input only)
- Signal extraction
- Score validation
- Feedback and observation generation

The public operations never raise: failures come back as a result with
zeroed scores and an explanatory feedback string.
"""

import concurrent.futures
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from ...transcriber import CallTranscriber, TranscriptionAuthError, TranscriptionExhausted
from .config import DEFAULT_CONFIG, ScoringConfig
from .feedback import (
    DEFAULT_FEEDBACK, DEFAULT_OBSERVATION, FAILURE_FEEDBACK, FAILURE_OBSERVATION,
    synthesize_feedback, synthesize_observation
)
from .parameters import RUBRIC, total_weight
from .scoring import calculate_percentage, default_scores, total_score, validate_scores
from .signals import extract_signals, matched_evidence


@dataclass(frozen=True)
class EvaluationResult:
    """Complete evaluation output for one call (read-only, scores included)"""
    scores: Mapping[str, int]
    overall_feedback: str
    observation: str
    transcription: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'scores', MappingProxyType(dict(self.scores)))

    @property
    def total_score(self) -> int:
        return total_score(self.scores)

    @property
    def percentage(self) -> float:
        return calculate_percentage(self.scores)

    def to_dict(self) -> Dict:
        """Wire format consumed by the web client"""
        data = {
            'scores': dict(self.scores),
            'overallFeedback': self.overall_feedback,
            'observation': self.observation,
        }
        if self.transcription is not None:
            data['transcription'] = self.transcription
        return data


class CallQualityEvaluator:
    """
    Main evaluator class for call quality

    Usage:
        evaluator = CallQualityEvaluator()
        result = evaluator.evaluate_call(audio_bytes, 'audio/wav')
        print(result.scores['greeting'])  # 0 or 5
        print(result.overall_feedback)
    """

    def __init__(
        self,
        transcriber: Optional[CallTranscriber] = None,
        config: ScoringConfig = DEFAULT_CONFIG,
        language: str = 'hi',
        api_key: Optional[str] = None,
    ):
        self._transcriber = transcriber
        self.config = config
        self.language = language
        self.api_key = api_key

    @property
    def transcriber(self) -> CallTranscriber:
        # Built on first use so text-only evaluation needs no API key
        if self._transcriber is None:
            self._transcriber = CallTranscriber(api_key=self.api_key)
        return self._transcriber

    def evaluate(self, text: Union[str, Dict]) -> EvaluationResult:
        """
        Score an already transcribed call

        Args:
            text: Formatted transcript (string) or dict with 'transcription' key

        Returns:
            EvaluationResult with scores, feedback, observation
        """
        if isinstance(text, dict):
            text = text.get('transcription', '')

        scores, feedback, observation = self._score(text)
        return EvaluationResult(
            scores=scores,
            overall_feedback=feedback,
            observation=observation,
            transcription=text,
        )

    def evaluate_call(
        self,
        audio: bytes,
        mime_type: str = 'audio/wav',
        cancel_event: Optional[threading.Event] = None,
    ) -> EvaluationResult:
        """
        Main evaluation pipeline: audio → transcript → scores → feedback

        Args:
            audio: Raw audio bytes (type/size already validated by the caller)
            mime_type: MIME type of the audio
            cancel_event: Optional event; when set, acquisition stops before the next strategy

        Returns:
            EvaluationResult; on transcription failure all scores are 0
        """
        try:
            transcript = self.transcriber.acquire(audio, mime_type, cancel_event=cancel_event)
        except TranscriptionAuthError as e:
            print(f"  ✗ Transcription unauthorized: {e}")
            return self.failure_result(f"Authorization failed: {e}")
        except TranscriptionExhausted as e:
            print(f"  ✗ {e}")
            return self.failure_result(str(e))
        except Exception as e:
            print(f"  ✗ Transcription error: {e}")
            return self.failure_result(f"{type(e).__name__}: {e}")

        scores, feedback, observation = self._score(transcript.formatted)
        print(f"  ✓ Scored: {total_score(scores)}/{total_weight()} ({calculate_percentage(scores):.0f}%)")

        return EvaluationResult(
            scores=scores,
            overall_feedback=feedback,
            observation=observation,
            transcription=transcript.formatted,
        )

    def _score(self, text: str) -> Tuple[Dict[str, int], str, str]:
        """Signals → validation → feedback; degrades to default scoring on error"""
        try:
            signals = extract_signals(text.lower(), self.config)
            scores = validate_scores(signals)
            feedback = synthesize_feedback(scores, self.language, self.config)
            observation = synthesize_observation(text, self.language)
        except Exception as e:
            print(f"  ⚠ Scoring error ({e}), applying default scoring")
            return (
                default_scores(),
                DEFAULT_FEEDBACK.get(self.language, DEFAULT_FEEDBACK['hi']),
                DEFAULT_OBSERVATION.get(self.language, DEFAULT_OBSERVATION['hi']),
            )
        return scores, feedback, observation

    def failure_result(self, reason: str) -> EvaluationResult:
        """All-zero result for a call whose transcript could not be acquired"""
        return EvaluationResult(
            scores=default_scores(),
            overall_feedback=FAILURE_FEEDBACK.get(self.language, FAILURE_FEEDBACK['hi']),
            observation=FAILURE_OBSERVATION.get(self.language, FAILURE_OBSERVATION['hi']),
            transcription=f"Transcription failed: {reason}. Please try again with a different audio file.",
        )

    def evaluate_batch(
        self,
        calls: Mapping[str, Tuple[bytes, str]],
        max_workers: int = 4,
        timeout: Optional[float] = None,
    ) -> Dict[str, EvaluationResult]:
        """
        Evaluate several calls concurrently

        Args:
            calls: Dict of {call_name: (audio_bytes, mime_type)}
            max_workers: Thread pool size
            timeout: Deadline in seconds for the whole batch; calls still running or queued
                when it passes are cancelled and get the failure result at once

        Returns:
            Dict of {call_name: EvaluationResult} in input order
        """
        if not calls:
            return {}

        results: Dict[str, EvaluationResult] = {}
        cancel_events = {name: threading.Event() for name in calls}
        workers = max(1, min(max_workers, len(calls)))

        # Managed by hand: leaving a `with` block would join calls still in flight
        exe = concurrent.futures.ThreadPoolExecutor(max_workers=workers, thread_name_prefix="call-eval")
        try:
            futures = {
                name: exe.submit(self.evaluate_call, audio, mime_type, cancel_events[name])
                for name, (audio, mime_type) in calls.items()
            }
            # One deadline for the whole batch
            done, _ = concurrent.futures.wait(futures.values(), timeout=timeout)

            for name, future in futures.items():
                print(f"\n{'='*60}")
                print(f"Evaluating: {name}")
                print('='*60)
                if future in done:
                    results[name] = future.result()
                    continue

                cancel_events[name].set()
                future.cancel()
                print(f"  ⚠ Deadline of {timeout:.1f}s exceeded")
                results[name] = self.failure_result("Transcription cancelled: deadline exceeded")
        finally:
            exe.shutdown(wait=False)

        return results

    def generate_report(self, result: EvaluationResult, call_name: str = "Call") -> str:
        """
        Generate a formatted markdown report for a single evaluation

        Maximum scores come from the rubric, never from the result.
        """
        rows = []
        for param in RUBRIC:
            score = result.scores.get(param.id, 0)
            rows.append(f"| {param.label} | {param.discipline.value} | {score}/{param.weight} | {param.description} |")

        evidence_lines = []
        if result.transcription:
            for parameter_id, labels in matched_evidence(result.transcription).items():
                if labels:
                    evidence_lines.append(f"- **{parameter_id}:** {', '.join(labels)}")

        report = f"""
# Call Quality Report: {call_name}

**Overall Score:** {result.total_score}/{total_weight()} ({result.percentage:.0f}%)

---

## Parameter Scores

| Parameter | Type | Score | Criterion |
|-----------|------|-------|-----------|
{chr(10).join(rows)}

---

## Overall Feedback

{result.overall_feedback}

## Observation

{result.observation}
"""
        if evidence_lines:
            report += "\n## Evidence Found\n\n" + "\n".join(evidence_lines) + "\n"

        return report


def format_comparative_summary(results: Mapping[str, EvaluationResult]) -> str:
    """
    Generate comparative summary across multiple calls

    Args:
        results: Dict of {call_name: EvaluationResult}

    Returns:
        Formatted markdown summary
    """
    summary = "# Call Quality: Comparative Summary\n\n"
    summary += "| Call | Score | Percentage | Fatal Failures | Weakest Parameter |\n"
    summary += "|------|-------|------------|----------------|-------------------|\n"

    for name, result in results.items():
        fatal = [p.label for p in RUBRIC if p.id.startswith('fatal_') and result.scores.get(p.id, 0) == 0]

        # Weakest = lowest share of its own weight, first in rubric order on ties
        weakest = min(RUBRIC, key=lambda p: result.scores.get(p.id, 0) / p.weight)

        summary += (
            f"| {name} | {result.total_score}/{total_weight()} | {result.percentage:.0f}% | "
            f"{', '.join(fatal) or 'None'} | {weakest.label} |\n"
        )

    # Rubric-wide pass rates
    summary += "\n## Rubric-Wide Patterns\n\n"
    count = len(results)
    for param in RUBRIC:
        full = sum(1 for r in results.values() if r.scores.get(param.id, 0) == param.weight)
        summary += f"- **{param.label}:** full marks in {full}/{count} calls\n"

    return summary


def evaluate_call(
    audio: bytes,
    mime_type: str = 'audio/wav',
    backend=None,
    language: str = 'hi',
    config: ScoringConfig = DEFAULT_CONFIG,
) -> EvaluationResult:
    """Evaluate one call recording; never raises"""
    try:
        transcriber = CallTranscriber(backend=backend)
    except Exception as e:
        evaluator = CallQualityEvaluator(language=language, config=config)
        print(f"  ✗ Transcriber unavailable: {e}")
        return evaluator.failure_result(f"{type(e).__name__}: {e}")

    evaluator = CallQualityEvaluator(transcriber=transcriber, language=language, config=config)
    return evaluator.evaluate_call(audio, mime_type)
