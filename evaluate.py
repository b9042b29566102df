#!/usr/bin/env python3
"""
Evaluate CLI - Stage 2 of call quality pipeline

Scores a call against the quality rubric and generates a report.
Accepts either a saved transcript JSON or the call recording itself.

Usage:
    python evaluate.py --transcript outputs/transcripts/call_0142_transcript.json
    python evaluate.py --audio calls/call_0142.wav --language en

Output:
    outputs/evaluations/{call}_{evaluator}_evaluation.json
    outputs/reports/{call}_{evaluator}_report.md
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from callqa.evaluators import get_evaluator, list_evaluators
from callqa.evaluators.call_quality.feedback import LANGUAGES
from callqa.evaluators.call_quality.parameters import total_weight
from callqa.transcriber.core import guess_mime_type


def _call_name(path: Path) -> str:
    stem = path.stem
    if stem.endswith('_transcript'):
        stem = stem[:-len('_transcript')]
    return stem.replace(' ', '_')


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description='Evaluate a call against the quality rubric',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available evaluators: {', '.join(list_evaluators())}

Examples:
    # Evaluate a saved transcript
    python evaluate.py --transcript outputs/transcripts/call_0142_transcript.json

    # Transcribe and evaluate in one go
    python evaluate.py --audio calls/call_0142.wav

    # English feedback
    python evaluate.py --transcript transcript.json --language en

    # Custom output directory
    python evaluate.py --transcript transcript.json --output ./my_outputs
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--transcript',
        help='Path to transcript JSON file'
    )
    source.add_argument(
        '--audio',
        help='Path to call recording (.wav or .mp3)'
    )
    parser.add_argument(
        '--evaluator',
        default='call_quality',
        choices=list_evaluators(),
        help=f'Evaluator to use: {", ".join(list_evaluators())} (default: call_quality)'
    )
    parser.add_argument(
        '--language',
        default='hi',
        choices=LANGUAGES,
        help='Feedback language (default: hi)'
    )
    parser.add_argument(
        '--output',
        default='./outputs',
        help='Output directory base (default: ./outputs)'
    )
    parser.add_argument(
        '--api-key',
        help='Deepgram API key (optional, can also use DEEPGRAM_API_KEY env var)'
    )

    args = parser.parse_args()

    source_path = Path(args.transcript or args.audio)
    if not source_path.exists():
        kind = 'Transcript' if args.transcript else 'Audio file'
        print(f"ERROR: {kind} not found: {source_path}")
        sys.exit(1)

    call_name = _call_name(source_path)
    EvaluatorClass = get_evaluator(args.evaluator)
    evaluator = EvaluatorClass(language=args.language, api_key=args.api_key)

    if args.transcript:
        print(f"\n{'='*60}")
        print(f"LOADING TRANSCRIPT")
        print(f"{'='*60}")

        with open(source_path, 'r', encoding='utf-8') as f:
            transcript_data = json.load(f)

        transcription = transcript_data.get('transcription', '')
        print(f"Call: {call_name}")
        print(f"Words: {len(transcription.split())}")

        print(f"\n{'='*60}")
        print(f"EVALUATING with {args.evaluator.upper()}")
        print(f"{'='*60}")

        result = evaluator.evaluate(transcript_data)
    else:
        # Fail early on a missing key rather than inside the pipeline
        try:
            evaluator.transcriber
        except ValueError as e:
            print(f"ERROR: {e}")
            print("Set DEEPGRAM_API_KEY environment variable")
            sys.exit(1)

        print(f"\n{'='*60}")
        print(f"TRANSCRIBING + EVALUATING: {source_path.name}")
        print(f"{'='*60}")

        with open(source_path, 'rb') as f:
            audio = f.read()

        result = evaluator.evaluate_call(audio, guess_mime_type(source_path))

    # Print scores
    print(f"\n✓ Evaluation complete")
    for parameter_id, score in result.scores.items():
        print(f"  {parameter_id}: {score}")
    print(f"  Overall: {result.total_score}/{total_weight()} ({result.percentage:.0f}%)")

    # Save evaluation
    output_base = Path(args.output)
    eval_dir = output_base / "evaluations"
    report_dir = output_base / "reports"
    eval_dir.mkdir(parents=True, exist_ok=True)
    report_dir.mkdir(parents=True, exist_ok=True)

    eval_path = eval_dir / f"{call_name}_{args.evaluator}_evaluation.json"
    eval_data = {
        'call': call_name,
        'evaluator': args.evaluator,
        'language': args.language,
        'totalScore': result.total_score,
        'percentage': round(result.percentage, 1),
        **result.to_dict(),
    }

    with open(eval_path, 'w', encoding='utf-8') as f:
        json.dump(eval_data, f, indent=2, ensure_ascii=False)

    # Save report
    report_path = report_dir / f"{call_name}_{args.evaluator}_report.md"
    with open(report_path, 'w', encoding='utf-8') as f:
        f.write(evaluator.generate_report(result, call_name))

    # Summary
    print(f"\n{'='*60}")
    print("EVALUATION COMPLETE")
    print(f"{'='*60}")
    print(f"Evaluation: {eval_path}")
    print(f"Report: {report_path}")


if __name__ == "__main__":
    main()
