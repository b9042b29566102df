#!/usr/bin/env python3
"""
Transcribe CLI - Stage 1 of call quality pipeline

Converts a recorded call to a speaker-labelled JSON transcript.

Usage:
    python transcribe.py --audio calls/call_0142.wav
    python transcribe.py --audio calls/call_0142.mp3 --output ./my_outputs/transcripts

Output:
    outputs/transcripts/{call}_transcript.json
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from callqa.transcriber import CallTranscriber, TranscriptionAuthError, TranscriptionExhausted
from callqa.transcriber.core import guess_mime_type


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description='Transcribe a recorded call to JSON',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # WAV recording
    python transcribe.py --audio calls/call_0142.wav

    # Override the detected MIME type
    python transcribe.py --audio calls/call_0142.bin --mime-type audio/mpeg

    # Custom output directory
    python transcribe.py --audio calls/call_0142.wav --output ./my_outputs
        """
    )

    parser.add_argument(
        '--audio',
        required=True,
        help='Path to call recording (.wav or .mp3)'
    )
    parser.add_argument(
        '--output',
        default='./outputs/transcripts',
        help='Output directory (default: ./outputs/transcripts)'
    )
    parser.add_argument(
        '--mime-type',
        help='Audio MIME type (default: detected from file extension)'
    )
    parser.add_argument(
        '--api-key',
        help='Deepgram API key (optional, can also use DEEPGRAM_API_KEY env var)'
    )

    args = parser.parse_args()

    # Validate audio path
    audio_path = Path(args.audio)
    if not audio_path.exists():
        print(f"ERROR: Audio file not found: {audio_path}")
        sys.exit(1)

    # Initialize transcriber
    try:
        transcriber = CallTranscriber(api_key=args.api_key)
    except ValueError as e:
        print(f"ERROR: {e}")
        print("Set DEEPGRAM_API_KEY environment variable")
        sys.exit(1)

    # Run transcription
    print(f"\n{'='*60}")
    print(f"TRANSCRIBING: {audio_path.name}")
    print(f"{'='*60}")

    mime_type = args.mime_type or guess_mime_type(audio_path)

    try:
        result = transcriber.transcribe_file(audio_path, mime_type=mime_type)
    except TranscriptionAuthError as e:
        print(f"ERROR: {e}")
        print("Check DEEPGRAM_API_KEY")
        sys.exit(1)
    except TranscriptionExhausted as e:
        print(f"ERROR: {e}")
        for strategy, reason in e.failures:
            print(f"  {strategy}: {reason}")
        sys.exit(1)

    # Save result
    output_path = transcriber.save_result(result, Path(args.output), audio_path.stem)

    # Summary
    print(f"\n{'='*60}")
    print("TRANSCRIPTION COMPLETE")
    print(f"{'='*60}")
    print(f"Output: {output_path}")
    print(f"Strategy: {result.strategy} (attempts: {', '.join(result.attempts)})")
    print(f"Words: {result.word_count}")
    print(f"Utterances: {len(result.utterances)}")

    print(f"\nReady for evaluation:")
    print(f"  python evaluate.py --transcript {output_path}")


if __name__ == "__main__":
    main()
