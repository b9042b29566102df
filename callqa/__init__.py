"""
callqa - Call quality evaluation for recorded collection calls

Packages:
- transcriber: audio → speaker-labelled transcript (Deepgram, ordered fallback)
- evaluators: rubric scoring, feedback and reports
"""

__version__ = '1.0.0'
