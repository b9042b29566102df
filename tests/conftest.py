"""
Shared fixtures: stub transcription backends and sample calls

No test talks to the network; every backend here is an in-process stub.
"""

import threading

import pytest


GOOD_CALL = """Agent: Hello, good morning sir. My name is Priya calling from ABC Finance collections. This call is being recorded for quality purpose.

Customer: Yes, tell me.

Agent: Your payment of 5000 rupees is overdue. Please pay immediately, today itself, to avoid a late fee and legal action. The last date is tomorrow. When will you pay?

Customer: I have a concern about the penalty.

Agent: I understand your concern sir. I can waive the penalty and offer an installment option as a solution. Let me clarify and explain. I appreciate your time and I am sorry for the trouble, I am here to help.

Customer: Okay, I agree to the payment plan. I am satisfied.

Agent: Thank you. Is there anything else? May I end the call with your permission? Have a great day."""

BAD_CALL = """Agent: Listen you idiot, you must pay now.

Customer: I cannot pay."""


class HTTPStatusError(Exception):
    """Looks like an SDK/HTTP error carrying a status code"""

    def __init__(self, status_code):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


def deepgram_response(transcript='', words=None, utterances=None):
    """Minimal prerecorded-API response dict"""
    alternative = {'transcript': transcript}
    if words is not None:
        alternative['words'] = words
    results = {'channels': [{'alternatives': [alternative]}]}
    if utterances is not None:
        results['utterances'] = utterances
    return {'results': results}


class StubBackend:
    """Replays outcomes in order: dicts are returned, exceptions raised"""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def transcribe(self, audio, mime_type, options):
        self.calls.append(options)
        outcome = self.outcomes.pop(0) if self.outcomes else deepgram_response('')
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class AudioKeyedBackend:
    """Thread-safe stub: the outcome depends only on the audio bytes"""

    def __init__(self, outcomes, delay_for=None, delay=0.0):
        self.outcomes = outcomes
        self.delay_for = delay_for
        self.delay = delay
        self._lock = threading.Lock()
        self.calls = []

    def transcribe(self, audio, mime_type, options):
        with self._lock:
            self.calls.append(audio)
        if audio == self.delay_for:
            threading.Event().wait(self.delay)
        outcome = self.outcomes[audio]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def good_call():
    return GOOD_CALL


@pytest.fixture
def bad_call():
    return BAD_CALL


@pytest.fixture
def make_response():
    return deepgram_response


@pytest.fixture
def stub_backend():
    return StubBackend


@pytest.fixture
def keyed_backend():
    return AudioKeyedBackend


@pytest.fixture
def http_error():
    return HTTPStatusError


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv('DEEPGRAM_API_KEY', raising=False)
