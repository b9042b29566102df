"""
Transcription error taxonomy

Only TranscriptionAuthError and TranscriptionExhausted ever leave the
acquisition loop; the others are absorbed and turn into "try the next
strategy".
"""

from typing import List, Optional, Tuple


AUTH_STATUS_CODES = {401, 403}


class TranscriptionError(Exception):
    """Base class for transcription failures"""


class TranscriptionAuthError(TranscriptionError):
    """Credentials rejected by the backend. Fatal: no other strategy can fix it."""


class TranscriptionEmptyResult(TranscriptionError):
    """Backend answered but produced no usable text (or a malformed response)"""


class TranscriptionBackendError(TranscriptionError):
    """Transport or server-side failure for a single attempt"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class TranscriptionExhausted(TranscriptionError):
    """Every strategy was tried (or acquisition was cancelled) without a transcript"""

    def __init__(self, message: str, failures: Optional[List[Tuple[str, str]]] = None):
        super().__init__(message)
        self.failures = failures or []


def status_code_of(exc: BaseException) -> Optional[int]:
    """HTTP status carried by an SDK/HTTP exception, if any"""
    candidates = [
        getattr(exc, 'status', None),
        getattr(exc, 'status_code', None),
        getattr(getattr(exc, 'response', None), 'status_code', None),
    ]
    for value in candidates:
        try:
            return int(value)
        except (TypeError, ValueError):
            continue
    return None


def classify_backend_error(exc: BaseException) -> TranscriptionError:
    """Map an arbitrary backend exception onto the taxonomy"""
    if isinstance(exc, TranscriptionAuthError):
        return exc

    status = status_code_of(exc)
    if status in AUTH_STATUS_CODES:
        return TranscriptionAuthError(f"Transcription backend rejected credentials (HTTP {status})")

    if isinstance(exc, TranscriptionError):
        return exc

    return TranscriptionBackendError(f"{type(exc).__name__}: {exc}", status=status)
