from enum import Enum
from typing import Optional

from fastapi import status
from openai import AuthenticationError, InternalServerError, RateLimitError


class TTSError(Exception):
    """Terminal failure for a single synthesis request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(TTSError):
    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamAuthError(TTSError):
    status_code = status.HTTP_401_UNAUTHORIZED


class UpstreamRateLimitError(TTSError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS


class UpstreamUnavailableError(TTSError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class UnknownError(TTSError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamFailure(Enum):
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


_FAILURES: dict[UpstreamFailure, tuple[type[TTSError], str]] = {
    UpstreamFailure.UNAUTHORIZED: (
        UpstreamAuthError,
        "Invalid API key. Check your OpenAI configuration.",
    ),
    UpstreamFailure.RATE_LIMITED: (
        UpstreamRateLimitError,
        "Rate limited by OpenAI. Please try again in a moment.",
    ),
    UpstreamFailure.UNAVAILABLE: (
        UpstreamUnavailableError,
        "OpenAI service is currently unavailable. Please try again.",
    ),
    UpstreamFailure.UNKNOWN: (
        UnknownError,
        "Failed to generate audio. Please try again.",
    ),
}


def classify(exc: BaseException) -> UpstreamFailure:
    if isinstance(exc, AuthenticationError):
        return UpstreamFailure.UNAUTHORIZED
    if isinstance(exc, RateLimitError):
        return UpstreamFailure.RATE_LIMITED
    if isinstance(exc, InternalServerError):
        return UpstreamFailure.UNAVAILABLE
    return UpstreamFailure.UNKNOWN


def to_tts_error(exc: BaseException, include_details: bool = False) -> TTSError:
    """Translate a provider exception into the client-facing error."""
    failure = classify(exc)
    error_cls, message = _FAILURES[failure]
    details = str(exc) if include_details and failure is UpstreamFailure.UNKNOWN else None
    return error_cls(message, details=details)
