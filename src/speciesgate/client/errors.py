"""Error taxonomy for classification calls.

Only ``LowConfidenceError`` is something the end user can act on (by picking
another image). Every other kind is an infrastructure problem and shares one
generic user-facing message; the detailed ``message`` is meant for logs.
"""

from __future__ import annotations

from enum import StrEnum

SERVICE_UNAVAILABLE_MESSAGE = (
    "Cannot reach the image classification service or it returned an invalid response."
)


class ErrorKind(StrEnum):
    LOW_CONFIDENCE = "low_confidence"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    DECODE = "decode"


class ClassificationError(Exception):
    """Base class for every failure returned by ``ClassificationClient``."""

    kind: ErrorKind

    def __init__(self, message: str, user_message: str = SERVICE_UNAVAILABLE_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
        self.user_message = user_message

    @property
    def is_user_recoverable(self) -> bool:
        return self.kind is ErrorKind.LOW_CONFIDENCE


class LowConfidenceError(ClassificationError):
    """The model answered, but below the configured confidence threshold."""

    kind = ErrorKind.LOW_CONFIDENCE

    def __init__(self, label: str, confidence: float) -> None:
        self.label = label
        self.confidence = confidence
        self.confidence_percent = round(confidence * 100, 1)
        user_message = (
            f"Image classification confidence ({self.confidence_percent:.1f}%) is too low "
            "to create a character. Please try a different image."
        )
        super().__init__(
            f"Low confidence for '{label}': {self.confidence_percent:.1f}%",
            user_message=user_message,
        )


class ClassificationTimeoutError(ClassificationError):
    kind = ErrorKind.TIMEOUT


class TransportError(ClassificationError):
    kind = ErrorKind.TRANSPORT


class DecodeError(ClassificationError):
    kind = ErrorKind.DECODE
