"""Model server client and its result/error types."""

from __future__ import annotations

from speciesgate.client.classifier import ClassificationClient
from speciesgate.client.errors import (
    SERVICE_UNAVAILABLE_MESSAGE,
    ClassificationError,
    ClassificationTimeoutError,
    DecodeError,
    ErrorKind,
    LowConfidenceError,
    TransportError,
)
from speciesgate.client.outcome import ClassificationOutcome, Failure, Label

__all__ = [
    "SERVICE_UNAVAILABLE_MESSAGE",
    "ClassificationClient",
    "ClassificationError",
    "ClassificationOutcome",
    "ClassificationTimeoutError",
    "DecodeError",
    "ErrorKind",
    "Failure",
    "Label",
    "LowConfidenceError",
    "TransportError",
]
