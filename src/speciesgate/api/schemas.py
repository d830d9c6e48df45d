"""Pydantic response schemas for the SpeciesGate API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ClassifyResponse(BaseModel):
    """Accepted classification."""

    label: str = Field(description="Lowercase animal label")


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    kind: str | None = None


class LowConfidenceResponse(ErrorResponse):
    """Rejected classification; the user should try a different image."""

    label: str
    confidence: float = Field(description="Model confidence as a percentage, rounded to one decimal")


class HealthResponse(BaseModel):
    """Health check response."""

    model_config = ConfigDict(protected_namespaces=())

    status: str = "ok"
    model_server_url: str
    classify_path: str
    confidence_threshold: float
