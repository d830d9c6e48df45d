"""API route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, UploadFile, status
from fastapi.responses import JSONResponse

from speciesgate.api.dependencies import ClassifierDep, SettingsDep, require_classify_key
from speciesgate.api.schemas import (
    ClassifyResponse,
    ErrorResponse,
    HealthResponse,
    LowConfidenceResponse,
)
from speciesgate.client.errors import (
    SERVICE_UNAVAILABLE_MESSAGE,
    ClassificationError,
    LowConfidenceError,
)

router = APIRouter(prefix="/api/v1")

DEFAULT_FILENAME = "upload"


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


@router.post(
    "/classify",
    response_model=ClassifyResponse,
    dependencies=[Depends(require_classify_key)],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": LowConfidenceResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
    },
    summary="Classify the animal in an image",
)
async def classify(
    file: UploadFile,
    settings: SettingsDep,
    classifier: ClassifierDep,
) -> ClassifyResponse | JSONResponse:
    """Forward an uploaded image to the model server and return the accepted label."""
    image = await file.read(settings.max_file_size + 1)
    if not image:
        return _error(status.HTTP_400_BAD_REQUEST, "Uploaded file is empty")
    if len(image) > settings.max_file_size:
        return _error(
            413,
            f"Uploaded file exceeds {settings.max_file_size} bytes",
        )

    try:
        label = await classifier.classify(image, file.filename or DEFAULT_FILENAME)
    except LowConfidenceError as exc:
        body = LowConfidenceResponse(
            detail=exc.user_message,
            kind=exc.kind.value,
            label=exc.label,
            confidence=exc.confidence_percent,
        )
        return JSONResponse(status_code=422, content=body.model_dump())
    except ClassificationError as exc:
        body = ErrorResponse(detail=SERVICE_UNAVAILABLE_MESSAGE, kind=exc.kind.value)
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body.model_dump())

    return ClassifyResponse(label=label)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health(settings: SettingsDep) -> HealthResponse:
    """Return service health status and the active model server settings."""
    return HealthResponse(
        status="ok",
        model_server_url=settings.model_server_url,
        classify_path=settings.classify_path,
        confidence_threshold=settings.confidence_threshold,
    )
