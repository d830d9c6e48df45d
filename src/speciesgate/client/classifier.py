"""Client for the remote animal classification model server.

Flow of a single call:
    multipart POST -> JSON decode -> confidence gate -> lowercase label

The whole call runs under an overall deadline on top of httpx's own
connect/read/write timeouts. No state survives between calls apart from the
httpx connection pool.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from speciesgate.client.errors import (
    ClassificationError,
    ClassificationTimeoutError,
    DecodeError,
    LowConfidenceError,
    TransportError,
)
from speciesgate.client.outcome import ClassificationOutcome, Failure, Label
from speciesgate.client.schemas import ClassificationRequest, ClassificationResponse

if TYPE_CHECKING:
    from types import TracebackType

    from speciesgate.config import Settings

logger = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class ClassificationClient:
    """Sends images to the model server and gates the answer on confidence."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._classify_path = settings.classify_path
        self._client = httpx.AsyncClient(
            base_url=settings.model_server_url,
            timeout=httpx.Timeout(
                connect=settings.connect_timeout,
                read=settings.read_idle_timeout,
                write=settings.response_timeout,
                pool=settings.connect_timeout,
            ),
            limits=httpx.Limits(
                max_connections=settings.max_connections,
                max_keepalive_connections=settings.max_keepalive_connections,
            ),
            transport=transport,
        )
        logger.info("Model server URL loaded: %s", settings.model_server_url)

    async def __aenter__(self) -> ClassificationClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    # -- Public API ---------------------------------------------------------

    async def classify(self, image: bytes, filename: str) -> str:
        """Classify an image and return the lowercase animal label.

        Raises:
            ValueError: If ``image`` is empty.
            LowConfidenceError: If the model is less confident than the threshold.
            ClassificationTimeoutError: If any deadline elapses.
            TransportError: On connection failures or non-2xx responses.
            DecodeError: If the response body is not the expected JSON.
        """
        request = ClassificationRequest(image=image, filename=filename)
        logger.info("Image classification request started -> endpoint: %s", self._classify_path)

        overall = self._settings.overall_timeout
        try:
            async with asyncio.timeout(overall):
                response = await self._send(request)
                return self._gate(self._decode(response))
        except TimeoutError as exc:
            error = ClassificationTimeoutError(
                f"No result within the {overall}s overall deadline (endpoint: {self._classify_path})"
            )
            self._log_failure(error)
            raise error from exc
        except LowConfidenceError:
            raise
        except ClassificationError as exc:
            self._log_failure(exc)
            raise

    async def classify_outcome(self, image: bytes, filename: str) -> ClassificationOutcome:
        """Like ``classify`` but returns ``Label`` or ``Failure`` instead of raising."""
        try:
            return Label(await self.classify(image, filename))
        except ClassificationError as exc:
            return Failure.from_error(exc)

    # -- Internal -----------------------------------------------------------

    async def _send(self, request: ClassificationRequest) -> httpx.Response:
        path = self._classify_path
        timeout = self._settings.response_timeout
        try:
            # Bounds the whole exchange, connection setup included.
            async with asyncio.timeout(timeout):
                response = await self._client.post(path, files=request.as_files())
            response.raise_for_status()
        except TimeoutError as exc:
            raise ClassificationTimeoutError(f"No response within {timeout}s (endpoint: {path})") from exc
        except httpx.TimeoutException as exc:
            raise ClassificationTimeoutError(f"Model server timed out: {_describe(exc)} (endpoint: {path})") from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Model server returned HTTP {exc.response.status_code} (endpoint: {path})"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Model server communication error: {_describe(exc)} (endpoint: {path})") from exc
        return response

    def _decode(self, response: httpx.Response) -> ClassificationResponse:
        try:
            return ClassificationResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(
                f"Unexpected response body from model server: {exc.error_count()} error(s), "
                f"first: {exc.errors()[0]['msg']} (endpoint: {self._classify_path})"
            ) from exc

    def _gate(self, decoded: ClassificationResponse) -> str:
        label = decoded.predicted_animal.lower()
        confidence = decoded.confidence

        if confidence < self._settings.confidence_threshold:
            logger.warning("[CLASSIFY FAILED] Low confidence. prediction: %s, confidence: %s", label, confidence)
            raise LowConfidenceError(label, confidence)

        logger.info("[CLASSIFY SUCCESS] prediction: %s, confidence: %s", label, confidence)
        return label

    @staticmethod
    def _log_failure(error: ClassificationError) -> None:
        logger.error("Model server communication error [%s]: %s", error.kind, error.message)
