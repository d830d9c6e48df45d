"""Wire types exchanged with the model server."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class ClassificationRequest:
    """Image payload for a single classification call."""

    image: bytes
    filename: str
    content_type: str = ""

    def __post_init__(self) -> None:
        if not self.image:
            raise ValueError("Image payload must not be empty")
        if not self.content_type:
            guessed, _ = mimetypes.guess_type(self.filename)
            object.__setattr__(self, "content_type", guessed or DEFAULT_CONTENT_TYPE)

    def as_files(self) -> dict[str, tuple[str, bytes, str]]:
        """Return the multipart ``files`` mapping with a single ``file`` part."""
        return {"file": (self.filename, self.image, self.content_type)}


class ClassificationResponse(BaseModel):
    """Decoded model server answer. Unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True, str_strip_whitespace=True)

    status: str | None = None
    predicted_animal: str = Field(min_length=1)
    confidence: float = Field(ge=0.0, le=1.0)
