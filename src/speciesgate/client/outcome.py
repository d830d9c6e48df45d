"""Result-type view of a classification call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from speciesgate.client.errors import ClassificationError, ErrorKind


@dataclass(frozen=True)
class Label:
    """An accepted, lowercase species label."""

    label: str


@dataclass(frozen=True)
class Failure:
    """A typed classification failure."""

    kind: ErrorKind
    message: str
    user_message: str

    @classmethod
    def from_error(cls, error: ClassificationError) -> Failure:
        return cls(kind=error.kind, message=error.message, user_message=error.user_message)


ClassificationOutcome = Label | Failure
