"""
Error types raised by the service layer.

Services never raise for a missing record; absence is reported by
returning ``None``.  ``InvalidRecordError`` is the single error kind
used for writes that must be rejected before (or instead of) reaching
the database: failed validation, duplicate unique values and references
to records that do not exist.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class FieldError:
    """A single validation failure."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ComicStoreError(Exception):
    """Base class for application errors."""


class InvalidRecordError(ComicStoreError):
    """Raised when a record cannot be written.

    ``errors`` holds one ``FieldError`` per failed check.
    """

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(summary or "invalid record")
