"""Exceptions raised while turning metric payloads into tables.

Per-record errors (``RecordError`` and subclasses) are caught by the batch
orchestrator and reported; they never abort a batch. ``InvalidPayloadError``
is raised before any record is looked at.
"""

from typing import Any, Dict, Optional


class GenerationError(Exception):
    """Base exception for all generation errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidPayloadError(GenerationError, ValueError):
    """Raised when the input is not a JSON array."""

    pass


class RecordError(GenerationError):
    """Base exception for a single record that cannot be turned into a table."""

    kind = "InvalidRecord"

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context)
        self.index = index


class MalformedRecordError(RecordError):
    """Raised when an array element is not a JSON object."""

    kind = "MalformedRecord"


class MissingIdentityError(RecordError):
    """Raised when a record has no usable company_name."""

    kind = "MissingIdentity"
