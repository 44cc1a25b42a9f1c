"""
Failure description — structured error information for the failure track.

Every failure carries an ErrorCode, a human-readable message naming the
offending input, an optional causing exception, and a timestamp.

The registry codes split into two families:
  - Parse errors: the registry text violated its fixed schema.
  - I/O errors: the raw text could not be obtained or the output rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    """
    Structured error codes for the failure track.

    All codes are fatal for a conversion run: there is no partial result.
    """

    # --- Parse errors (registry content) ---
    MALFORMED_HEADER = "MALFORMED_HEADER"
    """First block is missing, empty, or holds anything but file-date."""

    MALFORMED_DATE = "MALFORMED_DATE"
    """Date field without exactly one YYYY-MM-DD value."""

    MULTIPLICITY_VIOLATION = "MULTIPLICITY_VIOLATION"
    """Single-valued field appeared more than once in a block."""

    INVALID_SCRIPT_CODE = "INVALID_SCRIPT_CODE"
    """Suppress-Script value is not exactly four ASCII characters."""

    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    """Field name outside the registry's closed schema."""

    # --- I/O errors (collaborators) ---
    FETCH_ERROR = "FETCH_ERROR"
    """HTTP download failed or returned a non-200 status."""

    CACHE_ERROR = "CACHE_ERROR"
    """Local cache file could not be read or written."""

    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    """Document could not be rendered to the output format."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    """System misconfiguration."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """Unexpected failure escaping an execution context."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor carrying error code, message, optional exception, and timestamp.

    >>> desc = FailureDescription(ErrorCode.UNKNOWN_FIELD, "unexpected field 'foo'")
    >>> desc.code
    <ErrorCode.UNKNOWN_FIELD: 'UNKNOWN_FIELD'>
    >>> desc.message
    "unexpected field 'foo'"
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def with_context(self, prefix: str) -> FailureDescription:
        """Return a copy whose message is prefixed, e.g. with the block position."""
        return FailureDescription(
            code=self.code,
            message=f"{prefix}: {self.message}",
            exception=self.exception,
            timestamp=self.timestamp,
        )

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
