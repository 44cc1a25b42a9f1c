"""
Convenience factory methods for registry failures.

One factory per parse ErrorCode plus startup configuration, so call sites
read as the condition they report and every parse message follows the same
"field + offending values" shape.
Adapter I/O failures come from Result.from_computation at the boundary.

Usage:
    from railway.result_failures import ResultFailures

    # Instead of:
    Result.failure(ErrorCode.UNKNOWN_FIELD, "unexpected field 'foo' with values ['x']")

    # Write:
    ResultFailures.unknown_field("foo", ["x"])
"""

from __future__ import annotations

from collections.abc import Sequence

from railway.failure import ErrorCode
from railway.result import Result


class ResultFailures:
    """Factory methods for the registry failure taxonomy."""

    # ──────────────────────── Parse errors ────────────────────────

    @staticmethod
    def malformed_header(message: str) -> Result:
        """First block is not a lone file-date block."""
        return Result.failure(ErrorCode.MALFORMED_HEADER, message)

    @staticmethod
    def malformed_date(
        field: str,
        values: Sequence[str],
        exception: BaseException | None = None,
    ) -> Result:
        """Date field without exactly one YYYY-MM-DD value."""
        return Result.failure(
            ErrorCode.MALFORMED_DATE,
            f"field {field!r} expects one YYYY-MM-DD date, got {list(values)!r}",
            exception,
        )

    @staticmethod
    def multiplicity_violation(field: str, values: Sequence[str]) -> Result:
        """Single-valued field with a count other than one."""
        return Result.failure(
            ErrorCode.MULTIPLICITY_VIOLATION,
            f"field {field!r} expects exactly 1 value, got {len(values)}: {list(values)!r}",
        )

    @staticmethod
    def invalid_script_code(field: str, values: Sequence[str]) -> Result:
        """Script code is not a single 4-character ASCII value."""
        return Result.failure(
            ErrorCode.INVALID_SCRIPT_CODE,
            f"field {field!r} expects one 4-character ASCII script code, got {list(values)!r}",
        )

    @staticmethod
    def unknown_field(field: str, values: Sequence[str]) -> Result:
        """Field name outside the registry schema."""
        return Result.failure(
            ErrorCode.UNKNOWN_FIELD,
            f"unexpected field {field!r} with values {list(values)!r}",
        )

    # ──────────────────────── Startup errors ────────────────────────

    @staticmethod
    def configuration_error(message: str, exception: BaseException | None = None) -> Result:
        """Settings could not be loaded or failed validation."""
        return Result.failure(ErrorCode.CONFIGURATION_ERROR, message, exception)
