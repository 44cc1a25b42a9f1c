"""
Railway-Oriented Programming (ROP) support for the subtag registry converter.

Explicit, composable, functional error handling — no exceptions in parsing logic.

    from railway import Result, ErrorCode

    def decode_type(values: list[str]) -> Result[str]:
        if len(values) != 1:
            return Result.failure(ErrorCode.MULTIPLICITY_VIOLATION, "type must appear once")
        return Result.success(values[0])

    result = (
        Result.success(["language"])
        .flat_map(decode_type)
        .map(str.upper)
    )
"""

from railway.result import Result, Success, Failure
from railway.failure import ErrorCode, FailureDescription
from railway.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
)
from railway.result_failures import ResultFailures
from railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ResultFailures",
    "ResultAssertions",
]

__version__ = "1.0.0"
