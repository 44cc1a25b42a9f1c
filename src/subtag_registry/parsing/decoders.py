"""
Typed field decoders — raw lexed values into domain types.

Each decoder takes the field name and its raw values and returns a Result,
so a violation carries the field name and the offending values to the caller.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date

from railway.result import Result
from railway.result_failures import ResultFailures

from subtag_registry.domain.models import ScriptCode

# date.fromisoformat alone also accepts compact and week forms.
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def decode_date(field: str, values: Sequence[str]) -> Result[date]:
    """Decode a single ``YYYY-MM-DD`` value."""
    if len(values) != 1 or not DATE_PATTERN.fullmatch(values[0]):
        return ResultFailures.malformed_date(field, values)
    try:
        return Result.success(date.fromisoformat(values[0]))
    except ValueError as e:
        return ResultFailures.malformed_date(field, values, e)


def decode_string(field: str, values: Sequence[str]) -> Result[str]:
    """Pass a single value through unchanged."""
    if len(values) != 1:
        return ResultFailures.multiplicity_violation(field, values)
    return Result.success(values[0])


def decode_list(field: str, values: Sequence[str]) -> Result[tuple[str, ...]]:
    return Result.success(tuple(values))


def decode_script(field: str, values: Sequence[str]) -> Result[ScriptCode]:
    """Decode a single 4-character ASCII script code."""
    if len(values) != 1:
        return ResultFailures.invalid_script_code(field, values)
    return ScriptCode.of(values[0], field)
