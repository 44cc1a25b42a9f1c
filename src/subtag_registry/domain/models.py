"""
Domain models — immutable data structures for the Language Subtag Registry.

These are pure value objects with no behavior beyond self-validation.
They represent one decoded registry file: a file date plus the records
in publication order.

All models are frozen dataclasses (immutable) following functional principles.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from typing import Any, ClassVar

from railway.result import Result
from railway.result_failures import ResultFailures

SCRIPT_CODE_LENGTH = 4

# Registry field names in publication order, paired with Record attributes.
RECORD_FIELDS: tuple[tuple[str, str], ...] = (
    ("added", "added"),
    ("comments", "comments"),
    ("deprecated", "deprecated"),
    ("description", "description"),
    ("macrolanguage", "macrolanguage"),
    ("preferred-value", "preferred_value"),
    ("prefix", "prefix"),
    ("scope", "scope"),
    ("subtag", "subtag"),
    ("suppress-script", "suppress_script"),
    ("tag", "tag"),
    ("type", "type"),
)


@dataclass(frozen=True, slots=True)
class ScriptCode:
    """
    A four-letter ISO 15924 script code, e.g. ``Latn``.

    ``ScriptCode.EMPTY`` is the absent value: it is falsy and never equal
    to a valid code. Build validated instances with ``ScriptCode.of``.
    """

    code: str = ""

    EMPTY: ClassVar[ScriptCode]

    @staticmethod
    def of(text: str, field_name: str = "suppress-script") -> Result[ScriptCode]:
        """Validate ``text`` as a 4-character ASCII script code."""
        if len(text) != SCRIPT_CODE_LENGTH or not text.isascii():
            return ResultFailures.invalid_script_code(field_name, [text])
        return Result.success(ScriptCode(text))

    def __bool__(self) -> bool:
        return self.code != ""

    def __str__(self) -> str:
        return self.code


ScriptCode.EMPTY = ScriptCode()


@dataclass(frozen=True, slots=True)
class Record:
    """
    One registry entry (a non-header block).

    ``type`` classifies the entry: language, extlang, grandfathered,
    redundant, region, script or variant. It is kept as the registry spells it.

    Multi-valued fields (``description``, ``prefix``) are tuples in source
    order; the rest hold a single value or their empty default.
    """

    added: date | None = None
    comments: str | None = None
    deprecated: date | None = None
    description: tuple[str, ...] = ()
    macrolanguage: str | None = None
    preferred_value: str | None = None
    prefix: tuple[str, ...] = ()
    scope: str | None = None
    subtag: str | None = None
    suppress_script: ScriptCode = field(default=ScriptCode.EMPTY)
    tag: str | None = None
    type: str | None = None

    def present_fields(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(registry field name, value)`` for each non-empty field, in registry order."""
        for name, attribute in RECORD_FIELDS:
            value = getattr(self, attribute)
            if value is None or value == () or value == ScriptCode.EMPTY:
                continue
            yield name, value


@dataclass(frozen=True, slots=True)
class RegistryDocument:
    """
    The complete decoded registry: the header's file date plus every record.

    Records keep the registry's publication order; nothing is sorted or deduplicated.
    """

    file_date: date
    records: tuple[Record, ...] = ()

    def count_by_type(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for record in self.records:
            key = record.type or ""
            counts[key] = counts.get(key, 0) + 1
        return counts
