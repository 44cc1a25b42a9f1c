"""
Record parser — lexed fields into a typed Record or header date.

Dispatch is a closed mapping from registry field name to the Record attribute
it fills and the decoder that produces its value. A name missing from the
mapping is an UNKNOWN_FIELD failure: the registry schema is fixed, and a new
field means the parser must be updated.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import date
from typing import Any

from railway.result import Result
from railway.result_failures import ResultFailures

from subtag_registry.domain.models import Record
from subtag_registry.parsing.decoders import (
    decode_date,
    decode_list,
    decode_script,
    decode_string,
)
from subtag_registry.parsing.lexer import lex_block

type Decoder = Callable[[str, Sequence[str]], Result[Any]]

FILE_DATE = "file-date"

FIELD_DECODERS: dict[str, tuple[str, Decoder]] = {
    "added": ("added", decode_date),
    "comments": ("comments", decode_string),
    "deprecated": ("deprecated", decode_date),
    "description": ("description", decode_list),
    "macrolanguage": ("macrolanguage", decode_string),
    "preferred-value": ("preferred_value", decode_string),
    "prefix": ("prefix", decode_list),
    "scope": ("scope", decode_string),
    "subtag": ("subtag", decode_string),
    "suppress-script": ("suppress_script", decode_script),
    "tag": ("tag", decode_string),
    "type": ("type", decode_string),
}


def _decode_field(name: str, values: Sequence[str]) -> Result[tuple[str, Any]]:
    """Decode one field into an ``(attribute, value)`` pair."""
    if name not in FIELD_DECODERS:
        return ResultFailures.unknown_field(name, values)
    attribute, decoder = FIELD_DECODERS[name]
    return decoder(name, values).map(lambda value: (attribute, value))


def parse_record(fields: Mapping[str, Sequence[str]]) -> Result[Record]:
    """
    Decode every lexed field of a record block into a Record.

    The first failing field short-circuits; fields not present in the
    block keep the Record's empty defaults.
    """
    return Result.traverse(
        fields.items(),
        lambda item: _decode_field(*item),
    ).map(lambda pairs: Record(**dict(pairs)))


def parse_header(fields: Mapping[str, Sequence[str]]) -> Result[date]:
    """Decode the header block, which holds nothing but ``file-date``."""
    if set(fields) != {FILE_DATE}:
        return ResultFailures.malformed_header(
            f"first block must contain only {FILE_DATE!r}, got {dict(fields)!r}"
        )
    return decode_date(FILE_DATE, fields[FILE_DATE])


def parse_block(block: str) -> Result[Record]:
    """Lex and decode one record block."""
    return parse_record(lex_block(block))
