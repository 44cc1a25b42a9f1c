"""
YAML serializer adapter — RegistryDocument to YAML text via PyYAML.

Adapter layer — implements the DocumentSerializer port.

Output shape:

    filedate: 2022-08-08
    entries:
    - added: 2005-10-16
      description:
      - Church Slavic
      - Church Slavonic
      subtag: cu
      type: language

Only present fields are emitted, in registry order. Dates render as
YYYY-MM-DD, script codes as their four characters, multi-valued fields
as sequences.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import structlog
import yaml
from railway import ErrorCode
from railway.result import Result

from subtag_registry.domain.models import Record, RegistryDocument, ScriptCode

log = structlog.get_logger()

# Registry field names whose output key is spelled differently.
OUTPUT_KEYS: dict[str, str] = {
    "macrolanguage": "macro-language",
}

# Output key back to the registry field name it was rendered from.
FIELD_NAMES: dict[str, str] = {key: name for name, key in OUTPUT_KEYS.items()}


def _to_plain(value: Any) -> Any:
    """Convert a field value to a type yaml.safe_dump can represent."""
    match value:
        case ScriptCode():
            return str(value)
        case tuple():
            return list(value)
        case date() | str():
            return value
    raise TypeError(f"Unsupported field value type: {type(value).__name__}")


def record_to_dict(record: Record) -> dict[str, Any]:
    return {
        OUTPUT_KEYS.get(name, name): _to_plain(value)
        for name, value in record.present_fields()
    }


def document_to_dict(document: RegistryDocument) -> dict[str, Any]:
    return {
        "filedate": document.file_date,
        "entries": [record_to_dict(record) for record in document.records],
    }


class YamlDocumentSerializer:
    """
    Render a RegistryDocument as a YAML mapping with ``filedate`` and ``entries``.

    Implements the DocumentSerializer port.
    All exceptions are caught at this adapter boundary via Result.from_computation().
    """

    def render(self, document: RegistryDocument) -> Result[str]:
        return Result.from_computation(
            lambda: self._do_render(document),
            ErrorCode.SERIALIZATION_ERROR,
            "Failed to render registry document as YAML",
        )

    def _do_render(self, document: RegistryDocument) -> str:
        text = yaml.safe_dump(
            document_to_dict(document),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
        log.info("serializer.complete", entries=len(document.records), size_chars=len(text))
        return text
