"""
Pipeline — the ROP pipeline orchestrating one conversion run.

Domain layer — this is PURE BUSINESS LOGIC. No side effects, no I/O.
All I/O is injected via ports (Protocol interfaces).

The pipeline connects stages via flat_map, forming a railway:

  source.fetch()
    → parse_registry(text)
      → serializer.render(document)

Each stage returns Result[T]. Failures short-circuit automatically
through the ROP railway — no try/except needed.
"""

from __future__ import annotations

from railway.result import Result

from subtag_registry.domain.ports import DocumentSerializer, RegistrySource
from subtag_registry.parsing.document import parse_registry


def run_pipeline(
    source: RegistrySource,
    serializer: DocumentSerializer,
) -> Result[str]:
    """
    Execute a full registry conversion.

    Flow:
      1. Obtain the raw registry text (cache or HTTP)
      2. Parse it into a RegistryDocument
      3. Render the document to output text

    Returns Result[str] with the rendered document on success,
    or Result.failure with the error from the first failing stage.
    """
    return (
        source.fetch()
        .flat_map(parse_registry)
        .flat_map(serializer.render)
    )
