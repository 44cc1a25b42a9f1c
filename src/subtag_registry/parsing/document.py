"""
Document assembler — raw registry text into a RegistryDocument.

    text
      → split_blocks(text)
        → block 1: lex_block → parse_header → file date
        → block 2..n: lex_block → parse_record → Record
          → RegistryDocument(file_date, records)

The whole text is parsed in one pass. The first malformed block fails the
run; its failure message is prefixed with the block's 1-based position.
No cross-record validation happens here.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import date

import structlog
from railway.failure import FailureDescription
from railway.result import Result
from railway.result_failures import ResultFailures

from subtag_registry.domain.models import Record, RegistryDocument
from subtag_registry.parsing.blocks import split_blocks
from subtag_registry.parsing.lexer import lex_block
from subtag_registry.parsing.record_parser import parse_block, parse_header

log = structlog.get_logger()


def _at_block(position: int) -> Callable[[FailureDescription], FailureDescription]:
    return lambda err: err.with_context(f"block {position}")


def _parse_records(blocks: Iterator[str]) -> Result[list[Record]]:
    """Parse record blocks in order; the header was block 1."""
    return Result.traverse(
        enumerate(blocks, start=2),
        lambda item: parse_block(item[1]).map_failure(_at_block(item[0])),
    )


def assemble_document(file_date: date, records: list[Record]) -> RegistryDocument:
    return RegistryDocument(file_date=file_date, records=tuple(records))


def parse_registry(text: str) -> Result[RegistryDocument]:
    """
    Parse the full registry text into a RegistryDocument.

    Returns Result.failure(MALFORMED_HEADER) for text without blocks, or the
    failure of the first block that does not decode.
    """
    blocks = split_blocks(text)
    header = next(blocks, None)
    if header is None:
        return ResultFailures.malformed_header("registry text contains no blocks")

    return (
        parse_header(lex_block(header))
        .map_failure(_at_block(1))
        .flat_map(
            lambda file_date: _parse_records(blocks).map(
                lambda records: assemble_document(file_date, records)
            )
        )
        .peek(
            lambda document: log.info(
                "registry.parsed",
                file_date=document.file_date.isoformat(),
                records=len(document.records),
                by_type=document.count_by_type(),
            )
        )
    )
