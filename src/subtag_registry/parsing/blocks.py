"""Block splitting — cut raw registry text on its ``%%`` separator lines."""

from __future__ import annotations

from collections.abc import Iterator

BLOCK_SEPARATOR = "\n%%\n"


def split_blocks(text: str) -> Iterator[str]:
    """
    Lazily yield the blocks of ``text`` in source order.

    Each block keeps the newline that precedes its separator. The text after
    the last separator is the final block, unless it is empty.
    """
    start = 0
    while (index := text.find(BLOCK_SEPARATOR, start)) != -1:
        yield text[start : index + 1]
        start = index + len(BLOCK_SEPARATOR)
    if start < len(text):
        yield text[start:]
