"""
Field lexer — one block of registry text into raw field values.

The registry uses an RFC 2822-like record syntax:

    Type: language
    Subtag: sh
    Description: Serbo-Croatian
    Comments: sr, hr, bs are preferred for most modern uses
      and this is a note

A ``Name: value`` line opens a field; any other non-blank line continues the
open field. Names may repeat within a block, so every field maps to a list.
"""

from __future__ import annotations

import re

FIELD_LINE = re.compile(r"^((?:-|[A-Za-z])+): (.+)$")


def lex_block(block: str) -> dict[str, list[str]]:
    """
    Lex ``block`` into ``{lower-cased field name: [raw values]}``.

    Continuation lines are stripped and joined to the open value with a single
    space. Blank lines are skipped without closing the field. Keys appear in
    order of first occurrence; repeated names append to the same list.
    Continuations seen before the first field line are dropped.
    """
    fields: dict[str, list[str]] = {}
    key, value = "", ""
    for line in block.split("\n"):
        if not line.strip():
            continue
        if match := FIELD_LINE.match(line):
            if key:
                fields.setdefault(key, []).append(value)
            key, value = match.group(1).lower(), match.group(2)
            continue
        value += " " + line.strip()
    if key:
        fields.setdefault(key, []).append(value)
    return fields
