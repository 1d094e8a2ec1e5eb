"""
Accent and tilde stripping for cell values.

Only the characters in rules.REPLACEMENTS are touched. The input table is
never mutated; a new table is returned together with the number of cells
whose value changed.
"""

from __future__ import annotations

from typing import List

from .rules import REPLACEMENTS
from .table import NormalizedTable, ParsedTable, Record

_TRANSLATION = str.maketrans(REPLACEMENTS)


def normalize_text(text: str) -> str:
    if not text:
        return text
    return text.translate(_TRANSLATION)


def normalize(table: ParsedTable | NormalizedTable) -> NormalizedTable:
    changed = 0
    records: List[Record] = []

    for row in table.records:
        out: Record = {}
        for header in table.headers:
            original = row.get(header, "")
            value = normalize_text(original)
            if value != original:
                changed += 1
            out[header] = value
        records.append(out)

    return NormalizedTable(headers=tuple(table.headers), records=tuple(records), changed_count=changed)
