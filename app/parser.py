"""
Naive semicolon-delimited parsing with per-row column-count validation.

Rules:
- Lines are split on "\\n"; lines that are blank after trimming are dropped.
- The first remaining line is the header; its field count is the expected width.
- Fields are split on ";" with no quote awareness.
- Rows with the wrong width are collected as RowError and skipped, never fatal.
"""

from __future__ import annotations

import logging
from typing import List

from .errors import EmptyInput
from .rules import DELIMITER
from .table import ParsedTable, Record, RowError

logger = logging.getLogger(__name__)


def parse(raw_text: str) -> ParsedTable:
    lines = [line for line in raw_text.split("\n") if line.strip() != ""]
    if not lines:
        raise EmptyInput()

    headers = tuple(h.strip() for h in lines[0].split(DELIMITER))
    expected = len(headers)

    records: List[Record] = []
    row_errors: List[RowError] = []

    for i, line in enumerate(lines[1:], start=2):
        values = line.split(DELIMITER)

        if len(values) != expected:
            logger.debug("line %d: expected %d columns, found %d", i, expected, len(values))
            row_errors.append(RowError(line=i, expected=expected, actual=len(values), data=line))
            continue

        record: Record = {}
        for index, header in enumerate(headers):
            value = values[index] if index < len(values) else None
            record[header] = value.strip() if value is not None else ""
        records.append(record)

    logger.info(
        "parsed %d columns, %d valid rows, %d rejected rows",
        expected, len(records), len(row_errors),
    )
    return ParsedTable(headers=headers, records=tuple(records), row_errors=tuple(row_errors))
