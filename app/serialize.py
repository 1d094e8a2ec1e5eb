from __future__ import annotations

from .rules import ACCEPTED_EXTENSION, DELIMITER, LINE_TERMINATOR, OUTPUT_SUFFIX, QUOTE_TRIGGERS
from .table import NormalizedTable


def escape_field(value: str) -> str:
    if any(ch in value for ch in QUOTE_TRIGGERS):
        return '"' + value.replace('"', '""') + '"'
    return value


def serialize(table: NormalizedTable) -> str:
    """
    Render a table back to semicolon-delimited text.

    The header row is written as-is; cell values containing the delimiter,
    a double quote or a line break are quoted with inner quotes doubled.
    Every row, header included, ends with CRLF.
    """
    parts = [DELIMITER.join(table.headers) + LINE_TERMINATOR]

    for row in table.records:
        values = [escape_field(row.get(header) or "") for header in table.headers]
        parts.append(DELIMITER.join(values) + LINE_TERMINATOR)

    return "".join(parts)


def output_filename(filename: str) -> str:
    if filename.lower().endswith(ACCEPTED_EXTENSION):
        return filename[: -len(ACCEPTED_EXTENSION)] + OUTPUT_SUFFIX
    return filename + OUTPUT_SUFFIX
