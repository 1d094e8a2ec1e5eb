"""
Diagnostics built from a parsed table for the presentation layer.

The core hands over the full error list; capping and truncation happen here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .rules import ERROR_EXCERPT_LENGTH, ERROR_PREVIEW_LIMIT, PREVIEW_CELL_LENGTH, PREVIEW_ROWS
from .table import NormalizedTable, ParsedTable, RowError


def _truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def summarize(table: ParsedTable) -> Dict[str, Any]:
    return {
        "total_rows": len(table.records) + len(table.row_errors),
        "valid_rows": len(table.records),
        "error_rows": len(table.row_errors),
        "expected_columns": table.expected_columns,
        "headers": list(table.headers),
    }


def error_items(errors: Sequence[RowError], limit: int = ERROR_PREVIEW_LIMIT) -> Dict[str, Any]:
    items = [
        {
            "row": e.line,
            "issue": e.issue,
            "expected": e.expected,
            "actual": e.actual,
            "value": _truncate(e.data, ERROR_EXCERPT_LENGTH),
        }
        for e in errors[:limit]
    ]
    return {"items": items, "remaining": max(0, len(errors) - limit)}


def column_stats(table: ParsedTable) -> List[Dict[str, Any]]:
    total = len(table.records)
    stats = []
    for header in table.headers:
        count = sum(1 for row in table.records if (row.get(header) or "").strip() != "")
        fill = round(count / total * 100, 1) if total else 0.0
        stats.append({"column": header, "non_empty": count, "fill_percent": fill})
    return stats


def validation_report(table: ParsedTable) -> Dict[str, Any]:
    errors = error_items(table.row_errors)
    return {
        "summary": summarize(table),
        "errors": errors["items"],
        "remaining_errors": errors["remaining"],
        "columns": column_stats(table),
    }


def preview(table: NormalizedTable, rows: int = PREVIEW_ROWS) -> List[Dict[str, str]]:
    return [
        {header: _truncate(row.get(header) or "", PREVIEW_CELL_LENGTH) for header in table.headers}
        for row in table.records[:rows]
    ]
