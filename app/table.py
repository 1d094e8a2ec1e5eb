from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

Record = Dict[str, str]


@dataclass(frozen=True)
class RowError:
    """A data line whose field count does not match the header."""
    line: int       # 1-based, header is line 1
    expected: int
    actual: int
    data: str       # raw, unsplit line
    issue: str = "row_column_mismatch"


@dataclass(frozen=True)
class ParsedTable:
    headers: Tuple[str, ...]
    records: Tuple[Record, ...] = ()
    row_errors: Tuple[RowError, ...] = ()

    @property
    def expected_columns(self) -> int:
        return len(self.headers)


@dataclass(frozen=True)
class NormalizedTable:
    headers: Tuple[str, ...]
    records: Tuple[Record, ...] = ()
    changed_count: int = field(default=0)
