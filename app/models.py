from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class EncodingReport(BaseModel):
    detected: Optional[str] = Field(default=None, examples=["ascii"])
    decode_used: str = Field(default="iso-8859-1")
    output: str = Field(default="iso-8859-1")
    replaced_bytes: bool = False
    warnings: List[str] = Field(default_factory=list)


class ReportSummary(BaseModel):
    total_rows: int = 0
    valid_rows: int = 0
    error_rows: int = 0
    expected_columns: int = 0
    headers: List[str] = Field(default_factory=list)


class ReportItem(BaseModel):
    row: int
    issue: str = "row_column_mismatch"
    expected: int
    actual: int
    value: str


class ColumnStat(BaseModel):
    column: str
    non_empty: int
    fill_percent: float


class ValidationReport(BaseModel):
    filename: str
    summary: ReportSummary
    errors: List[ReportItem] = Field(default_factory=list)
    remaining_errors: int = 0
    columns: List[ColumnStat] = Field(default_factory=list)
    encoding: EncodingReport


class ProcessedCsv(BaseModel):
    filename: str
    encoding: str
    media_type: str
    sha256: str
    content_b64: str


class NormalizeResponse(BaseModel):
    report: ValidationReport
    changed_count: int
    preview: List[Dict[str, str]] = Field(default_factory=list)
    processed_csv: ProcessedCsv


class HealthResponse(BaseModel):
    ok: bool = True
