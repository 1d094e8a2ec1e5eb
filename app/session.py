"""
Per-file session state and the pipeline steps that move it forward.

Each step takes a SessionState and returns a new one; nothing is kept between
files. Loading a file always starts from a blank state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from .encoding import decode_upload, encode_output
from .errors import InvalidFileType, NormalizationFailure, SerializationFailure
from .normalize import normalize
from .parser import parse
from .rules import ACCEPTED_EXTENSION, DEFAULT_INPUT_ENCODING
from .serialize import output_filename, serialize
from .table import NormalizedTable, ParsedTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    filename: str = ""
    encoding: str = DEFAULT_INPUT_ENCODING
    parsed: Optional[ParsedTable] = None
    normalized: Optional[NormalizedTable] = None
    encoding_report: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OutputFile:
    filename: str
    encoding: str
    content: bytes

    @property
    def media_type(self) -> str:
        return f"text/csv; charset={self.encoding}"


def check_filename(filename: str | None) -> str:
    if not filename or not filename.lower().endswith(ACCEPTED_EXTENSION):
        raise InvalidFileType()
    return filename


def load(filename: str | None, raw: bytes, encoding: str = DEFAULT_INPUT_ENCODING) -> SessionState:
    name = check_filename(filename)
    text, enc_report = decode_upload(raw, encoding)
    parsed = parse(text)
    logger.info("loaded %s (%d bytes)", name, len(raw))
    return SessionState(filename=name, encoding=encoding, parsed=parsed, encoding_report=enc_report)


def process(state: SessionState) -> SessionState:
    if state.parsed is None:
        raise NormalizationFailure("No file loaded")
    try:
        normalized = normalize(state.parsed)
    except Exception as exc:
        logger.exception("normalization failed for %s", state.filename)
        raise NormalizationFailure() from exc
    logger.info("%s: %d cells normalized", state.filename, normalized.changed_count)
    return replace(state, normalized=normalized)


def export(state: SessionState) -> OutputFile:
    if state.normalized is None:
        raise SerializationFailure("No processed data to export")
    try:
        content = encode_output(serialize(state.normalized), state.encoding)
    except Exception as exc:
        logger.exception("serialization failed for %s", state.filename)
        raise SerializationFailure() from exc
    return OutputFile(filename=output_filename(state.filename), encoding=state.encoding, content=content)
