from __future__ import annotations

import codecs
import logging
import os
import sys
from dataclasses import dataclass

from .rules import DEFAULT_INPUT_ENCODING, REPLACEMENTS

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_int(value: str | None, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def _parse_encoding(value: str | None, default: str) -> str:
    if not value:
        return default
    try:
        name = codecs.lookup(value.strip()).name
    except LookupError:
        return default
    # single-byte, and able to represent every character the normalizer maps
    sample = "".join(REPLACEMENTS)
    try:
        if len(sample.encode(name)) != len(sample):
            return default
    except (UnicodeEncodeError, LookupError):
        return default
    return name


def _parse_level(value: str | None, default: str) -> str:
    if value and value.strip().upper() in LOG_LEVELS:
        return value.strip().upper()
    return default


@dataclass(frozen=True)
class Settings:
    input_encoding: str = DEFAULT_INPUT_ENCODING
    max_upload_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        input_encoding=_parse_encoding(os.getenv("CSV_VALIDATOR_INPUT_ENCODING"), DEFAULT_INPUT_ENCODING),
        max_upload_bytes=_parse_int(os.getenv("CSV_VALIDATOR_MAX_UPLOAD_BYTES"), 10 * 1024 * 1024),
        log_level=_parse_level(os.getenv("CSV_VALIDATOR_LOG_LEVEL"), "INFO"),
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger("app")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
